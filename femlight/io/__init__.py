# femlight/io - Text stream plumbing
"""
IO: THE TEXT FORMAT UNDERNEATH EVERY ENTITY
===========================================

Entities never touch characters directly. They ask an FEMInputStream for
ints, floats, vectors and tags, and write through write_tag()/write_field().
"""

from .stream import (
    FEMInputStream,
    as_input_stream,
    format_float,
    format_vector,
    format_sized_vector,
    write_tag,
    write_field,
)

__all__ = [
    'FEMInputStream',
    'as_input_stream',
    'format_float',
    'format_vector',
    'format_sized_vector',
    'write_tag',
    'write_field',
]
