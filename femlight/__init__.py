# femlight - FEM model persistence
"""
FEMLIGHT: Reading and Writing Finite-Element Model Descriptions
===============================================================

This package provides:
- A text format for FEM entities (nodes, nodal loads)
- A registry that builds entities from the type tag in the file
- Resolution of GN references (load -> node) against the nodes already read
- Two distinct failure kinds: corrupt data (FEMIOError) and dangling
  references (ObjectNotFoundError)

ARCHITECTURE:
-------------
    io/             Token stream (whitespace, % comments, ints, floats, tags)
    registry.py     Tag -> factory mapping (FEM_REGISTRY)
    entities/       Node, LoadNode and the field-group read/write chain
    collection.py   NodeArray: GN lookup
    model.py        Model, ReadInfo, ModelReader, read_model, write_model
    tables.py       pandas views of nodes and loads
    exceptions.py   FEMError and friends
    config.py       Text format settings

Assembly and solving are not part of this package; it only produces the
model description a solver consumes.
"""

from .config import CONFIG, IOConfig
from .exceptions import (
    FEMError,
    FEMIOError,
    ObjectNotFoundError,
    DuplicateObjectError,
    UnknownTypeError,
    DuplicateTypeError,
)
from .registry import EntityRegistry, FEM_REGISTRY, register_entity
from .entities import Node, LoadNode, FieldGroup, FieldGroupIO
from .collection import NodeArray
from .model import Model, ReadInfo, ModelReader, read_model, write_model
from .io import FEMInputStream

__version__ = "0.1.0"

__all__ = [
    'CONFIG',
    'IOConfig',
    'FEMError',
    'FEMIOError',
    'ObjectNotFoundError',
    'DuplicateObjectError',
    'UnknownTypeError',
    'DuplicateTypeError',
    'EntityRegistry',
    'FEM_REGISTRY',
    'register_entity',
    'Node',
    'LoadNode',
    'FieldGroup',
    'FieldGroupIO',
    'NodeArray',
    'Model',
    'ReadInfo',
    'ModelReader',
    'read_model',
    'write_model',
    'FEMInputStream',
]
