# femlight/entities - Persistent FEM model objects
"""
ENTITIES: Objects That Live in a Model File
===========================================

Importing this package registers every kind in FEM_REGISTRY:

    Node        discretization point (GN + coordinates)
    LoadNode    force vector acting on one node (GN + node GN + force)

To add a kind: write its field-group functions, extend the parent's FIELDS
tuple, decorate the class with @register_entity, and set COLLECTION to the
Model list it belongs in.
"""

from .base import FieldGroup, FieldGroupIO, GN_FIELDS, read_sized_vector
from .node import Node
from .load import LoadNode, LOAD_FIELDS, LOAD_NODE_FIELDS

__all__ = [
    'FieldGroup',
    'FieldGroupIO',
    'GN_FIELDS',
    'LOAD_FIELDS',
    'LOAD_NODE_FIELDS',
    'read_sized_vector',
    'Node',
    'LoadNode',
]
