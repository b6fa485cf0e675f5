# femlight/entities/load.py
"""
LOADS: External Forces Acting on the Model
==========================================

LoadNode applies a force vector to one node:

    <LoadNode>
        0               % Global object number
        3               % GN of node on which the load acts
        2 1.5 -2.25     % Force vector (first number is the size of a vector)

The node is referenced by GN only. The load never owns the node; it is
resolved against the node collection of the model it belongs to, and
reading a load checks that the GN resolves before accepting it.

The force vector has one entry per degree of freedom of the node, e.g.
[Fx, Fy] for a 2D truss node or [Fx, Fy, Mz] for a 2D frame node. Its length
is written right before its values so the two can never disagree.
"""

from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from ..io.stream import format_sized_vector, write_field
from ..registry import register_entity
from .base import GN_FIELDS, FieldGroup, FieldGroupIO, read_sized_vector
from .node import Node

# Loads add nothing to the common header
LOAD_FIELDS = GN_FIELDS


def _read_node_target(load, stream, info) -> bool:
    if info is None:
        # Caller misuse, not a read failure
        raise TypeError("Reading a node load needs a ReadInfo with the node collection")

    stream.skip_whitespace()
    gn = stream.read_int()
    if gn is None:
        return False

    # Raises ObjectNotFoundError; node_gn stays untouched in that case
    info.nodes.find(gn)
    load.node_gn = gn
    return True


def _write_node_target(load, stream) -> None:
    if load.node_gn is None:
        raise ValueError("LoadNode has no target node")
    write_field(stream, str(load.node_gn), "GN of node on which the load acts")


def _read_force(load, stream, info) -> bool:
    force = read_sized_vector(stream)
    if force is None:
        return False
    load.force = force
    return True


def _write_force(load, stream) -> None:
    write_field(
        stream,
        format_sized_vector(load.force),
        "Force vector (first number is the size of a vector)",
    )


LOAD_NODE_FIELDS = LOAD_FIELDS + (
    FieldGroup("node", _read_node_target, _write_node_target),
    FieldGroup("force", _read_force, _write_force),
)


@register_entity("LoadNode")
@dataclass(eq=False)
class LoadNode(FieldGroupIO):
    """
    A force vector applied to a single node.

    Parameters:
    -----------
    gn : int
        Global number of the load, -1 until assigned
    node_gn : int or None
        GN of the node the load acts on; None until set or read
    force : array-like
        Force magnitudes, one per DOF of the node

    Examples:
    ---------
    >>> load = LoadNode.on(Node(gn=3, coords=[0.0, 0.0]), [1.5, -2.25])
    >>> load.node_gn, load.force.size
    (3, 2)
    """
    gn: int = -1
    node_gn: Optional[int] = None
    force: np.ndarray = field(default_factory=lambda: np.zeros(0))

    FIELDS = LOAD_NODE_FIELDS
    READ_ERROR = "Error reading FEM load!"
    WRITE_ERROR = "Error writing FEM load!"
    COLLECTION = "loads"

    def __post_init__(self):
        self.force = np.asarray(self.force, dtype=float).ravel()

    @classmethod
    def on(cls, node: Node, force, gn: int = -1) -> "LoadNode":
        """Load acting on an existing node."""
        return cls(gn=gn, node_gn=node.gn, force=force)

    def node(self, nodes) -> Node:
        """Resolve the target node against a node collection."""
        return nodes.find(self.node_gn)
