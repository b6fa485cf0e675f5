# femlight/entities/node.py
"""Node entity: a discretization point identified by its GN."""

from dataclasses import dataclass, field

import numpy as np

from ..io.stream import format_sized_vector, write_field
from ..registry import register_entity
from .base import GN_FIELDS, FieldGroup, FieldGroupIO, read_sized_vector


def _read_coords(node, stream, info) -> bool:
    coords = read_sized_vector(stream)
    if coords is None:
        return False
    node.coords = coords
    return True


def _write_coords(node, stream) -> None:
    write_field(stream, format_sized_vector(node.coords), "Nodal coordinates")


@register_entity("Node")
@dataclass(eq=False)
class Node(FieldGroupIO):
    """
    A point of the model, 1D/2D/3D depending on len(coords).

    Parameters:
    -----------
    gn : int
        Global number, -1 until assigned
    coords : array-like
        Nodal coordinates

    Examples:
    ---------
    >>> n = Node(gn=3, coords=[0.0, 2.5])
    >>> n.dim
    2
    """
    gn: int = -1
    coords: np.ndarray = field(default_factory=lambda: np.zeros(0))

    FIELDS = GN_FIELDS + (
        FieldGroup("coords", _read_coords, _write_coords),
    )
    READ_ERROR = "Error reading FEM node!"
    WRITE_ERROR = "Error writing FEM node!"
    COLLECTION = "nodes"

    def __post_init__(self):
        self.coords = np.asarray(self.coords, dtype=float).ravel()

    @property
    def dim(self) -> int:
        return self.coords.size
