# femlight/tables.py
"""
TABLES: Models as DataFrames
============================

Quick tabular views of what a model file contained, handy for checking a
freshly loaded model or comparing two of them:

    >>> model = read_model(open("frame.fem"))
    >>> nodes_frame(model.nodes)
       gn    x    y
    0   0  0.0  0.0
    1   1  4.0  0.0
    >>> loads_frame(model.loads)
       gn  node_gn  n_dof   f0      f1
    0   0        1      2  0.0 -1000.0

Vectors of different lengths are padded with NaN.
"""

from typing import Iterable, List

import numpy as np
import pandas as pd

from .entities.load import LoadNode
from .entities.node import Node

COORD_NAMES = ['x', 'y', 'z']


def _padded(vectors: List[np.ndarray]) -> np.ndarray:
    width = max((v.size for v in vectors), default=0)
    out = np.full((len(vectors), width), np.nan)
    for i, v in enumerate(vectors):
        out[i, :v.size] = v
    return out


def nodes_frame(nodes: Iterable[Node]) -> pd.DataFrame:
    """
    One row per node: gn plus coordinate columns.

    Coordinates are named x, y, z for up to 3 dimensions, x0..xN-1 beyond.
    """
    nodes = list(nodes)
    coords = _padded([n.coords for n in nodes])
    width = coords.shape[1]
    names = COORD_NAMES[:width] if width <= len(COORD_NAMES) else [f"x{i}" for i in range(width)]

    df = pd.DataFrame(coords, columns=names)
    df.insert(0, 'gn', [n.gn for n in nodes])
    return df


def loads_frame(loads: Iterable[LoadNode]) -> pd.DataFrame:
    """One row per load: gn, node_gn, n_dof and force columns f0..fN-1."""
    loads = list(loads)
    forces = _padded([load.force for load in loads])

    df = pd.DataFrame(forces, columns=[f"f{i}" for i in range(forces.shape[1])])
    df.insert(0, 'n_dof', [load.force.size for load in loads])
    df.insert(0, 'node_gn', pd.array([load.node_gn for load in loads], dtype="Int64"))
    df.insert(0, 'gn', [load.gn for load in loads])
    return df
