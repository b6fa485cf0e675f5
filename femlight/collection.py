# femlight/collection.py
"""
NODE COLLECTION: Resolving GNs to Nodes
=======================================

Loads (and anything else that acts on a node) store the node's GN, not the
node. Whoever needs the node asks the collection:

    node = nodes.find(load.node_gn)

The collection owns its nodes for the lifetime of the model. It is filled
first and only looked up afterwards; lookups while it is still being filled
only see the nodes appended so far.
"""

from typing import Dict, Iterable, Iterator, List, Optional

from .entities.node import Node
from .exceptions import DuplicateObjectError, ObjectNotFoundError


class NodeArray:
    """
    Ordered, GN-indexed collection of nodes.

    Examples:
    ---------
    >>> nodes = NodeArray([Node(gn=3, coords=[0.0, 1.0])])
    >>> nodes.find(3).coords
    array([0., 1.])
    >>> 42 in nodes
    False
    >>> nodes.find(42)
    Traceback (most recent call last):
        ...
    femlight.exceptions.ObjectNotFoundError: NodeArray.find(): Object not found (Node, GN=42)!
    """

    BASE_CLASS_NAME = "Node"

    def __init__(self, nodes: Optional[Iterable[Node]] = None):
        self._nodes: List[Node] = []
        self._index: Dict[int, Node] = {}
        for node in nodes or ():
            self.append(node)

    def append(self, node: Node) -> None:
        """
        Add a node.

        Nodes with an unassigned GN (-1) are accepted; renumber() gives them
        one. Two nodes may not share an assigned GN: DuplicateObjectError.
        """
        if node.gn >= 0:
            if node.gn in self._index:
                raise DuplicateObjectError(
                    "NodeArray.append()", self.BASE_CLASS_NAME, node.gn
                )
            self._index[node.gn] = node
        self._nodes.append(node)

    def find(self, gn: int) -> Node:
        """The node with this GN; ObjectNotFoundError if there is none."""
        try:
            return self._index[gn]
        except KeyError:
            raise ObjectNotFoundError("NodeArray.find()", self.BASE_CLASS_NAME, gn) from None

    def get(self, gn: int, default: Optional[Node] = None) -> Optional[Node]:
        return self._index.get(gn, default)

    def renumber(self) -> None:
        """Set every node's GN to its position in the collection."""
        for i, node in enumerate(self._nodes):
            node.gn = i
        self._index = {node.gn: node for node in self._nodes}

    def gns(self) -> List[int]:
        return [node.gn for node in self._nodes]

    def __contains__(self, gn: int) -> bool:
        return gn in self._index

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __getitem__(self, i: int) -> Node:
        return self._nodes[i]

    def __repr__(self) -> str:
        return f"NodeArray(n={len(self._nodes)})"
