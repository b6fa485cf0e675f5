# File: tests/test_collection.py
"""
Test NodeArray: GN lookup, duplicates, renumbering.
"""

import pytest

from femlight import DuplicateObjectError, FEMError, Node, NodeArray, ObjectNotFoundError


def make_nodes():
    return NodeArray([
        Node(gn=3, coords=[0.0, 0.0]),
        Node(gn=7, coords=[4.0, 0.0]),
        Node(gn=5, coords=[4.0, 3.0]),
    ])


def test_find_by_gn():
    nodes = make_nodes()

    assert nodes.find(7).coords.tolist() == [4.0, 0.0]
    assert 5 in nodes
    assert nodes.get(4) is None
    assert len(nodes) == 3
    # Insertion order is kept, not GN order
    assert nodes.gns() == [3, 7, 5]
    assert nodes[2].gn == 5


def test_find_missing_gn():
    """
    A miss raises ObjectNotFoundError carrying the kind and the GN.
    """
    nodes = make_nodes()

    with pytest.raises(ObjectNotFoundError) as exc:
        nodes.find(42)

    assert exc.value.gn == 42
    assert exc.value.base_class_name == "Node"
    assert exc.value.location == "NodeArray.find()"


def test_duplicate_gn_rejected():
    nodes = make_nodes()
    with pytest.raises(DuplicateObjectError) as exc:
        nodes.append(Node(gn=7, coords=[1.0, 1.0]))

    assert isinstance(exc.value, FEMError)
    assert exc.value.gn == 7
    assert exc.value.base_class_name == "Node"
    assert exc.value.location == "NodeArray.append()"
    assert len(nodes) == 3
    assert nodes.find(7).coords.tolist() == [4.0, 0.0]


def test_unassigned_gns_allowed_until_renumber():
    nodes = NodeArray([Node(coords=[0.0]), Node(coords=[1.0])])
    assert len(nodes) == 2
    assert -1 not in nodes

    nodes.renumber()

    assert nodes.gns() == [0, 1]
    assert nodes.find(1).coords.tolist() == [1.0]


def test_renumber_rebuilds_index():
    nodes = make_nodes()
    nodes.renumber()

    assert nodes.gns() == [0, 1, 2]
    assert nodes.find(1).coords.tolist() == [4.0, 0.0]
    assert 7 not in nodes
