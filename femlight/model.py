# femlight/model.py
"""
MODEL FILES: Loading and Saving a Whole Model
=============================================

PURPOSE:
--------
A model file is a sequence of tagged entity blocks terminated by <END>:

    <Node>
        0           % Global object number
        2 0.0 0.0   % Nodal coordinates
    <Node>
        1           % Global object number
        2 4.0 0.0   % Nodal coordinates
    <LoadNode>
        0           % Global object number
        1           % GN of node on which the load acts
        2 0.0 -1000.0   % Force vector (first number is the size of a vector)
    <END>

ModelReader reads one block at a time:

    1. read the tag
    2. FEM_REGISTRY.create(tag)            → empty entity of that kind
    3. entity.read(stream, ReadInfo(nodes)) → fields + resolved references
    4. append to model.nodes or model.loads (the kind's COLLECTION)

RECORD ORDER:
-------------
Loads resolve their node GN against the nodes read SO FAR, so every node
block must come before the blocks that reference it. write_model() always
writes nodes first. A file that breaks this rule fails with
ObjectNotFoundError, not FEMIOError: the data is fine, the order is not.

ERROR POLICY:
-------------
By default every failure propagates unchanged. With skip_errors=True the
reader logs the failure, records it in reader.errors, resynchronises on the
next tag and carries on. Whether a partially read model is usable is the
caller's decision.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, TextIO

from .collection import NodeArray
from .config import CONFIG
from .entities.load import LoadNode
from .entities.node import Node
from .exceptions import (
    DuplicateObjectError,
    FEMError,
    FEMIOError,
    ObjectNotFoundError,
    UnknownTypeError,
)
from .io.stream import FEMInputStream, as_input_stream
from .registry import FEM_REGISTRY, EntityRegistry

logger = logging.getLogger(__name__)


@dataclass
class ReadInfo:
    """Context handed to entity.read(): the collections references resolve against."""
    nodes: NodeArray


@dataclass
class Model:
    """
    Nodes and loads of one FEM model.

    Examples:
    ---------
    >>> m = Model()
    >>> n = m.add_node(Node(gn=0, coords=[0.0, 0.0]))
    >>> load = m.add_load(LoadNode.on(n, [0.0, -1000.0]))
    >>> len(m.nodes), len(m.loads)
    (1, 1)
    """
    nodes: NodeArray = field(default_factory=NodeArray)
    loads: List[LoadNode] = field(default_factory=list)

    def add_node(self, node: Node) -> Node:
        self.nodes.append(node)
        return node

    def add_load(self, load: LoadNode) -> LoadNode:
        self.loads.append(load)
        return load

    def renumber(self) -> None:
        """
        Give nodes and loads consecutive GNs starting at 0.

        Load targets are remapped to the new node GNs. Every target must
        resolve first: a dangling node GN raises ObjectNotFoundError and
        nothing is renumbered, since its old value could name another node
        afterwards.
        """
        for load in self.loads:
            if load.node_gn is not None and load.node_gn not in self.nodes:
                raise ObjectNotFoundError(
                    "Model.renumber()", self.nodes.BASE_CLASS_NAME, load.node_gn
                )

        old_to_new = {}
        for i, node in enumerate(self.nodes):
            if node.gn >= 0:
                old_to_new[node.gn] = i
        for load in self.loads:
            if load.node_gn is not None:
                load.node_gn = old_to_new[load.node_gn]
        self.nodes.renumber()
        for i, load in enumerate(self.loads):
            load.gn = i

    def read_info(self) -> ReadInfo:
        return ReadInfo(nodes=self.nodes)


class ModelReader:
    """
    Reads tagged entity blocks into a Model.

    Parameters:
    -----------
    registry : EntityRegistry
        Where tags are turned into entities
    skip_errors : bool
        If True, a block that fails to read is logged, recorded in
        self.errors and skipped. If False (default), the error propagates.
    """

    RECOVERABLE = (FEMIOError, ObjectNotFoundError, DuplicateObjectError, UnknownTypeError)

    def __init__(self, registry: EntityRegistry = FEM_REGISTRY, skip_errors: bool = False):
        self.registry = registry
        self.skip_errors = skip_errors
        self.errors: List[FEMError] = []

    def read(self, source, model: Optional[Model] = None) -> Model:
        """
        Read blocks until <END> or the end of the input.

        Parameters:
        -----------
        source : str, text stream or FEMInputStream
        model : Model, optional
            Model to append to (its nodes are visible to the loads read)

        Returns:
        --------
        Model
        """
        stream = as_input_stream(source)
        model = model if model is not None else Model()
        self.errors = []

        while not stream.at_end():
            try:
                obj = self.read_object(stream, model)
                if obj is None:
                    break
                self._add(model, obj)
            except self.RECOVERABLE as e:
                if not self.skip_errors:
                    raise
                logger.warning("Skipping block at offset %d: %s", stream.position, e)
                self.errors.append(e)
                if not stream.skip_to_tag():
                    break

        logger.debug("Read model: %d nodes, %d loads, %d errors",
                     len(model.nodes), len(model.loads), len(self.errors))
        return model

    def read_object(self, stream: FEMInputStream, model: Model):
        """
        Read one tagged block; None at <END>.

        The tag is consumed before the entity is created, so an unknown tag
        leaves the stream at the unknown block's first field.
        """
        stream.skip_whitespace()
        tag = stream.read_tag()
        if tag is None:
            raise FEMIOError("ModelReader.read_object()", "Expected an entity tag!")
        if tag == CONFIG.end_tag:
            return None

        obj = self.registry.create(tag)
        obj.read(stream, model.read_info())
        return obj

    def _add(self, model: Model, obj) -> None:
        collection = getattr(obj, "COLLECTION", None)
        if collection == "nodes":
            model.add_node(obj)
        elif collection == "loads":
            model.add_load(obj)
        else:
            raise UnknownTypeError(
                "ModelReader.read()", obj.TAG,
                f"Entity type {obj.TAG!r} has no place in a Model"
            )


def read_model(source, registry: EntityRegistry = FEM_REGISTRY,
               skip_errors: bool = False) -> Model:
    """Read a model file (str, text stream or FEMInputStream)."""
    return ModelReader(registry, skip_errors=skip_errors).read(source)


def write_model(model: Model, stream: TextIO,
                registry: EntityRegistry = FEM_REGISTRY) -> None:
    """
    Write all nodes, then all loads, then the end tag.

    Raises:
    -------
    FEMIOError
        If any entity (or the end tag) cannot be written
    """
    for node in model.nodes:
        node.write(stream, registry=registry)
    for load in model.loads:
        load.write(stream, registry=registry)
    try:
        stream.write(
            f"{CONFIG.tag_open}{CONFIG.end_tag}{CONFIG.tag_close}"
            f"{CONFIG.comment_sep}{CONFIG.comment_char} End of FEM model\n"
        )
    except (OSError, ValueError) as e:
        raise FEMIOError("write_model()", "Error writing end of FEM model!") from e
