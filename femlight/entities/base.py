# femlight/entities/base.py
"""
FIELD GROUPS: Chained Serialization Without Virtual Dispatch
============================================================

PURPOSE:
--------
Every entity kind serializes its parent's fields first, then its own. The
stream for a LoadNode looks like:

    <LoadNode>       ← tag, written by write() / consumed by the loader
        0            ← GN_FIELDS   (common to every entity)
        3            ← node target (LoadNode)
        2 1.5 -2.25  ← force       (LoadNode)

Instead of each class calling super().read(), each kind lists its field
groups in order, and a derived kind's list is its parent's list plus its
own:

    GN_FIELDS        = (gn,)
    LOAD_FIELDS      = GN_FIELDS
    LOAD_NODE_FIELDS = LOAD_FIELDS + (node_target, force)

FieldGroupIO.read() and .write() walk that tuple.

READ CONTRACT:
--------------
A group's read function returns False when the stream could not supply a
well formed token. The walk stops at the first False and raises FEMIOError
(the shared failure path). A group that cannot resolve a reference raises
ObjectNotFoundError right away instead; the walk re-raises it with the
entity's own operation name, keeping the looked-up kind and GN.

The end-of-read stream check is kept separate from the resolution failure
on purpose: a resolution failure never reaches it.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, TextIO, Tuple

import numpy as np

from ..exceptions import FEMIOError, ObjectNotFoundError
from ..io.stream import FEMInputStream, as_input_stream, write_field, write_tag
from ..registry import FEM_REGISTRY, EntityRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldGroup:
    """
    One step of an entity's serialization.

    Parameters:
    -----------
    name : str
        Short label, used in debug logging
    read : callable(entity, stream, info) -> bool
        Parse the group's tokens and store them on the entity.
        False means the stream failed.
    write : callable(entity, stream) -> None
        Write the group's field lines.
    """
    name: str
    read: Callable[[Any, FEMInputStream, Any], bool]
    write: Callable[[Any, TextIO], None]


def read_sized_vector(stream: FEMInputStream) -> Optional[np.ndarray]:
    """Read 'N v1 ... vN'; None if the size or any value fails."""
    stream.skip_whitespace()
    n = stream.read_int()
    if n is None:
        return None
    stream.skip_whitespace()
    return stream.read_vector(n)


def _read_gn(obj, stream: FEMInputStream, info) -> bool:
    stream.skip_whitespace()
    gn = stream.read_int()
    if gn is None:
        return False
    obj.gn = gn
    return True


def _write_gn(obj, stream: TextIO) -> None:
    write_field(stream, str(obj.gn), "Global object number")


GN_FIELDS: Tuple[FieldGroup, ...] = (
    FieldGroup("gn", _read_gn, _write_gn),
)


class FieldGroupIO:
    """
    read()/write() for entities described by a FIELDS tuple.

    Subclasses set:
        FIELDS       ordered field groups (parent groups first)
        READ_ERROR   message of the FEMIOError raised by read()
        WRITE_ERROR  message of the FEMIOError raised by write()
    and get TAG from register_entity().
    """

    TAG = None
    FIELDS: Tuple[FieldGroup, ...] = GN_FIELDS
    READ_ERROR = "Error reading FEM object!"
    WRITE_ERROR = "Error writing FEM object!"

    def read(self, stream, info=None) -> None:
        """
        Populate this entity from a stream positioned after its tag.

        Parameters:
        -----------
        stream : FEMInputStream or str
            Reading consumes this entity's fields and leaves a FEMInputStream
            at the next block. Wrap a file in one FEMInputStream and pass that
            to every read(); a str is read once and discarded.
        info : ReadInfo, optional
            Context with the collections references are resolved against

        Raises:
        -------
        TypeError
            stream is neither a FEMInputStream nor a str
        FEMIOError
            A token was missing or malformed
        ObjectNotFoundError
            A referenced GN is not in the context collection
        """
        location = f"{type(self).__name__}.read()"
        if not isinstance(stream, (FEMInputStream, str)):
            raise TypeError(
                f"{location} needs a FEMInputStream or str, not "
                f"{type(stream).__name__}; wrap the file in FEMInputStream first"
            )
        stream = as_input_stream(stream)

        failed = False
        for group in self.FIELDS:
            try:
                ok = group.read(self, stream, info)
            except ObjectNotFoundError as e:
                raise e.rewrap(location) from e
            if not ok:
                logger.debug("%s: field group %r failed at offset %d",
                             location, group.name, stream.position)
                failed = True
                break

        if failed or not stream.ok:
            raise FEMIOError(location, self.READ_ERROR)

        logger.debug("Read %s GN=%s", type(self).__name__, getattr(self, "gn", None))

    def write(self, stream: TextIO, ofid: int = -1,
              registry: EntityRegistry = FEM_REGISTRY) -> None:
        """
        Write this entity as a tagged block.

        Parameters:
        -----------
        stream : text stream
        ofid : int
            Output format id, i.e. the class id whose tag heads the block.
            Negative means this kind's own registered id.
        registry : EntityRegistry
            Where class ids are looked up

        Raises:
        -------
        FEMIOError
            The stream rejected the write, or the entity cannot be written
        UnknownTypeError
            ofid is not a registered class id (nothing is written)
        """
        if ofid < 0:
            ofid = registry.class_id(self.TAG)
        tag = registry.tag_of(ofid)

        location = f"{type(self).__name__}.write()"
        try:
            write_tag(stream, tag)
            for group in self.FIELDS:
                group.write(self, stream)
        except (OSError, ValueError) as e:
            raise FEMIOError(location, self.WRITE_ERROR) from e
