# femlight/exceptions.py
"""
EXCEPTIONS: What Can Go Wrong While Reading or Writing a Model
==============================================================

Two failure kinds surface from entity reads and writes:

    FEMIOError           The stream could not supply a well formed token,
                         or could not accept a write. The data is corrupt.

    ObjectNotFoundError  A referenced GN is not in the collection passed as
                         context. The data may be fine but the record order
                         is wrong (e.g. a load written before its node).

They are raised separately because the fix is different: reorder the model
file vs. repair the data.

A collection refuses a second object with the same GN:

    DuplicateObjectError A node (or other entity) GN is already taken.

The registry adds two more:

    UnknownTypeError     No kind is registered under a tag / class id.
    DuplicateTypeError   A tag is registered twice (setup error).

All of them derive from FEMError so callers can catch the whole family.
"""

from typing import Optional


class FEMError(RuntimeError):
    """Base class of every femlight failure."""

    def __init__(self, location: str, message: str):
        self.location = location
        self.message = message
        super().__init__(f"{location}: {message}")


class FEMIOError(FEMError):
    """Raised when a stream cannot be read or written."""
    pass


class ObjectNotFoundError(FEMError):
    """
    Raised when a GN cannot be resolved against an entity collection.

    Parameters:
    -----------
    location : str
        Operation that failed, e.g. "NodeArray.find()" or "LoadNode.read()"
    base_class_name : str
        Kind of entity that was looked up, e.g. "Node"
    gn : int
        The GN that could not be found
    """

    def __init__(self, location: str, base_class_name: str, gn: int):
        self.base_class_name = base_class_name
        self.gn = gn
        super().__init__(
            location,
            f"Object not found ({base_class_name}, GN={gn})!"
        )

    def rewrap(self, location: str) -> "ObjectNotFoundError":
        """Same lookup failure, reported from another operation."""
        return ObjectNotFoundError(location, self.base_class_name, self.gn)


class DuplicateObjectError(FEMError):
    """
    Raised when an entity collection already holds an object with the GN
    being added.
    """

    def __init__(self, location: str, base_class_name: str, gn: int):
        self.base_class_name = base_class_name
        self.gn = gn
        super().__init__(
            location,
            f"Duplicate object ({base_class_name}, GN={gn})!"
        )


class UnknownTypeError(FEMError):
    """Raised when the registry has no kind for a tag or class id."""

    def __init__(self, location: str, tag, message: Optional[str] = None):
        self.tag = tag
        super().__init__(location, message or f"Unknown entity type {tag!r}")


class DuplicateTypeError(FEMError):
    """Raised when two kinds are registered under the same tag."""

    def __init__(self, location: str, tag: str):
        self.tag = tag
        super().__init__(location, f"Entity type {tag!r} is already registered")
