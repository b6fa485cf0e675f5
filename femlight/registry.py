# femlight/registry.py
"""
ENTITY REGISTRY: Building Entities From Their Type Tag
======================================================

PURPOSE:
--------
A model file names the kind of every block with a tag (<Node>, <LoadNode>).
The loader needs to turn that name into a fresh, empty object of the right
type before it can call read() on it. The registry is that mapping:

    tag  ──►  (class id, nullary factory)

The class id doubles as the output format id (OFID) used by write(): a
negative OFID means "the id this kind was registered under".

USAGE:
------
    @register_entity("LoadNode")
    @dataclass
    class LoadNode(FieldGroupIO):
        ...

    load = FEM_REGISTRY.create("LoadNode")     # LoadNode()
    ofid = FEM_REGISTRY.class_id("LoadNode")   # e.g. 1
    FEM_REGISTRY.tag_of(ofid)                  # "LoadNode"

Registration happens once per kind when its module is imported. The registry
is read-only after that; registering from several threads is not supported.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from .exceptions import DuplicateTypeError, UnknownTypeError

logger = logging.getLogger(__name__)


class EntityRegistry:
    """Maps type tags to class ids and factories."""

    def __init__(self, name: str = "registry"):
        self.name = name
        self._factories: Dict[str, Callable[[], Any]] = {}
        self._ids: Dict[str, int] = {}
        self._tags: List[str] = []

    def register(self, tag: str, factory: Callable[[], Any]) -> int:
        """
        Register a kind and return its class id.

        Raises:
        -------
        DuplicateTypeError
            If the tag is already registered
        """
        if tag in self._factories:
            raise DuplicateTypeError(f"{self.name}.register()", tag)
        class_id = len(self._tags)
        self._factories[tag] = factory
        self._ids[tag] = class_id
        self._tags.append(tag)
        logger.debug("Registered %r as class id %d in %s", tag, class_id, self.name)
        return class_id

    def create(self, tag: str) -> Any:
        """New default-initialized entity of the kind registered as tag."""
        try:
            factory = self._factories[tag]
        except KeyError:
            raise UnknownTypeError(f"{self.name}.create()", tag) from None
        return factory()

    def create_by_id(self, class_id: int) -> Any:
        return self.create(self.tag_of(class_id))

    def class_id(self, tag: str) -> int:
        try:
            return self._ids[tag]
        except KeyError:
            raise UnknownTypeError(f"{self.name}.class_id()", tag) from None

    def tag_of(self, class_id: int) -> str:
        if not 0 <= class_id < len(self._tags):
            raise UnknownTypeError(
                f"{self.name}.tag_of()", class_id,
                f"No entity type registered with class id {class_id}"
            )
        return self._tags[class_id]

    def tags(self) -> List[str]:
        """Registered tags in registration order."""
        return list(self._tags)

    def __contains__(self, tag: str) -> bool:
        return tag in self._factories

    def __len__(self) -> int:
        return len(self._tags)

    def __repr__(self) -> str:
        return f"EntityRegistry({self.name!r}, tags={self._tags})"


# The process-wide registry; filled when femlight.entities is imported
FEM_REGISTRY = EntityRegistry("FEM_REGISTRY")


def register_entity(tag: Optional[str] = None, registry: EntityRegistry = FEM_REGISTRY):
    """
    Class decorator registering the class itself as the factory.

    The tag defaults to the class name and is stored on the class as TAG.
    """
    def decorate(cls):
        cls.TAG = tag or cls.__name__
        registry.register(cls.TAG, cls)
        return cls
    return decorate
