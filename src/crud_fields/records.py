"""
Record adapters.

Wrap plain Python objects or dicts so they satisfy the `Record`
protocol expected by fields.
"""

from typing import Any, Mapping, MutableMapping


class ObjectRecord:
    """
    Record backed by attribute access on any object (dataclass,
    pydantic model, ORM instance, ...).

    Relations are resolved as attributes too, so `get_relation("category")`
    returns `obj.category`.
    """

    def __init__(self, obj: Any):
        self.obj = obj

    def get_attribute_value(self, key: str) -> Any:
        return getattr(self.obj, key, None)

    def set_attribute(self, key: str, value: Any) -> None:
        setattr(self.obj, key, value)

    def get_relation(self, name: str) -> Any:
        return getattr(self.obj, name, None)

    def __repr__(self) -> str:
        return f"ObjectRecord({self.obj!r})"


class MappingRecord:
    """Record backed by a mutable mapping, with optional related entities."""

    def __init__(
        self,
        attributes: MutableMapping[str, Any] | None = None,
        relations: dict[str, Any] | None = None,
    ):
        self.attributes = attributes if attributes is not None else {}
        self.relations = relations or {}

    def get_attribute_value(self, key: str) -> Any:
        return self.attributes.get(key)

    def set_attribute(self, key: str, value: Any) -> None:
        self.attributes[key] = value

    def get_relation(self, name: str) -> Any:
        return self.relations.get(name)

    def __repr__(self) -> str:
        return f"MappingRecord({self.attributes!r})"


def read_attribute(entity: Any, name: str) -> Any:
    """
    Read `name` from a related entity of unknown shape.

    Works for Record implementations, mappings and plain objects.
    """
    if entity is None:
        return None
    if hasattr(entity, "get_attribute_value"):
        return entity.get_attribute_value(name)
    if isinstance(entity, Mapping):
        return entity.get(name)
    return getattr(entity, name, None)
