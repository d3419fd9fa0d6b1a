"""
Collaborator protocols.

crud-fields never talks to storage, a validator or a template engine
directly. It only relies on the small structural interfaces below, so
any object with the right methods can be plugged in.
"""

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class MessageBag(Protocol):
    """Read-only lookup of messages (errors) or values (old input) by key."""

    def has(self, key: str) -> bool: ...

    def first(self, key: str) -> Any: ...


@runtime_checkable
class Record(Protocol):
    """The data record a form is bound to."""

    def get_attribute_value(self, key: str) -> Any: ...

    def set_attribute(self, key: str, value: Any) -> None: ...


@runtime_checkable
class RelatedRecord(Record, Protocol):
    """A record that can also resolve related entities by relation name."""

    def get_relation(self, name: str) -> Any: ...


@runtime_checkable
class ViewRenderer(Protocol):
    """Turns a view name plus a variable bag into markup."""

    def render(self, view_name: str, variables: Mapping[str, Any]) -> str: ...
