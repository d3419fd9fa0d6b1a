"""
Dict-backed message bags.

A bag maps a key to one or more messages. Error bags hold validation
messages reported by an external validator; old-input bags hold the
values of the previous submission.
"""

from typing import Any, Iterable, Iterator, Mapping

from crud_fields.models.violations import ValidationReport


class MessageBag:
    """
    Ordered mapping of key -> list of messages.

    Usage:
        errors = MessageBag({"title": "The title field is required."})
        errors.has("title")    # True
        errors.first("title")  # "The title field is required."
    """

    def __init__(self, messages: Mapping[str, Any] | None = None):
        self._messages: dict[str, list[Any]] = {}
        for key, value in (messages or {}).items():
            if isinstance(value, (list, tuple)):
                for item in value:
                    self.add(key, item)
            else:
                self.add(key, value)

    @classmethod
    def from_report(
        cls,
        report: ValidationReport,
        rules: Mapping[str, list[str]] | None = None,
    ) -> "MessageBag":
        """Build an error bag from a validator report, ordered by `rules` when given."""
        return cls(report.to_messages(rules))

    def add(self, key: str, message: Any) -> "MessageBag":
        """Append a message under `key`."""
        self._messages.setdefault(key, []).append(message)
        return self

    def has(self, key: str) -> bool:
        """Whether at least one message exists for `key`."""
        return bool(self._messages.get(key))

    def first(self, key: str) -> Any:
        """First message for `key`, or None."""
        messages = self._messages.get(key)
        if not messages:
            return None
        return messages[0]

    def get(self, key: str) -> list[Any]:
        """Every message for `key`."""
        return list(self._messages.get(key, []))

    def any(self) -> bool:
        return any(self._messages.values())

    def keys(self) -> list[str]:
        return [key for key, messages in self._messages.items() if messages]

    def to_dict(self) -> dict[str, list[Any]]:
        return {key: list(messages) for key, messages in self._messages.items()}

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self.keys())

    def __repr__(self) -> str:
        return f"MessageBag({self.to_dict()!r})"


def old_input_bag(values: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None) -> MessageBag:
    """
    Build an old-input bag from submitted form values.

    List values (multi-selects) are kept whole instead of being split
    into one message per item.
    """
    bag = MessageBag()
    items = values.items() if isinstance(values, Mapping) else (values or [])
    for key, value in items:
        bag.add(key, value)
    return bag
