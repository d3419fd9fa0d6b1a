"""
Per-request binding context.

Holds everything a field needs to resolve its bound state: the record
being edited (None when creating), the error bag and the old-input bag.
"""

from dataclasses import dataclass, field

from crud_fields.bags import MessageBag as DictMessageBag
from crud_fields.contracts import MessageBag, Record


@dataclass
class FieldContext:
    """Context for resolving field values, errors and old input."""

    record: Record | None = None
    errors: MessageBag = field(default_factory=DictMessageBag)
    old_input: MessageBag = field(default_factory=DictMessageBag)

    @property
    def is_creating(self) -> bool:
        """True when no record is bound (create form)."""
        return self.record is None
