"""
Select field backed by a related entity.
"""

import logging
from typing import Any, Callable, Iterable

from crud_fields.context import FieldContext
from crud_fields.exceptions import FieldConfigurationError
from crud_fields.fields.base import Field
from crud_fields.records import read_attribute

logger = logging.getLogger("crud-fields.fields")

ChoiceSource = Iterable[Any] | Callable[[], Iterable[Any]]


class SelectRelationField(Field):
    """
    Select one related entity, storing its key on the record.

    Usage:
        SelectRelationField.handle("category_id") \\
            .with_relation("category") \\
            .with_choices(lambda: categories) \\
            .with_label("Category")

    The stored value is the foreign key; `get_table_value()` resolves
    the related entity and returns its display attribute instead.
    When no relation is given, identifiers ending in "_id" default to
    the name without that suffix ("category_id" -> "category").
    """

    TYPE = "select_relation"

    def __init__(self, identifier, rules=None):
        super().__init__(identifier, rules)
        self._relation: str | None = identifier[:-3] if identifier.endswith("_id") and len(identifier) > 3 else None
        self._display = "name"
        self._key = "id"
        self._choices: ChoiceSource | None = None

    def with_relation(self, relation: str, display: str | None = None):
        """Name of the relation on the record and optionally its display attribute."""
        if not relation:
            raise FieldConfigurationError(f"Relation of field {self.identifier!r} cannot be empty")
        self._relation = relation
        if display is not None:
            self._display = display
        return self

    def with_display(self, attribute: str):
        """Attribute of the related entity shown to users."""
        self._display = attribute
        return self

    def with_key(self, attribute: str):
        """Attribute of the related entity stored as the foreign key."""
        self._key = attribute
        return self

    def with_choices(self, choices: ChoiceSource):
        """Related entities offered in the select, or a callable loading them."""
        self._choices = choices
        return self

    def get_relation(self) -> str:
        if not self._relation:
            raise FieldConfigurationError(
                f"Field {self.identifier!r} has no relation, call with_relation()"
            )
        return self._relation

    def get_choices(self) -> list[Any]:
        """Related entities available for selection."""
        if self._choices is None:
            return []
        choices = self._choices() if callable(self._choices) else self._choices
        return list(choices)

    def get_options(self) -> dict[str, str]:
        """Choices as key -> display label."""
        options = {}
        for entity in self.get_choices():
            key = read_attribute(entity, self._key)
            options[str(key)] = str(read_attribute(entity, self._display))
        return options

    def get_related(self, context: FieldContext | None = None) -> Any:
        """
        The related entity of the bound record, or None.

        Uses `record.get_relation()` when the record provides it, then
        falls back to looking the stored key up among the choices.
        """
        context = self.resolve_context(context)
        relation = self.get_relation()
        record = context.record
        if record is None:
            return None

        if hasattr(record, "get_relation"):
            related = record.get_relation(relation)
        else:
            related = record.get_attribute_value(relation)
        if related is not None:
            return related

        key = record.get_attribute_value(self.identifier)
        if key is None:
            return None
        for entity in self.get_choices():
            if str(read_attribute(entity, self._key)) == str(key):
                return entity
        logger.debug(f"No related {relation!r} found for key {key!r}")
        return None

    def get_table_value(self, context: FieldContext | None = None) -> Any:
        return read_attribute(self.get_related(context), self._display)

    def get_view_name(self) -> str:
        return "fields/select_relation.html"

    def get_view_variables(self, context: FieldContext) -> dict[str, Any]:
        return {
            "relation": self.get_relation(),
            "options": self.get_options(),
        }
