"""
Fields choosing from a fixed option set.
"""

from typing import Any, Iterable, Mapping

from crud_fields.context import FieldContext
from crud_fields.exceptions import FieldConfigurationError
from crud_fields.fields.base import Field


def _normalize_options(options: Mapping[Any, Any] | Iterable[Any]) -> dict[str, str]:
    """Options as an ordered key -> label dict; bare values label themselves."""
    if isinstance(options, Mapping):
        return {str(key): str(label) for key, label in options.items()}
    if isinstance(options, str):
        raise FieldConfigurationError("Options must be a mapping or a sequence, not a string")
    return {str(value): str(value) for value in options}


class ChoiceField(Field):
    """Shared behaviour of fields backed by a fixed option set."""

    def __init__(self, identifier, rules=None):
        super().__init__(identifier, rules)
        self._options: dict[str, str] = {}
        self._default: Any = None

    def with_options(self, options: Mapping[Any, Any] | Iterable[Any], default: Any = None):
        """
        Set the available options and an optional default key.

        Raises:
            FieldConfigurationError: If `default` is not one of the option keys.
        """
        self._options = _normalize_options(options)
        if default is not None and str(default) not in self._options:
            raise FieldConfigurationError(
                f"Default {default!r} of field {self.identifier!r} is not an option"
            )
        self._default = default
        return self

    def get_options(self) -> dict[str, str]:
        return dict(self._options)

    def get_default(self) -> Any:
        return self._default

    def get_option_label(self, key: Any) -> Any:
        """Label of option `key`, or the key itself when unknown."""
        if key is None:
            return None
        return self._options.get(str(key), key)

    def get_table_value(self, context: FieldContext | None = None) -> Any:
        return self.get_option_label(self.get_value(context))

    def get_view_variables(self, context: FieldContext) -> dict[str, Any]:
        # Templates preselect `default` when there is neither a value nor old input
        return {
            "options": self.get_options(),
            "default": self._default,
        }


class RadioField(ChoiceField):
    """Radio button group."""

    TYPE = "radio"

    def get_view_name(self) -> str:
        return "fields/radio.html"


class SelectField(ChoiceField):
    """Drop-down select, single or multiple."""

    TYPE = "select"

    def __init__(self, identifier, rules=None):
        super().__init__(identifier, rules)
        self._multiple = False

    def multiple(self, multiple: bool = True):
        """Allow selecting several options; the value becomes a list."""
        self._multiple = multiple
        return self

    def is_multiple(self) -> bool:
        return self._multiple

    def get_value(self, context: FieldContext | None = None) -> Any:
        """Record value; a list for multiple selects once a record is bound."""
        context = self.resolve_context(context)
        value = super().get_value(context)
        if not self._multiple or context.record is None:
            return value
        if value is None:
            return []
        if isinstance(value, (list, tuple, set)):
            return list(value)
        return [value]

    def get_table_value(self, context: FieldContext | None = None) -> Any:
        if not self._multiple:
            return super().get_table_value(context)
        value = self.get_value(context)
        if value is None:
            return None
        return ", ".join(str(self.get_option_label(key)) for key in value)

    def get_view_name(self) -> str:
        return "fields/select.html"

    def get_view_variables(self, context: FieldContext) -> dict[str, Any]:
        variables = super().get_view_variables(context)
        variables["multiple"] = self._multiple
        variables["input_name"] = self.identifier + "[]" if self._multiple else self.identifier
        return variables
