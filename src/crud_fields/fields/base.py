"""
Base field.

A field describes one form input bound to one record attribute. It is
configured fluently right after construction:

    TextField.handle("title", "required|min:3").with_placeholder("Title of the post")

and resolves its bound state (value, old input, error) through the
registry it is attached to, or through an explicit `FieldContext`.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Iterable

from crud_fields.config import get_config
from crud_fields.constants import MAX_IDENTIFIER_LENGTH, VALID_IDENTIFIER
from crud_fields.context import FieldContext
from crud_fields.contracts import ViewRenderer
from crud_fields.exceptions import (
    FieldConfigurationError,
    InvalidIdentifierError,
    NoBoundRecordError,
    UnboundRegistryError,
)
from crud_fields.rendering import FieldView, get_default_renderer
from crud_fields.rules import find_rule, split_rules
from crud_fields.text import title_case

if TYPE_CHECKING:
    from crud_fields.registry import CrudFields


def _check_identifier(identifier: Any) -> None:
    """Validate a field identifier."""
    if not isinstance(identifier, str) or not identifier:
        raise InvalidIdentifierError(str(identifier), "identifier must be a non-empty string")
    if len(identifier) > MAX_IDENTIFIER_LENGTH:
        raise InvalidIdentifierError(identifier, "identifier too long")
    if not VALID_IDENTIFIER.match(identifier):
        raise InvalidIdentifierError(identifier, "invalid characters in identifier")


class Field(ABC):
    """
    Abstract form field.

    Subclasses must implement `get_view_name()` and may override
    `get_view_variables()`, `get_value()`, `get_table_value()`,
    `get_scripts()` and `get_css()`.

    Every resolution method takes an optional `context`. When omitted,
    the context bound on the attached registry is used.
    """

    TYPE = "type"

    def __init__(self, identifier: str, rules: str | Iterable[str] | None = None):
        """
        Initialize the field.

        Args:
            identifier: Record attribute name, also used as input name.
            rules: Optional validation rules, pipe-delimited or a sequence.

        Raises:
            InvalidIdentifierError: If the identifier is not a valid name.
        """
        _check_identifier(identifier)
        self._identifier = identifier
        self._rules: list[str] = []
        self._label: str | None = None
        self._placeholder: str | None = None
        self._help: str | None = None
        self._registry: "CrudFields | None" = None

        if rules is not None:
            self.with_rules(rules)

    @classmethod
    def handle(cls, identifier: str, rules: str | Iterable[str] | None = None):
        """Construct a field, for chaining."""
        return cls(identifier, rules)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def with_rules(self, rules: str | Iterable[str]):
        """
        Add validation rules to the field.

        Accepts "required|min:3" or ["required", "min:3"]. Rules from
        successive calls accumulate.
        """
        for rule in split_rules(rules):
            self.add_rule(rule)
        return self

    def add_rule(self, rule: str):
        """Append a single validation rule."""
        self._rules.extend(split_rules([rule]))
        return self

    def with_label(self, label: str | None):
        """Set a custom label for the field."""
        self._label = label
        return self

    def with_placeholder(self, placeholder: str | None):
        """Define a placeholder for the field."""
        self._placeholder = placeholder
        return self

    def with_help(self, help: str | None):
        """Append a help message to the input."""
        self._help = help
        return self

    def attach_registry(self, registry: "CrudFields"):
        """
        Point the field at the registry that owns it.

        Raises:
            FieldConfigurationError: If the field already belongs to another registry.
        """
        if self._registry is not None and self._registry is not registry:
            raise FieldConfigurationError(
                f"Field {self._identifier!r} already belongs to another registry"
            )
        self._registry = registry
        return self

    # ------------------------------------------------------------------
    # Declared state
    # ------------------------------------------------------------------

    @property
    def identifier(self) -> str:
        return self._identifier

    @property
    def registry(self) -> "CrudFields | None":
        return self._registry

    def get_identifier(self) -> str:
        return self._identifier

    def get_rules(self) -> list[str]:
        """Declared rules, in declaration order. Empty when none were declared."""
        return list(self._rules)

    def is_required(self) -> bool:
        return find_rule(self.get_rules(), "required") is not None

    def get_label(self) -> str:
        """Explicit label, or a title-cased rendering of the identifier."""
        if self._label:
            return self._label
        formatter = self._registry.label_formatter if self._registry is not None else title_case
        return formatter(self._identifier)

    def get_placeholder(self) -> str | None:
        return self._placeholder or None

    def get_help(self) -> str | None:
        return self._help or None

    def get_scripts(self) -> list[str]:
        """
        Field specific script files, relative to the public asset root.
        Example: ['js/field.js']
        """
        return []

    def get_css(self) -> list[str]:
        """
        Field specific stylesheets, relative to the public asset root.
        Example: ['css/field.css']
        """
        return []

    # ------------------------------------------------------------------
    # Bound state
    # ------------------------------------------------------------------

    def resolve_context(self, context: FieldContext | None = None) -> FieldContext:
        """
        Return the context to resolve against.

        Raises:
            UnboundRegistryError: If no context is given and the field has no
                bound registry.
        """
        if context is not None:
            return context
        if self._registry is None:
            raise UnboundRegistryError(self._identifier, "no registry attached")
        if not self._registry.is_bound:
            raise UnboundRegistryError(self._identifier)
        return self._registry.context

    def has_error(self, context: FieldContext | None = None) -> bool:
        """Check if the error bag holds an error for this field."""
        return bool(self.resolve_context(context).errors.has(self._identifier))

    def get_error(self, context: FieldContext | None = None) -> str | None:
        """First error message for this field, or None."""
        context = self.resolve_context(context)
        if context.errors.has(self._identifier):
            return context.errors.first(self._identifier)
        return None

    def has_old(self, context: FieldContext | None = None) -> bool:
        """Check if the previous submission carried a value for this field."""
        return bool(self.resolve_context(context).old_input.has(self._identifier))

    def get_old(self, context: FieldContext | None = None) -> Any:
        """Previously submitted value, or None."""
        context = self.resolve_context(context)
        if context.old_input.has(self._identifier):
            return context.old_input.first(self._identifier)
        return None

    def get_value(self, context: FieldContext | None = None) -> Any:
        """Current value on the bound record, None when creating."""
        context = self.resolve_context(context)
        if context.record is None:
            return None
        return context.record.get_attribute_value(self._identifier)

    def get_table_value(self, context: FieldContext | None = None) -> Any:
        """Value shown in list/summary tables."""
        return self.get_value(context)

    def set_value(self, value: Any, context: FieldContext | None = None):
        """
        Write a new value onto the bound record.

        Raises:
            NoBoundRecordError: If the context has no record.
        """
        context = self.resolve_context(context)
        if context.record is None:
            raise NoBoundRecordError(self._identifier)
        context.record.set_attribute(self._identifier, value)
        return self

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    @abstractmethod
    def get_view_name(self) -> str:
        """Template used to render the field."""

    def get_view_variables(self, context: FieldContext) -> dict[str, Any]:
        """Additional variables passed to the view."""
        return {}

    def get_view_base_variables(self, context: FieldContext) -> dict[str, Any]:
        """Variables shared by every field view."""
        return {
            "field": self,
            "has_error": self.has_error(context),
            "error": self.get_error(context),
            "placeholder": self.get_placeholder(),
            "help": self.get_help(),
            "has_old": self.has_old(context),
            "old": self.get_old(context),
            "label": self.get_label(),
            "name": self._identifier,
            "id": get_config().id_prefix + self._identifier,
            "value": self.get_value(context),
        }

    def get_view(self, context: FieldContext | None = None) -> FieldView:
        """Build the view name and variable bag without rendering."""
        context = self.resolve_context(context)
        variables = self.get_view_base_variables(context)
        variables.update(self.get_view_variables(context))
        return FieldView(self.get_view_name(), variables)

    def render(
        self,
        context: FieldContext | None = None,
        renderer: ViewRenderer | None = None,
    ) -> str:
        """Render the field form fragment."""
        view = self.get_view(context)
        if renderer is None:
            renderer = self._registry.renderer if self._registry is not None else None
        if renderer is None:
            renderer = get_default_renderer()
        return view.render(renderer)

    def form(self, context: FieldContext | None = None) -> str:
        return self.render(context)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._identifier!r}, rules={self._rules!r})"

