"""
Field registry.

`CrudFields` owns the ordered fields of one model and the per-request
context they resolve against.

Usage:
    fields = CrudFields.make([
        TextField.handle("title", "required|min:3"),
        RadioField.handle("status").with_options({"draft": "Draft", "live": "Live"}),
    ])

    fields.bind(record, errors={"title": "The title field is required."})
    html = fields.render()
"""

import logging
from typing import Any, Callable, Iterable, Iterator, Mapping

from crud_fields.bags import MessageBag as DictMessageBag, old_input_bag
from crud_fields.context import FieldContext
from crud_fields.contracts import MessageBag, Record, ViewRenderer
from crud_fields.exceptions import DuplicateFieldError, FieldConfigurationError, UnboundRegistryError
from crud_fields.fields.base import Field
from crud_fields.fields.file_upload import FileUploadField
from crud_fields.models.violations import ValidationReport
from crud_fields.records import ObjectRecord
from crud_fields.rendering import get_default_renderer
from crud_fields.text import title_case

logger = logging.getLogger("crud-fields.registry")


class CrudFields:
    """
    Ordered, identifier-unique collection of fields.

    Args:
        fields: Fields in display order.
        renderer: Template renderer used by `render()`. Defaults to the
            shared Jinja2 renderer.
        label_formatter: Turns identifiers into default labels.
            Defaults to `title_case`.

    Raises:
        DuplicateFieldError: If two fields share an identifier.
        FieldConfigurationError: If an entry is not a Field or already
            belongs to another registry.
    """

    def __init__(
        self,
        fields: Iterable[Field] = (),
        renderer: ViewRenderer | None = None,
        label_formatter: Callable[[str], str] | None = None,
    ):
        self._fields: dict[str, Field] = {}
        self._context: FieldContext | None = None
        self.renderer = renderer
        self.label_formatter = label_formatter or title_case

        fields = list(fields)
        # Validate everything before attaching anything
        seen: set[str] = set()
        for field in fields:
            self._check_addable(field)
            if field.identifier in seen:
                raise DuplicateFieldError(field.identifier)
            seen.add(field.identifier)
        for field in fields:
            self._fields[field.identifier] = field
            field.attach_registry(self)

    @classmethod
    def make(cls, fields: Iterable[Field], **kwargs) -> "CrudFields":
        return cls(fields, **kwargs)

    def add(self, field: Field) -> "CrudFields":
        """Append a field at the end of the form."""
        self._check_addable(field)
        if field.identifier in self._fields:
            raise DuplicateFieldError(field.identifier)
        self._fields[field.identifier] = field
        field.attach_registry(self)
        return self

    def _check_addable(self, field: Any) -> None:
        if not isinstance(field, Field):
            raise FieldConfigurationError(f"Expected a Field, got {type(field).__name__}")
        if field.registry is not None and field.registry is not self:
            raise FieldConfigurationError(
                f"Field {field.identifier!r} already belongs to another registry"
            )

    # ------------------------------------------------------------------
    # Binding
    # ------------------------------------------------------------------

    def bind(
        self,
        record: Record | None = None,
        errors: MessageBag | ValidationReport | Mapping[str, Any] | None = None,
        old_input: MessageBag | Mapping[str, Any] | None = None,
    ) -> "CrudFields":
        """
        Inject the per-request context.

        Rebinding replaces the previous context entirely. Plain mappings
        are accepted for both bags; a `ValidationReport` becomes an error
        bag ordered by the declared rules.
        """
        previous = self._context.record if self._context is not None else None
        if previous is not None and _unwrap(record) is not _unwrap(previous):
            logger.warning(
                f"Rebinding {len(self._fields)} fields from one record to another; "
                f"the previous context is discarded"
            )

        if isinstance(errors, ValidationReport):
            errors = self._errors_from_report(errors)
        elif not isinstance(errors, MessageBag):
            errors = DictMessageBag(errors)
        if not isinstance(old_input, MessageBag):
            old_input = old_input_bag(old_input)

        self._context = FieldContext(record=record, errors=errors, old_input=old_input)
        for field in self._fields.values():
            field.attach_registry(self)

        logger.debug(
            f"Bound {len(self._fields)} fields "
            f"({'create' if record is None else 'edit'} mode)"
        )
        return self

    def _errors_from_report(self, report: ValidationReport) -> DictMessageBag:
        rules = self.get_rules()
        for violation in report.undeclared(rules):
            logger.warning(
                f"Validator reported {violation.rule!r} on {violation.field!r}, "
                f"which declares no such rule"
            )
        return DictMessageBag.from_report(report, rules)

    def bind_context(self, context: FieldContext) -> "CrudFields":
        """Bind an already assembled context."""
        return self.bind(context.record, context.errors, context.old_input)

    def unbind(self) -> "CrudFields":
        self._context = None
        return self

    @property
    def is_bound(self) -> bool:
        return self._context is not None

    @property
    def context(self) -> FieldContext:
        """
        The bound context.

        Raises:
            UnboundRegistryError: If `bind()` was never called.
        """
        if self._context is None:
            raise UnboundRegistryError()
        return self._context

    def get_errors(self) -> MessageBag:
        return self.context.errors

    def get_old_input(self) -> MessageBag:
        return self.context.old_input

    def get_entry(self) -> Record | None:
        """The bound record, None on create forms."""
        return self.context.record

    get_bound_record = get_entry

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def all(self) -> list[Field]:
        """Fields in declared order."""
        return list(self._fields.values())

    def find(self, identifier: str) -> Field | None:
        return self._fields.get(identifier)

    def get_identifiers(self) -> list[str]:
        return list(self._fields)

    def __iter__(self) -> Iterator[Field]:
        return iter(self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._fields

    def __getitem__(self, identifier: str) -> Field:
        return self._fields[identifier]

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------

    def get_rules(self) -> dict[str, list[str]]:
        """Declared rules per identifier, for the external validator."""
        return {identifier: field.get_rules() for identifier, field in self._fields.items()}

    def get_values(self) -> dict[str, Any]:
        """Current value of every field."""
        return {identifier: field.get_value() for identifier, field in self._fields.items()}

    def get_table_values(self) -> dict[str, Any]:
        """Table value of every field."""
        return {identifier: field.get_table_value() for identifier, field in self._fields.items()}

    def fill(self, data: Mapping[str, Any]) -> "CrudFields":
        """Write submitted values of known fields onto the bound record."""
        for identifier, value in data.items():
            field = self._fields.get(identifier)
            if field is None:
                logger.debug(f"Ignoring unknown input {identifier!r}")
                continue
            field.set_value(value)
        return self

    def get_scripts(self) -> list[str]:
        """Script files needed by the fields, without duplicates."""
        return _unique(path for field in self._fields.values() for path in field.get_scripts())

    def get_css(self) -> list[str]:
        """Stylesheets needed by the fields, without duplicates."""
        return _unique(path for field in self._fields.values() for path in field.get_css())

    def is_multipart(self) -> bool:
        """Whether the form needs multipart/form-data encoding."""
        return any(isinstance(field, FileUploadField) for field in self._fields.values())

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def get_renderer(self) -> ViewRenderer:
        return self.renderer or get_default_renderer()

    def render(self) -> str:
        """Render every field in declared order."""
        renderer = self.get_renderer()
        context = self.context
        return "\n".join(field.render(context, renderer) for field in self._fields.values())

    def __repr__(self) -> str:
        return f"CrudFields({self.get_identifiers()!r}, bound={self.is_bound})"


def _unwrap(record: Any) -> Any:
    return record.obj if isinstance(record, ObjectRecord) else record


def _unique(items: Iterable[str]) -> list[str]:
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result
