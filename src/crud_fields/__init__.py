"""
crud-fields: form field descriptors for CRUD scaffolding.

Declare typed, fluently configured fields once per model, bind them to
a record, an error bag and the previous submission, and render each one
through a template renderer.

Simple Usage:
    from crud_fields import CrudFields, TextField, RadioField

    fields = CrudFields.make([
        TextField.handle("title", "required|min:3").with_placeholder("Title of the post"),
        RadioField.handle("status", "required").with_options({"draft": "Draft", "live": "Live"}, "live"),
    ])

    fields.bind(record, errors={"title": "The title field is required."})
    html = fields.render()

Explicit context:
    from crud_fields import FieldContext

    context = FieldContext(record=record)
    fields.find("title").get_value(context)

Validator reports:
    from crud_fields import ValidationReport

    report = ValidationReport.model_validate(validator_output)
    fields.bind(record, errors=report)
"""

from crud_fields.bags import MessageBag, old_input_bag
from crud_fields.config import CrudFieldsConfig, get_config, update_config
from crud_fields.context import FieldContext
from crud_fields.crudable import Crudable
from crud_fields.exceptions import (
    CrudFieldsError,
    DuplicateFieldError,
    FieldConfigurationError,
    InvalidIdentifierError,
    NoBoundRecordError,
    UnboundRegistryError,
    UnboundStateError,
)
from crud_fields.fields import (
    ChoiceField,
    DatePickerField,
    Field,
    FileUploadField,
    RadioField,
    SelectField,
    SelectRelationField,
    TextareaField,
    TextField,
    TinymceField,
)
from crud_fields.models import RuleViolation, UploadedFile, ValidationReport
from crud_fields.records import MappingRecord, ObjectRecord
from crud_fields.registry import CrudFields
from crud_fields.rendering import FieldView, JinjaViewRenderer
from crud_fields.text import title_case

__all__ = [
    # Registry
    "CrudFields",
    "Crudable",
    "FieldContext",
    # Fields
    "Field",
    "ChoiceField",
    "DatePickerField",
    "FileUploadField",
    "RadioField",
    "SelectField",
    "SelectRelationField",
    "TextareaField",
    "TextField",
    "TinymceField",
    # Binding helpers
    "MessageBag",
    "old_input_bag",
    "MappingRecord",
    "ObjectRecord",
    # Rendering
    "FieldView",
    "JinjaViewRenderer",
    "title_case",
    # Models
    "UploadedFile",
    "RuleViolation",
    "ValidationReport",
    # Errors
    "CrudFieldsError",
    "FieldConfigurationError",
    "InvalidIdentifierError",
    "DuplicateFieldError",
    "UnboundStateError",
    "UnboundRegistryError",
    "NoBoundRecordError",
    # Config
    "CrudFieldsConfig",
    "get_config",
    "update_config",
]

__version__ = "0.1.0"
