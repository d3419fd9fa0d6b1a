"""
Text-like fields: single line, multi-line and rich text.
"""

import json
from typing import Any

from crud_fields.context import FieldContext
from crud_fields.exceptions import FieldConfigurationError
from crud_fields.fields.base import Field


class TextField(Field):
    """Single line text input."""

    TYPE = "text"

    def __init__(self, identifier, rules=None):
        super().__init__(identifier, rules)
        self._input_type = "text"

    def with_input_type(self, input_type: str):
        """Use another HTML input type (email, url, tel, password, ...)."""
        self._input_type = input_type
        return self

    def get_view_name(self) -> str:
        return "fields/text.html"

    def get_view_variables(self, context: FieldContext) -> dict[str, Any]:
        return {"input_type": self._input_type}


class TextareaField(Field):
    """Multi-line text input."""

    TYPE = "textarea"

    def __init__(self, identifier, rules=None):
        super().__init__(identifier, rules)
        self._rows = 5

    def with_rows(self, rows: int):
        if rows < 1:
            raise FieldConfigurationError(f"Textarea {self.identifier!r} needs at least one row")
        self._rows = rows
        return self

    def get_view_name(self) -> str:
        return "fields/textarea.html"

    def get_view_variables(self, context: FieldContext) -> dict[str, Any]:
        return {"rows": self._rows}


class TinymceField(TextareaField):
    """Rich text editor backed by TinyMCE."""

    TYPE = "tinymce"

    def __init__(self, identifier, rules=None):
        super().__init__(identifier, rules)
        self._rows = 15
        self._editor_options: dict[str, Any] = {
            "menubar": False,
            "plugins": "link lists image code",
            "toolbar": "undo redo | bold italic | bullist numlist | link image | code",
        }

    def with_editor_options(self, **options):
        """Override TinyMCE init options."""
        self._editor_options.update(options)
        return self

    def get_view_name(self) -> str:
        return "fields/tinymce.html"

    def get_view_variables(self, context: FieldContext) -> dict[str, Any]:
        variables = super().get_view_variables(context)
        variables["editor_options"] = json.dumps(self._editor_options)
        return variables

    def get_scripts(self) -> list[str]:
        return [
            "vendor/tinymce/tinymce.min.js",
            "js/fields/tinymce.js",
        ]
