"""
File upload field.
"""

from typing import Any, Iterable

from crud_fields.context import FieldContext
from crud_fields.exceptions import FieldConfigurationError
from crud_fields.fields.base import Field
from crud_fields.models.uploads import UploadedFile
from crud_fields.rules import parse_rule


class FileUploadField(Field):
    """
    File input with size and type constraints.

    The record attribute holds the stored path; `get_value()` turns it
    into an `UploadedFile` handle.

    Constraints are also exposed as rules ("file", "max:<kilobytes>",
    "mimes:<types>") so the external validator sees them.
    """

    TYPE = "fileupload"

    def __init__(self, identifier, rules=None):
        super().__init__(identifier, rules)
        self._max_size: int | None = None
        self._types: list[str] = []

    def with_max_size(self, size: int):
        """Maximum upload size in bytes."""
        if not isinstance(size, int) or size <= 0:
            raise FieldConfigurationError(
                f"Max size of {self.identifier!r} must be a positive number of bytes"
            )
        self._max_size = size
        return self

    def with_types(self, types: str | Iterable[str]):
        """Allowed file extensions, as "jpeg,png" or a sequence."""
        if isinstance(types, str):
            types = types.split(",")
        self._types = [t.strip().lstrip(".").lower() for t in types if t.strip()]
        return self

    def get_max_size(self) -> int | None:
        return self._max_size

    def get_types(self) -> list[str]:
        return list(self._types)

    def get_accept(self) -> str | None:
        """Value of the HTML `accept` attribute."""
        if not self._types:
            return None
        return ",".join("." + t for t in self._types)

    def get_rules(self) -> list[str]:
        rules = super().get_rules()
        derived = ["file"]
        if self._max_size is not None:
            # Validators count file sizes in kilobytes
            derived.append(f"max:{-(-self._max_size // 1024)}")
        if self._types:
            derived.append("mimes:" + ",".join(self._types))
        # A declared rule wins over the derived rule of the same name
        declared = {parse_rule(rule)[0] for rule in rules}
        return rules + [rule for rule in derived if parse_rule(rule)[0] not in declared]

    def get_value(self, context: FieldContext | None = None) -> UploadedFile | None:
        value = super().get_value(context)
        if value is None or value == "":
            return None
        if isinstance(value, UploadedFile):
            return value
        return UploadedFile.from_path(str(value))

    def get_table_value(self, context: FieldContext | None = None) -> str | None:
        value = self.get_value(context)
        if value is None:
            return None
        return value.filename

    def get_view_name(self) -> str:
        return "fields/fileupload.html"

    def get_view_variables(self, context: FieldContext) -> dict[str, Any]:
        return {
            "max_size": self._max_size,
            "max_size_human": _human_size(self._max_size) if self._max_size else None,
            "types": self.get_types(),
            "accept": self.get_accept(),
        }


def _human_size(size: int) -> str:
    for unit in ("B", "KB", "MB"):
        if size < 1024:
            return f"{round(size, 1):g} {unit}"
        size = size / 1024
    return f"{size:.1f} GB"
