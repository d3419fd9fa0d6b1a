"""
Date / datetime picker field.
"""

from datetime import date, datetime
from typing import Any

from crud_fields.config import get_config
from crud_fields.context import FieldContext
from crud_fields.exceptions import FieldConfigurationError
from crud_fields.fields.base import Field

# strftime directive -> flatpickr token
_PICKER_TOKENS = {
    "%Y": "Y",
    "%y": "y",
    "%m": "m",
    "%d": "d",
    "%H": "H",
    "%I": "h",
    "%M": "i",
    "%S": "S",
    "%p": "K",
    "%b": "M",
    "%B": "F",
    "%a": "D",
    "%A": "l",
    "%%": "%",
}

_TIME_DIRECTIVES = ("%H", "%I", "%M", "%S")


def _coerce_date(value: Any) -> date | None:
    """Accept date, datetime or an ISO string."""
    if value is None or isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            raise FieldConfigurationError(f"Not an ISO date: {value!r}") from None
    raise FieldConfigurationError(f"Expected a date, got {type(value).__name__}")


def to_picker_format(date_format: str) -> str:
    """Translate a strftime format into the picker's format tokens."""
    result = []
    i = 0
    while i < len(date_format):
        directive = date_format[i:i + 2]
        if directive in _PICKER_TOKENS:
            result.append(_PICKER_TOKENS[directive])
            i += 2
        else:
            result.append(date_format[i])
            i += 1
    return "".join(result)


class DatePickerField(Field):
    """
    Date picker with format and min/max constraints.

    `date_format` is a strftime format (default: `config.date_format`);
    it drives both the displayed value and the picker widget.
    """

    TYPE = "datepicker"

    def __init__(self, identifier, rules=None):
        super().__init__(identifier, rules)
        self._date_format: str | None = None
        self._min_date: date | None = None
        self._max_date: date | None = None

    def with_date_format(self, date_format: str):
        if not date_format:
            raise FieldConfigurationError(f"Date format of {self.identifier!r} cannot be empty")
        self._date_format = date_format
        return self

    def with_min_date(self, min_date: date | str | None):
        """Earliest selectable date; rejected if after the current max date."""
        min_date = _coerce_date(min_date)
        self._check_range(min_date, self._max_date)
        self._min_date = min_date
        return self

    def with_max_date(self, max_date: date | str | None):
        """Latest selectable date; rejected if before the current min date."""
        max_date = _coerce_date(max_date)
        self._check_range(self._min_date, max_date)
        self._max_date = max_date
        return self

    def _check_range(self, min_date: date | None, max_date: date | None) -> None:
        if min_date is None or max_date is None:
            return
        if _as_datetime(min_date) > _as_datetime(max_date):
            raise FieldConfigurationError(
                f"Min date of {self.identifier!r} is after its max date"
            )

    def get_date_format(self) -> str:
        return self._date_format or get_config().date_format

    def has_time(self) -> bool:
        return any(d in self.get_date_format() for d in _TIME_DIRECTIVES)

    def get_min_date(self) -> date | None:
        return self._min_date

    def get_max_date(self) -> date | None:
        return self._max_date

    def format_date(self, value: Any) -> Any:
        """Format a date-like value; other values pass through."""
        if isinstance(value, str):
            try:
                value = datetime.fromisoformat(value)
            except ValueError:
                return value
        if isinstance(value, date):
            return value.strftime(self.get_date_format())
        return value

    def get_table_value(self, context: FieldContext | None = None) -> Any:
        return self.format_date(self.get_value(context))

    def get_view_name(self) -> str:
        return "fields/datepicker.html"

    def get_view_variables(self, context: FieldContext) -> dict[str, Any]:
        return {
            "formatted_value": self.format_date(self.get_value(context)),
            "date_format": self.get_date_format(),
            "picker_format": to_picker_format(self.get_date_format()),
            "enable_time": self.has_time(),
            "min_date": self.format_date(self._min_date),
            "max_date": self.format_date(self._max_date),
        }

    def get_scripts(self) -> list[str]:
        return [
            "vendor/flatpickr/flatpickr.min.js",
            "js/fields/datepicker.js",
        ]

    def get_css(self) -> list[str]:
        return ["vendor/flatpickr/flatpickr.min.css"]


def _as_datetime(value: date) -> datetime:
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    return datetime(value.year, value.month, value.day)
