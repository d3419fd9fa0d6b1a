"""
Exceptions raised by crud-fields.

Configuration errors surface while fields and registries are declared.
Unbound-state errors signal that a field was asked to resolve state
before a record binding existed.
"""


class CrudFieldsError(Exception):
    """Base class for every crud-fields error."""


class FieldConfigurationError(CrudFieldsError):
    """A field or registry was declared incorrectly."""


class InvalidIdentifierError(FieldConfigurationError):
    """A field identifier is not a valid attribute/input name."""

    def __init__(self, identifier: str, reason: str):
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"Invalid field identifier {identifier!r}: {reason}")


class DuplicateFieldError(FieldConfigurationError):
    """Two fields of one registry share an identifier."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Field {identifier!r} is declared more than once")


class UnboundStateError(CrudFieldsError):
    """Bound state was requested before it was available."""


class UnboundRegistryError(UnboundStateError):
    """The field has no registry, or its registry was never bound."""

    def __init__(self, identifier: str | None = None, detail: str = "registry is not bound"):
        self.identifier = identifier
        if identifier is None:
            super().__init__(detail[:1].upper() + detail[1:])
        else:
            super().__init__(f"Cannot resolve field {identifier!r}: {detail}")


class NoBoundRecordError(UnboundStateError):
    """A write was attempted while no record is bound (create mode)."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Cannot set value of field {identifier!r}: no bound record")
