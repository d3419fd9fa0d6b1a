"""
Model-side declaration interface.

A model mixes in `Crudable` and declares its fields once:

    class Post(Crudable):
        @classmethod
        def get_crud_fields(cls):
            return CrudFields.make([
                TextField.handle("title", "required|min:3"),
            ])

then asks for a bound registry per request:

    Post.create_form(errors=errors, old_input=old)
    post.edit_form(errors=errors, old_input=old)
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping

from crud_fields.contracts import MessageBag, Record
from crud_fields.models.violations import ValidationReport
from crud_fields.records import ObjectRecord
from crud_fields.registry import CrudFields


class Crudable(ABC):
    """Mixin for models that declare CRUD form fields."""

    @classmethod
    @abstractmethod
    def get_crud_fields(cls) -> CrudFields:
        """Declare the model's fields. Must return a fresh registry on each call."""

    @classmethod
    def create_form(
        cls,
        errors: MessageBag | ValidationReport | Mapping[str, Any] | None = None,
        old_input: MessageBag | Mapping[str, Any] | None = None,
    ) -> CrudFields:
        """Fields bound for a create form (no record)."""
        return cls.get_crud_fields().bind(None, errors, old_input)

    def edit_form(
        self,
        errors: MessageBag | ValidationReport | Mapping[str, Any] | None = None,
        old_input: MessageBag | Mapping[str, Any] | None = None,
    ) -> CrudFields:
        """Fields bound to this instance."""
        return self.get_crud_fields().bind(self.as_crud_record(), errors, old_input)

    def as_crud_record(self) -> Record:
        """This instance as a Record; wrapped unless it already is one."""
        if isinstance(self, Record):
            return self
        return ObjectRecord(self)
