"""
Field kinds.

- Field: abstract base every kind extends
- TextField, TextareaField, TinymceField: free text
- FileUploadField: file input resolving to an UploadedFile handle
- RadioField, SelectField: fixed option sets
- SelectRelationField: related entity selection
- DatePickerField: date / datetime picker
"""

from crud_fields.fields.base import Field
from crud_fields.fields.choice import ChoiceField, RadioField, SelectField
from crud_fields.fields.date_picker import DatePickerField
from crud_fields.fields.file_upload import FileUploadField
from crud_fields.fields.relation import SelectRelationField
from crud_fields.fields.text import TextareaField, TextField, TinymceField

__all__ = [
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
]
