"""
Data models for crud-fields.

This module contains Pydantic models for:
- Uploaded file handles
- Rule violation reports handed back by an external validator
"""

from crud_fields.models.uploads import UploadedFile
from crud_fields.models.violations import RuleViolation, ValidationReport

__all__ = [
    # Files
    "UploadedFile",
    # Validation
    "RuleViolation",
    "ValidationReport",
]
