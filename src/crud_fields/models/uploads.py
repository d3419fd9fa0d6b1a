"""
Uploaded file handle.

File upload fields resolve the stored attribute (a path string) into
this handle rather than exposing the raw scalar.
"""

import mimetypes
import posixpath

from pydantic import BaseModel, Field


class UploadedFile(BaseModel):
    """Reference to a file stored for a record attribute."""

    path: str = Field(..., description="Storage path as saved on the record")
    filename: str = Field(..., description="Base name of the file")
    content_type: str | None = Field(default=None, description="Guessed MIME type")
    size: int | None = Field(default=None, ge=0, description="Size in bytes when known")

    @classmethod
    def from_path(cls, path: str, size: int | None = None) -> "UploadedFile":
        """Build a handle from a stored path, guessing name and MIME type."""
        content_type, _ = mimetypes.guess_type(path)
        return cls(
            path=path,
            filename=posixpath.basename(path.replace("\\", "/")),
            content_type=content_type,
            size=size,
        )

    @property
    def extension(self) -> str:
        """Lower-cased extension without the dot, or an empty string."""
        _, ext = posixpath.splitext(self.filename)
        return ext[1:].lower()

    def __str__(self) -> str:
        return self.path
