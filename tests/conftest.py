"""Shared fixtures for crud-fields tests."""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping

import pytest

from crud_fields import (
    CrudFields,
    Crudable,
    DatePickerField,
    FileUploadField,
    RadioField,
    SelectRelationField,
    TextareaField,
    TextField,
    TinymceField,
)


@dataclass
class Category:
    id: int
    name: str


CATEGORIES = [Category(1, "News"), Category(2, "Tutorials")]


@dataclass
class Post(Crudable):
    title: str | None = None
    introduction: str | None = None
    content: str | None = None
    illustration: str | None = None
    category_id: int | None = None
    status: str | None = None
    published_at: date | None = None
    category: Category | None = field(default=None, repr=False)

    @classmethod
    def get_crud_fields(cls) -> CrudFields:
        return CrudFields.make([
            TextField.handle("title", "required|min:3").with_placeholder("Title of the post"),
            TextareaField.handle("introduction", "required|min:3").with_placeholder("Short introduction to the post"),
            TinymceField.handle("content", "required|min:3").with_placeholder("Your content !"),
            FileUploadField.handle("illustration").with_max_size(1024 * 1024).with_types("jpeg,png"),
            SelectRelationField.handle("category_id").with_relation("category").with_choices(lambda: CATEGORIES).with_label("Category"),
            RadioField.handle("status", "required").with_options({"draft": "Draft", "live": "Live"}, "live"),
            DatePickerField.handle("published_at").with_date_format("%Y-%m-%d").with_min_date(date(2020, 1, 1)),
        ])


class RecordingRenderer:
    """ViewRenderer that remembers what it was asked to render."""

    def __init__(self):
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def render(self, view_name: str, variables: Mapping[str, Any]) -> str:
        self.calls.append((view_name, dict(variables)))
        return f"<{view_name}:{variables['name']}>"


@pytest.fixture
def post() -> Post:
    """A post with every attribute filled and a loaded category."""
    return Post(
        title="Hello",
        introduction="Intro",
        content="<p>Body</p>",
        illustration="uploads/2024/cover.png",
        category_id=2,
        status="draft",
        published_at=date(2024, 3, 15),
        category=CATEGORIES[1],
    )


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def fields(renderer) -> CrudFields:
    """Unbound registry of the post fields using the recording renderer."""
    registry = Post.get_crud_fields()
    registry.renderer = renderer
    return registry
