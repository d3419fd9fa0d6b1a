"""
Field view rendering.

A field never renders itself: it produces a `FieldView` (view name +
variable bag) and hands it to a `ViewRenderer`. The default renderer
is a Jinja2 environment that resolves bundled templates
(`fields/text.html`, ...) and, when configured, an extra directory
searched first so applications can override them.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from jinja2 import (
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
    Undefined,
    select_autoescape,
)

from crud_fields.config import get_config
from crud_fields.contracts import ViewRenderer

logger = logging.getLogger("crud-fields.rendering")


@dataclass(frozen=True)
class FieldView:
    """The `(view name, variables)` pair a field hands to the template engine."""

    view_name: str
    variables: dict[str, Any] = field(default_factory=dict)

    def render(self, renderer: ViewRenderer) -> str:
        return renderer.render(self.view_name, self.variables)


class JinjaViewRenderer:
    """
    Jinja2-backed `ViewRenderer`.

    Usage:
        renderer = JinjaViewRenderer()
        html = renderer.render("fields/text.html", {"name": "title", ...})

    Args:
        search_path: Optional directory searched before bundled templates.
            Defaults to `config.template_path`.
        autoescape: Enable HTML autoescaping. Defaults to `config.autoescape`.
        strict: Raise on undefined template variables.
            Defaults to `config.strict_undefined`.
        globals: Extra template globals.
        filters: Extra template filters.
    """

    def __init__(
        self,
        search_path: str | None = None,
        *,
        autoescape: bool | None = None,
        strict: bool | None = None,
        globals: Mapping[str, Any] | None = None,
        filters: Mapping[str, Any] | None = None,
    ):
        config = get_config()
        self.search_path = search_path or config.template_path
        autoescape = config.autoescape if autoescape is None else autoescape
        strict = config.strict_undefined if strict is None else strict

        loaders = []
        if self.search_path:
            loaders.append(FileSystemLoader(self.search_path))
        loaders.append(PackageLoader("crud_fields", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(
                enabled_extensions=["html", "htm", "xml"],
                default_for_string=True,
            ) if autoescape else False,
            undefined=StrictUndefined if strict else Undefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.globals["asset"] = asset_url
        if globals:
            self.env.globals.update(globals)
        if filters:
            self.env.filters.update(filters)

    def render(self, view_name: str, variables: Mapping[str, Any]) -> str:
        """Render `view_name` with `variables`."""
        logger.debug(f"Rendering view {view_name}")
        template = self.env.get_template(view_name)
        return template.render(**variables)


def asset_url(path: str) -> str:
    """Prefix an asset path with `config.asset_prefix`."""
    prefix = get_config().asset_prefix
    if not prefix:
        return path
    return prefix.rstrip("/") + "/" + path.lstrip("/")


_default_renderer: JinjaViewRenderer | None = None


def get_default_renderer() -> JinjaViewRenderer:
    """Shared renderer used by registries that were given none."""
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = JinjaViewRenderer()
    return _default_renderer


def reset_default_renderer() -> None:
    """Forget the shared renderer so the next one picks up config changes."""
    global _default_renderer
    _default_renderer = None
