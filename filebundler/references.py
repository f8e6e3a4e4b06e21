"""HTML references to bundles or their individual source files."""

from __future__ import annotations

from typing import Iterable, List

from jinja2 import Environment

from .models import SCRIPT, STYLE, UnsupportedTypeError

_ENVIRONMENT = Environment(autoescape=True)

_TEMPLATES = {
    SCRIPT: _ENVIRONMENT.from_string(
        '<script src="{{ src }}" type="text/javascript"></script>'
    ),
    STYLE: _ENVIRONMENT.from_string(
        '<link href="{{ src }}" type="text/css" rel="stylesheet"/>'
    ),
}


def render_reference(content_type: str, web_path: str) -> str:
    """Return the inclusion tag for ``web_path``.

    Raises :class:`UnsupportedTypeError` when the content type has no tag form.
    """
    template = _TEMPLATES.get(content_type)
    if template is None:
        raise UnsupportedTypeError(content_type)
    return template.render(src=web_path)


def render_references(content_type: str, web_paths: Iterable[str]) -> List[str]:
    return [render_reference(content_type, path) for path in web_paths]


__all__ = ["render_reference", "render_references"]
