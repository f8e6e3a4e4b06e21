"""Stylesheet minifiers."""

from __future__ import annotations

import re

import rcssmin

from ..models import STYLE
from .base import Minifier

_COMMENTS = re.compile(r"/\*.*?\*/", re.S)
_WHITESPACE = re.compile(r"\s+", re.ASCII)
_PUNCTUATION = re.compile(r"\s*([{},;:])\s*", re.ASCII)
_LEADING = re.compile(r"^\s+", re.ASCII)


class RegexStyleMinifier(Minifier):
    """Textual reduction: comments, whitespace runs and spacing around marks.

    Applying it to its own output changes nothing.
    """

    name = "regex"
    content_type = STYLE

    def minify(self, text: str) -> str:
        css = _strip_comments(text)
        css = _WHITESPACE.sub(" ", css)
        css = _PUNCTUATION.sub(r"\1", css)
        return _LEADING.sub("", css)


class RcssminStyleMinifier(Minifier):
    """Delegates to ``rcssmin``, which also understands strings and hacks."""

    name = "rcssmin"
    content_type = STYLE

    def minify(self, text: str) -> str:
        return rcssmin.cssmin(text)


def _strip_comments(css: str) -> str:
    # Removing one comment can splice a new one together, e.g. "//*a*/* b */".
    while True:
        stripped = _COMMENTS.sub("", css)
        if stripped == css:
            return stripped
        css = stripped


__all__ = ["RcssminStyleMinifier", "RegexStyleMinifier"]
