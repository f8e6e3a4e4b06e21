"""Tests for stylesheet minifiers."""

from __future__ import annotations

import pytest

from filebundler.minifiers import RcssminStyleMinifier, RegexStyleMinifier

_SAMPLES = [
    "/* header */\nbody {\n  color : red ;\n  margin: 0 auto;\n}\n\na, b { }\n",
    "\t\t.a{color:blue}\r\n/* one */ /* two */ .b  >  .c { padding : 1px 2px }",
    "//*a*/* b */ .x { }",
    "",
]


def test_regex_minifier_reduces_whitespace_and_comments() -> None:
    minified = RegexStyleMinifier().minify(_SAMPLES[0])

    assert minified == "body{color:red;margin:0 auto;}a,b{}"


def test_regex_minifier_collapses_runs_between_selectors() -> None:
    minified = RegexStyleMinifier().minify(_SAMPLES[1])

    assert minified == ".a{color:blue}.b > .c{padding:1px 2px}"


def test_regex_minifier_removes_comments_spliced_by_removal() -> None:
    assert RegexStyleMinifier().minify(_SAMPLES[2]) == ".x{}"


@pytest.mark.parametrize("css", _SAMPLES)
def test_regex_minifier_is_idempotent(css: str) -> None:
    minifier = RegexStyleMinifier()
    once = minifier.minify(css)

    assert minifier.minify(once) == once


def test_rcssmin_minifier_strips_comments() -> None:
    minified = RcssminStyleMinifier().minify("/* c */\nbody {\n  color: red;\n}\n")

    assert "/*" not in minified
    assert "color:red" in minified
