"""Tests for JavaScript minifiers."""

from __future__ import annotations

import re

from filebundler.minifiers import JsminScriptMinifier, PackerScriptMinifier
from filebundler.minifiers.script import encode62, pack

_WORD = re.compile(r"\b\w+\b", re.ASCII)
_PACKED = re.compile(
    r"^eval\(function\(p,a,c,k,e,r\).*?\}\('(?P<payload>.*)',62,(?P<count>\d+),"
    r"'(?P<keywords>[^']*)'\.split\('\|'\),0,\{\}\)\)\n$",
    re.S,
)
_UNESCAPES = {"\\": "\\", "'": "'", "n": "\n", "r": "\r", "u2028": "\u2028", "u2029": "\u2029"}


def _unpack(packed: str) -> str:
    """Mirror the embedded JavaScript decoder."""
    match = _PACKED.match(packed)
    assert match is not None, packed
    payload = re.sub(
        r"\\(u2028|u2029|.)",
        lambda m: _UNESCAPES[m.group(1)],
        match.group("payload"),
        flags=re.S,
    )
    keywords = match.group("keywords").split("|")
    count = int(match.group("count"))
    lookup = {encode62(index): keywords[index] or encode62(index) for index in range(count)}
    return _WORD.sub(lambda m: lookup[m.group(0)], payload)


def test_encode62_matches_decoder_alphabet() -> None:
    assert encode62(0) == "0"
    assert encode62(10) == "a"
    assert encode62(35) == "z"
    assert encode62(36) == "A"
    assert encode62(61) == "Z"
    assert encode62(62) == "10"
    assert encode62(62 * 62 + 1) == "101"


def test_jsmin_removes_comments_and_whitespace() -> None:
    source = "// leading comment\nvar  total = 1 + 2; /* inline */\nfunction add(a, b) {\n  return a + b;\n}\n"

    minified = JsminScriptMinifier().minify(source)

    assert "comment" not in minified
    assert "inline" not in minified
    assert "var total=1+2;" in minified
    assert len(minified) < len(source)


def test_pack_round_trips_source() -> None:
    source = (
        "function add(first, second) { return first + second; }\n"
        "var a = add(1, 2);\n"
        "var s = 'it\\'s', t = \"back\\\\slash\";\n"
    )

    packed = pack(source)

    assert packed.startswith("eval(function(p,a,c,k,e,r)")
    assert _unpack(packed) == source


def test_pack_reserves_words_that_look_like_codes() -> None:
    source = "".join(f"var w{index}={index};" for index in range(120))

    packed = pack(source)

    assert _unpack(packed) == source


def test_pack_uses_shortest_codes_for_frequent_words() -> None:
    source = "longName(); longName(); longName(); other();"

    match = _PACKED.match(pack(source))

    assert match is not None
    assert match.group("keywords").split("|")[0] == "longName"


def test_pack_without_words_returns_input() -> None:
    assert pack(";;") == ";;"


def test_packer_minifier_minifies_before_packing() -> None:
    source = "/* banner */\nvar greeting = 'hello';\nconsole.log(greeting);\n"

    packed = PackerScriptMinifier().minify(source)
    unpacked = _unpack(packed)

    assert "banner" not in unpacked
    assert "var greeting='hello';" in unpacked
