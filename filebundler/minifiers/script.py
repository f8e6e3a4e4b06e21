"""JavaScript minifiers."""

from __future__ import annotations

import re
from collections import Counter
from typing import Dict, List

from jsmin import jsmin

from ..models import SCRIPT
from .base import Minifier

_WORD = re.compile(r"\b\w+\b", re.ASCII)
_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"
_RADIX = 62

# Self-decoding wrapper in the style of Dean Edwards' packer (base-62 encoding).
_DECODER = (
    "eval(function(p,a,c,k,e,r){e=function(c){return(c<a?'':e(parseInt(c/a)))"
    "+((c=c%a)>35?String.fromCharCode(c+29):c.toString(36))};"
    "if(!''.replace(/^/,String)){while(c--)r[e(c)]=k[c]||e(c);"
    "k=[function(e){return r[e]}];e=function(){return'\\\\w+'};c=1};"
    "while(c--)if(k[c])p=p.replace(new RegExp('\\\\b'+e(c)+'\\\\b','g'),k[c]);"
    "return p}"
)

_PAYLOAD_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    "\n": "\\n",
    "\r": "\\r",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


class JsminScriptMinifier(Minifier):
    """Removes comments and insignificant whitespace; names are untouched."""

    name = "jsmin"
    content_type = SCRIPT

    def minify(self, text: str) -> str:
        return jsmin(text)


class PackerScriptMinifier(Minifier):
    """Minifies with jsmin, then packs every word into a base-62 dictionary.

    The result is a single ``eval`` expression that rebuilds the minified
    source at load time. Frequent words get the shortest codes.
    """

    name = "packer"
    content_type = SCRIPT

    def minify(self, text: str) -> str:
        return pack(jsmin(text))


def encode62(index: int) -> str:
    """Encode ``index`` exactly like the decoder's ``e`` function."""
    prefix = "" if index < _RADIX else encode62(index // _RADIX)
    index %= _RADIX
    char = chr(index + 29) if index > 35 else _BASE36[index]
    return prefix + char


def pack(script: str) -> str:
    counts = Counter(_WORD.findall(script))
    if not counts:
        return script

    words = [word for word, _ in counts.most_common()]
    size = len(words)
    slots = {encode62(index): index for index in range(size)}

    keywords: List[str] = [""] * size
    codes: Dict[str, str] = {}
    pending: List[str] = []
    for word in words:
        # A word that is already some slot's code must decode to itself.
        if word in slots:
            codes[word] = word
        else:
            pending.append(word)
    reserved = {slots[word] for word in codes}
    free = (index for index in range(size) if index not in reserved)
    for word, index in zip(pending, free):
        keywords[index] = word
        codes[word] = encode62(index)

    payload = _WORD.sub(lambda match: codes[match.group(0)], script)
    payload = "".join(_PAYLOAD_ESCAPES.get(char, char) for char in payload)
    return (
        f"{_DECODER}('{payload}',{_RADIX},{size},"
        f"'{'|'.join(keywords)}'.split('|'),0,{{}}))\n"
    )


__all__ = ["JsminScriptMinifier", "PackerScriptMinifier", "encode62", "pack"]
