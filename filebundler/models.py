"""Core data models shared across filebundler components."""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable


class FileBundlerError(RuntimeError):
    """Base class for errors surfaced to bundler callers."""


class UnsupportedTypeError(FileBundlerError, ValueError):
    """Raised when a content type has no known output form."""

    def __init__(self, content_type: str) -> None:
        super().__init__(f"Unknown bundle type: {content_type!r}")
        self.content_type = content_type


@dataclass(frozen=True)
class ContentType:
    """Static facts about a bundleable content type."""

    name: str
    extension: str
    comment_open: str
    comment_close: str
    default_minifier: str

    def header(self, paths: Iterable[str]) -> str:
        """Return the comment block listing bundle members, one per line."""
        body = "\n".join(paths)
        return f"{self.comment_open}\n{body}\n{self.comment_close}\n"


SCRIPT = "script"
STYLE = "style"

CONTENT_TYPES: Dict[str, ContentType] = {
    SCRIPT: ContentType(
        name=SCRIPT,
        extension="js",
        comment_open="/*",
        comment_close="*/",
        default_minifier="jsmin",
    ),
    STYLE: ContentType(
        name=STYLE,
        extension="css",
        comment_open="/*",
        comment_close="*/",
        default_minifier="regex",
    ),
}


def content_type_for(name: str) -> ContentType:
    """Return the content type registered under ``name``."""
    try:
        return CONTENT_TYPES[name]
    except KeyError:
        raise UnsupportedTypeError(name) from None


@dataclass
class ArtifactLocation:
    """Where a bundle lives on disk and under the web root."""

    identifier: str
    path: Path
    web_path: str
    built: bool = False


__all__ = [
    "ArtifactLocation",
    "CONTENT_TYPES",
    "ContentType",
    "FileBundlerError",
    "SCRIPT",
    "STYLE",
    "UnsupportedTypeError",
    "content_type_for",
]
