"""Validated, deduplicated collection of files for one bundle request."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List, Tuple

from .config import BundlerConfig
from .logging import get_logger
from .models import FileBundlerError


class FileSetFrozenError(FileBundlerError):
    """Raised when adding to a file set whose identifier was already derived."""


class FileSet:
    """Root-relative source paths of a single content type, in insertion order.

    Paths that do not resolve to an existing file under the app root are
    dropped with a warning. Adding a path twice keeps its first position,
    which is also the order members are concatenated in.
    """

    def __init__(self, config: BundlerConfig, paths: Iterable[str] = ()) -> None:
        self._config = config
        self._paths: List[str] = []
        self._frozen = False
        self.logger = get_logger("fileset", debug=config.debug)
        paths = list(paths)
        if paths:
            self.add(paths)

    @property
    def content_type(self) -> str:
        return self._config.type

    @property
    def config(self) -> BundlerConfig:
        return self._config

    @property
    def paths(self) -> Tuple[str, ...]:
        return tuple(self._paths)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def add(self, paths: Iterable[str]) -> None:
        """Add ``paths``; relative entries resolve against the source directory."""
        if self._frozen:
            raise FileSetFrozenError("File set is frozen once its identifier is derived")
        paths = list(paths)
        if self._config.debug:
            self.logger.debug("Adding files: %s", ",".join(paths))
        for raw in paths:
            web_path = self._config.resolve_web_path(raw)
            if not self.system_path(web_path).is_file():
                self.logger.warning("%s doesn't exist. removing from bundle.", web_path)
                continue
            if web_path in self._paths:
                continue
            self._paths.append(web_path)

    def add_file(self, path: str) -> None:
        """Shortcut for :meth:`add` with a single path."""
        self.add([path])

    def system_path(self, web_path: str) -> Path:
        return self._config.system_path(web_path)

    def freeze(self) -> None:
        self._frozen = True

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._paths))

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __repr__(self) -> str:
        return f"FileSet(type={self.content_type!r}, paths={self._paths!r})"


__all__ = ["FileSet", "FileSetFrozenError"]
