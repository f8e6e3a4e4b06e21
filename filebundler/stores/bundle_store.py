"""On-disk bundle artifacts keyed by bundle identifier."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Callable, List

from .. import minifiers
from ..config import BundlerConfig
from ..fileset import FileSet
from ..logging import enable_debug, get_logger
from ..models import ArtifactLocation, FileBundlerError, content_type_for

MinifyFn = Callable[[str, str, str], str]

# Temp files are created 0600; artifacts get the mode a plain open() would give.
_FILE_MODE = 0o666
_UMASK = os.umask(0)
os.umask(_UMASK)


class BundleReadError(FileBundlerError):
    """Raised when a member file cannot be read while building a bundle."""

    def __init__(self, path: Path, reason: object) -> None:
        super().__init__(f"Failed to read bundle member {path}: {reason}")
        self.path = path


class BundleWriteError(FileBundlerError):
    """Raised when the bundle artifact cannot be written."""

    def __init__(self, path: Path, reason: object) -> None:
        super().__init__(f"Failed to write bundle {path}: {reason}")
        self.path = path


class BundleStore:
    """Resolves identifiers to artifacts, building them on a cache miss."""

    def __init__(self, minify: MinifyFn | None = None) -> None:
        self._minify = minify or minifiers.minify
        self.logger = get_logger("stores.bundle")

    def location_for(self, identifier: str, config: BundlerConfig) -> ArtifactLocation:
        return ArtifactLocation(
            identifier=identifier,
            path=config.bundle_system_dir / identifier,
            web_path=config.bundle_web_path(identifier),
        )

    def resolve(
        self,
        identifier: str,
        file_set: FileSet,
        config: BundlerConfig,
        overwrite: bool = False,
    ) -> ArtifactLocation:
        """Return the artifact for ``identifier``, writing it when absent.

        With ``overwrite`` the artifact is rebuilt even if it already exists.
        """
        if config.debug:
            enable_debug()
        location = self.location_for(identifier, config)
        if location.path.is_file() and not overwrite:
            if config.debug:
                self.logger.debug("Reusing bundle %s", location.path)
            return location

        if config.debug:
            self.logger.debug(">>> CREATING A NEW BUNDLE <<<")
        payload = self.build(file_set, config)
        self._write_atomic(location.path, payload)
        location.built = True
        self.logger.info("Wrote bundle %s (%d files)", location.path, len(file_set))
        return location

    def build(self, file_set: FileSet, config: BundlerConfig) -> bytes:
        """Return the artifact bytes: optional header then member contents."""
        chunks: List[bytes] = []
        for web_path in file_set:
            source = file_set.system_path(web_path)
            try:
                chunks.append(source.read_bytes())
            except OSError as exc:
                raise BundleReadError(source, exc) from exc
        code = b"".join(chunks)

        if config.compress:
            code = self._compress(code, config)

        if not config.show_list:
            return code
        header = content_type_for(config.type).header(file_set.paths)
        return header.encode("utf-8") + code

    def _compress(self, code: bytes, config: BundlerConfig) -> bytes:
        try:
            text = code.decode("utf-8")
        except UnicodeDecodeError as exc:
            self.logger.warning("Bundle is not valid UTF-8 (%s); skipping minification", exc)
            return code
        if config.debug:
            self.logger.debug("Compressing %s bundle with %s...", config.type, config.minifier)
        return self._minify(text, config.type, config.minifier).encode("utf-8")

    def _write_atomic(self, target: Path, payload: bytes) -> None:
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                dir=target.parent,
                prefix=f".{target.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                temp_path = Path(handle.name)
                try:
                    handle.write(payload)
                    handle.flush()
                    os.fsync(handle.fileno())
                except OSError:
                    handle.close()
                    temp_path.unlink(missing_ok=True)
                    raise
        except OSError as exc:
            raise BundleWriteError(target, exc) from exc

        try:
            os.chmod(temp_path, _FILE_MODE & ~_UMASK)
            os.replace(temp_path, target)
        except OSError as exc:
            temp_path.unlink(missing_ok=True)
            raise BundleWriteError(target, exc) from exc


__all__ = ["BundleReadError", "BundleStore", "BundleWriteError"]
