"""FileBundler facade: one bundler per content type and request."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional

from .cache_key import identifier_for
from .config import BundlerConfig
from .fileset import FileSet
from .logging import get_logger
from .models import ArtifactLocation
from .references import render_references
from .stores import BundleStore


@dataclass
class BundleOutcome:
    """Result of :meth:`FileBundler.write_bundle`."""

    references: List[str]
    location: Optional[ArtifactLocation] = None
    files: List[str] = field(default_factory=list)

    @property
    def html(self) -> str:
        return "".join(f"{reference}\n" for reference in self.references)


class FileBundler:
    """Concatenates script or stylesheet files into a single reusable bundle.

    A bundle is reused as long as its file exists; editing a source file does
    not invalidate it. Delete the bundle (or pass ``overwrite=True``) after
    changing sources.
    """

    def __init__(
        self,
        config: BundlerConfig | None = None,
        *,
        files: Iterable[str] | None = None,
        store: BundleStore | None = None,
        **options: Any,
    ) -> None:
        if config is None:
            config = BundlerConfig.from_mapping(options)
        elif options:
            raise TypeError("Pass either a BundlerConfig or keyword options, not both")
        self.config = config
        self.store = store or BundleStore()
        self.file_set = FileSet(config)
        self.logger = get_logger("bundler", debug=config.debug)
        if files:
            self.add_files(files)

    def add_file(self, path: str) -> None:
        self.file_set.add_file(path)

    def add_files(self, paths: Iterable[str]) -> None:
        self.file_set.add(paths)

    @property
    def files(self) -> List[str]:
        return list(self.file_set.paths)

    def bundle(self, overwrite: bool = False) -> ArtifactLocation:
        """Build or reuse the artifact for the current file set."""
        identifier = identifier_for(self.file_set)
        return self.store.resolve(identifier, self.file_set, self.config, overwrite=overwrite)

    def write_bundle(self, overwrite: bool = False) -> BundleOutcome:
        """Return the references to include, building the bundle when needed.

        With bundling disabled one reference per source file is returned.
        """
        started = time.perf_counter()
        if not self.config.enable_bundling:
            outcome = BundleOutcome(
                references=render_references(self.config.type, self.file_set.paths),
                files=self.files,
            )
        else:
            location = self.bundle(overwrite=overwrite)
            outcome = BundleOutcome(
                references=render_references(self.config.type, [location.web_path]),
                location=location,
                files=self.files,
            )
        if self.config.debug:
            elapsed = time.perf_counter() - started
            self.logger.debug("write_bundle(): finished in %.4fs", elapsed)
        return outcome


__all__ = ["BundleOutcome", "FileBundler"]
