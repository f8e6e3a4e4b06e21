"""Concatenate and minify script and stylesheet files into cached bundles."""

from .bundler import BundleOutcome, FileBundler
from .cache_key import identifier_for
from .config import BundlerConfig, ConfigError, load_config
from .fileset import FileSet, FileSetFrozenError
from .models import ArtifactLocation, FileBundlerError, UnsupportedTypeError
from .stores import BundleReadError, BundleStore, BundleWriteError

__version__ = "1.0.0"

__all__ = [
    "ArtifactLocation",
    "BundleOutcome",
    "BundleReadError",
    "BundleStore",
    "BundleWriteError",
    "BundlerConfig",
    "ConfigError",
    "FileBundler",
    "FileBundlerError",
    "FileSet",
    "FileSetFrozenError",
    "UnsupportedTypeError",
    "identifier_for",
    "load_config",
]
