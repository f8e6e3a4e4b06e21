"""Configuration for filebundler (.filebundler.yml or keyword arguments)."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .models import FileBundlerError, SCRIPT, content_type_for

CONFIG_FILENAME = ".filebundler.yml"


class ConfigError(FileBundlerError):
    """Raised when the configuration cannot be parsed."""


@dataclass(frozen=True)
class BundlerConfig:
    """Immutable settings snapshot for one bundler instance.

    ``source_dir`` and ``bundle_dir`` are web-root relative (they start with
    ``/``); ``approot`` is the filesystem directory the web root maps onto.
    ``enable_bundling`` replaces the process-wide on/off switch: when False the
    bundler emits one reference per source file and never builds an artifact.
    """

    type: str = SCRIPT
    debug: bool = False
    compress: bool = True
    minifier: Optional[str] = None
    approot: str = ""
    source_dir: Optional[str] = None
    bundle_dir: Optional[str] = None
    show_list: bool = True
    enable_bundling: bool = True

    def __post_init__(self) -> None:
        content_type = content_type_for(self.type)
        object.__setattr__(self, "approot", str(self.approot))
        if self.minifier is None:
            object.__setattr__(self, "minifier", content_type.default_minifier)
        if self.source_dir is None:
            object.__setattr__(self, "source_dir", f"/{self.type}")
        if self.bundle_dir is None:
            object.__setattr__(self, "bundle_dir", f"/{self.type}/bundles")

    @property
    def extension(self) -> str:
        return content_type_for(self.type).extension

    def resolve_web_path(self, path: str) -> str:
        """Return ``path`` made root-relative against the source directory."""
        if path.startswith("/"):
            return path
        return f"{self.source_dir.rstrip('/')}/{path}"

    def system_path(self, web_path: str) -> Path:
        """Map a root-relative web path onto the filesystem under ``approot``."""
        return Path(f"{self.approot.rstrip('/')}{web_path}")

    @property
    def bundle_system_dir(self) -> Path:
        return self.system_path(self.bundle_dir)

    def bundle_web_path(self, identifier: str) -> str:
        return f"{self.bundle_dir.rstrip('/')}/{identifier}"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "BundlerConfig":
        """Build a config from a loosely typed mapping, ignoring unknown keys."""
        known = {field.name for field in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            name = _normalise_key(str(key))
            if name not in known or value is None:
                continue
            if name in {"debug", "compress", "show_list", "enable_bundling"}:
                coerced = _as_bool(value)
                if coerced is None:
                    raise ConfigError(f"'{key}' must be a boolean, got {value!r}")
                kwargs[name] = coerced
            else:
                coerced_str = _as_str(value)
                if coerced_str is None:
                    raise ConfigError(f"'{key}' must be a string, got {value!r}")
                kwargs[name] = coerced_str
        return cls(**kwargs)


def load_config(config_path: Path) -> BundlerConfig:
    """Load configuration from disk; a missing file yields the defaults."""
    return BundlerConfig.from_mapping(load_config_data(config_path))


def load_config_data(config_path: Path) -> Dict[str, Any]:
    """Return the raw bundler settings mapping, empty when the file is absent.

    Settings may sit at the root of the file or under a `bundler:` key.
    """
    config_file = _resolve_config_path(config_path)

    if not config_file.exists():
        return {}

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    bundler_data = data.get("bundler", data)
    if not isinstance(bundler_data, dict):
        raise ConfigError("'bundler' section must be a mapping")
    return dict(bundler_data)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


_KEY_ALIASES = {
    "debugmode": "debug",
    "sourcedir": "source_dir",
    "bundledir": "bundle_dir",
    "showlist": "show_list",
    "optimizer": "minifier",
    "enablebundling": "enable_bundling",
}


def _normalise_key(key: str) -> str:
    lowered = key.strip().lower().replace("-", "_")
    return _KEY_ALIASES.get(lowered.replace("_", ""), lowered)


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, Path)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1", "on"}:
            return True
        if lowered in {"false", "no", "0", "off"}:
            return False
    return None


__all__ = ["BundlerConfig", "CONFIG_FILENAME", "ConfigError", "load_config", "load_config_data"]
