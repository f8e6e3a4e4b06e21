"""Minifier strategies and the per-content-type registry.

Strategies are looked up by ``(content_type, name)``. Built-ins are registered
at import time; third-party strategies can be added with
:func:`register_minifier` or advertised under the ``filebundler.minifiers``
entry-point group. Lookups never fail hard: :func:`minify` returns the input
unchanged when no strategy matches or the strategy raises.
"""

from __future__ import annotations

from importlib import metadata
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from ..logging import get_logger
from ..models import SCRIPT, STYLE
from .base import Minifier
from .script import JsminScriptMinifier, PackerScriptMinifier
from .style import RcssminStyleMinifier, RegexStyleMinifier

_ENTRY_POINT_GROUP = "filebundler.minifiers"

_BUILTIN_FACTORIES: Tuple[Callable[[], Minifier], ...] = (
    JsminScriptMinifier,
    PackerScriptMinifier,
    RegexStyleMinifier,
    RcssminStyleMinifier,
)

# Historical tag names. Style bundles accept the script tags too and map every
# one of them to the regex strategy.
_ALIASES: Dict[str, Dict[str, str]] = {
    SCRIPT: {
        "minifiera": "jsmin",
        "minifierb": "packer",
    },
    STYLE: {
        "minifiera": "regex",
        "minifierb": "regex",
        "jsmin": "regex",
        "packer": "regex",
    },
}

_REGISTRY: Dict[Tuple[str, str], Minifier] = {}
_entry_points_loaded = False
_logger = get_logger("minifiers")


def register_minifier(minifier: Minifier, *, replace: bool = False) -> Minifier:
    """Register ``minifier`` under its content type and name."""
    if not isinstance(minifier, Minifier):
        raise TypeError("register_minifier() expects a Minifier instance")
    if not minifier.name or not minifier.content_type:
        raise ValueError(f"{minifier!r} must define name and content_type")
    key = (minifier.content_type, minifier.name.lower())
    if key in _REGISTRY and not replace:
        raise ValueError(
            f"A {minifier.content_type} minifier named '{minifier.name}' is already registered"
        )
    _REGISTRY[key] = minifier
    return minifier


def unregister_minifier(content_type: str, name: str) -> None:
    _REGISTRY.pop((content_type, name.strip().lower()), None)


def get_minifier(content_type: str, name: str) -> Optional[Minifier]:
    """Return the registered strategy, or None when there is none."""
    _load_entry_points()
    return _REGISTRY.get((content_type, _canonical(content_type, name)))


def available_minifiers(content_type: str | None = None) -> List[str]:
    _load_entry_points()
    return sorted(
        name
        for (registered_type, name) in _REGISTRY
        if content_type is None or registered_type == content_type
    )


def minify(text: str, content_type: str, name: str) -> str:
    """Minify ``text`` with the named strategy, falling back to the input."""
    minifier = get_minifier(content_type, name)
    if minifier is None:
        _logger.warning(
            "Unknown %s minifier '%s' was specified; leaving bundle unminified",
            content_type,
            name,
        )
        return text
    try:
        return minifier.minify(text)
    except Exception as exc:  # noqa: BLE001
        _logger.warning(
            "%s minifier '%s' failed (%s); leaving bundle unminified",
            content_type,
            minifier.name,
            exc,
        )
        return text


def _canonical(content_type: str, name: str) -> str:
    key = name.strip().lower()
    return _ALIASES.get(content_type, {}).get(key, key)


def _load_entry_points() -> None:
    global _entry_points_loaded
    if _entry_points_loaded:
        return
    _entry_points_loaded = True
    for entry in _iter_entry_points():
        try:
            minifier = _coerce_minifier(entry.load())
        except Exception as exc:  # noqa: BLE001
            _logger.warning("Failed to load minifier entry point '%s': %s", entry.name, exc)
            continue
        register_minifier(minifier, replace=True)


def _coerce_minifier(obj: object) -> Minifier:
    if isinstance(obj, Minifier):
        return obj
    if isinstance(obj, type) and issubclass(obj, Minifier):
        return obj()
    if callable(obj):
        instance = obj()
        if isinstance(instance, Minifier):
            return instance
    raise TypeError("Minifier entry point must be a Minifier subclass or factory")


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points(group=_ENTRY_POINT_GROUP)


for _factory in _BUILTIN_FACTORIES:
    register_minifier(_factory())


__all__ = [
    "JsminScriptMinifier",
    "Minifier",
    "PackerScriptMinifier",
    "RcssminStyleMinifier",
    "RegexStyleMinifier",
    "available_minifiers",
    "get_minifier",
    "minify",
    "register_minifier",
    "unregister_minifier",
]
