"""Persistent stores for bundle artifacts."""

from .bundle_store import BundleReadError, BundleStore, BundleWriteError

__all__ = ["BundleReadError", "BundleStore", "BundleWriteError"]
