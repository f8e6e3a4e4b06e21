"""Bundle identifiers derived from file set membership."""

from __future__ import annotations

import hashlib
from typing import Iterable

from .fileset import FileSet
from .models import content_type_for

_DELIMITER = "."


def fingerprint(paths: Iterable[str]) -> str:
    """Return the md5 hex digest of the sorted, dot-joined paths."""
    joined = _DELIMITER.join(sorted(paths))
    return hashlib.md5(joined.encode("utf-8")).hexdigest()


def identifier_for(file_set: FileSet) -> str:
    """Return the bundle file name for ``file_set`` and freeze the set.

    Only membership and content type feed the identifier; editing a member
    file leaves it unchanged, so stale bundles must be deleted by hand.
    """
    file_set.freeze()
    extension = content_type_for(file_set.content_type).extension
    return f"{fingerprint(file_set.paths)}.{extension}"


__all__ = ["fingerprint", "identifier_for"]
