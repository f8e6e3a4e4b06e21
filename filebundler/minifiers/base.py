"""Base class for minifier strategies."""

from abc import ABC, abstractmethod


class Minifier(ABC):
    """Contract for strategies that shrink bundle text of one content type."""

    #: Registry tag, e.g. ``"jsmin"``.
    name: str = ""
    #: Content type handled, ``"script"`` or ``"style"``.
    content_type: str = ""

    @abstractmethod
    def minify(self, text: str) -> str:
        """Return a smaller, equivalent rendition of ``text``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, content_type={self.content_type!r})"
