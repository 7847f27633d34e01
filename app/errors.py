from __future__ import annotations

from pathlib import Path


class BlogLoadError(Exception):
    """Raised when the blog directory cannot be turned into a service."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class ConfigNotFound(BlogLoadError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Blog config file could not be read: {path}", path)


class ConfigInvalid(BlogLoadError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Blog config file {path} is invalid: {reason}", path)
        self.reason = reason


class PostSourceNotFound(BlogLoadError):
    def __init__(self, path: Path, slug: str) -> None:
        super().__init__(f"Markdown source for post '{slug}' could not be read: {path}", path)
        self.slug = slug
