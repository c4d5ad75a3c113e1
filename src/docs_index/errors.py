from pathlib import Path


class DocsIndexError(Exception):
    """Base class for all docs-index errors."""


class DocumentReadError(DocsIndexError):
    """A single document could not be read or decoded.

    Raised per file and collected by the loader; it never aborts a build.
    """

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot read document {self.path}: {reason}")


class EmptyIndexError(DocsIndexError):
    """A query was issued before any index was built."""


class ConfigError(DocsIndexError):
    """Configuration file is missing, malformed or invalid."""
