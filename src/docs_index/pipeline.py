import logging
from dataclasses import dataclass, field
from pathlib import Path

from .config import IndexerConfig
from .documents.loader import load_documents
from .errors import DocumentReadError
from .index.inverted_index import InvertedIndex, build_index
from .observability.base import MetricsHook, NoOpMetricsHook
from .parsers.base import DocumentParser
from .parsers.markdown_parser import MarkdownParser

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndexBuild:
    """A built index together with the documents that could not be read."""

    index: InvertedIndex
    directory: str
    skipped: list[DocumentReadError] = field(default_factory=list)

    @property
    def skipped_paths(self) -> list[str]:
        return [e.path for e in self.skipped]


def index_directory(
    directory: str | Path,
    config: IndexerConfig = IndexerConfig(),
    *,
    parser: DocumentParser | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> IndexBuild:
    """Load, parse and index every matching document under `directory`.

    Unreadable documents are skipped and reported; the rest are indexed.

    Raises:
        NotADirectoryError: If `directory` is not a directory.
    """
    parser = parser or MarkdownParser(metrics_hook=metrics_hook)
    loaded = load_documents(
        directory,
        pattern=config.pattern,
        encoding=config.encoding,
        metrics_hook=metrics_hook,
    )
    sections = (s for document in loaded.documents for s in parser.parse(document))
    index = build_index(sections, metrics_hook=metrics_hook)

    if loaded.skipped:
        logger.warning(
            "Index for %s is partial: %d documents skipped",
            directory,
            len(loaded.skipped),
        )
    return IndexBuild(index=index, directory=str(directory), skipped=loaded.skipped)
