import logging
from dataclasses import dataclass, field
from pathlib import Path
from time import monotonic

from docs_index.errors import DocumentReadError
from docs_index.observability import names
from docs_index.observability.base import MetricsHook, NoOpMetricsHook

from .models import Document

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadResult:
    documents: list[Document]
    skipped: list[DocumentReadError] = field(default_factory=list)

    @property
    def skipped_paths(self) -> list[str]:
        return [e.path for e in self.skipped]


def read_document(path: Path, root: Path, encoding: str = "utf-8") -> Document:
    """Read one file into a Document keyed by its POSIX path relative to root.

    Raises:
        DocumentReadError: If the file cannot be opened or decoded.
    """
    relative = path.relative_to(root).as_posix()
    try:
        # newline="" keeps "\r\n" so section offsets match the bytes on disk
        with open(path, encoding=encoding, newline="") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise DocumentReadError(relative, f"not valid {encoding}: {e.reason}") from e
    except OSError as e:
        raise DocumentReadError(relative, e.strerror or str(e)) from e
    return Document(path=relative, text=text)


def load_documents(
    directory: str | Path,
    *,
    pattern: str = "**/*.md",
    encoding: str = "utf-8",
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> LoadResult:
    """Load every file under `directory` matching `pattern`.

    Files are visited in sorted order. A file that fails to read is logged,
    recorded in `LoadResult.skipped` and does not stop the load.

    Raises:
        NotADirectoryError: If `directory` does not exist or is not a directory.
    """
    start = monotonic()
    root = Path(directory)
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")

    documents: list[Document] = []
    skipped: list[DocumentReadError] = []

    resolved_root = root.resolve()
    for path in sorted(p for p in root.glob(pattern) if p.is_file()):
        if not path.resolve().is_relative_to(resolved_root):
            logger.warning("Ignoring %s: outside %s", path, root)
            continue
        try:
            documents.append(read_document(path, root, encoding))
            logger.debug("Loaded %s", path)
        except DocumentReadError as e:
            logger.warning("Skipping %s: %s", e.path, e.reason)
            skipped.append(e)

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.LOAD_DURATION, elapsed_ms)
    metrics_hook.increment(names.DOCUMENTS_LOADED_TOTAL, len(documents))
    metrics_hook.increment(names.DOCUMENTS_SKIPPED_TOTAL, len(skipped))
    logger.info(
        "Loaded %d documents from %s (%d skipped)", len(documents), root, len(skipped)
    )
    return LoadResult(documents=documents, skipped=skipped)
