import asyncio
import logging
import threading
from pathlib import Path

from .config import IndexerConfig
from .errors import EmptyIndexError
from .index.inverted_index import InvertedIndex
from .observability import names
from .observability.base import MetricsHook, NoOpMetricsHook
from .pipeline import IndexBuild, index_directory
from .search.query_engine import QueryEngine
from .search.types import SearchResult

logger = logging.getLogger(__name__)


class IndexHolder:
    """Owns the active index and swaps it atomically on re-index.

    A re-index builds a complete new InvertedIndex before replacing the
    reference, so concurrent readers see either the old or the new index,
    never a partial one.

    Example:
        >>> holder = IndexHolder()
        >>> holder.reindex("docs/")
        >>> results = holder.search("boto3 client")
    """

    def __init__(
        self,
        config: IndexerConfig = IndexerConfig(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config
        self.metrics_hook = metrics_hook
        self._engine: QueryEngine | None = None
        self._last_build: IndexBuild | None = None
        # serializes builds; readers only take the reference
        self._build_lock = threading.Lock()

    @property
    def current(self) -> InvertedIndex:
        return self._current_engine().index

    @property
    def last_build(self) -> IndexBuild | None:
        return self._last_build

    def reindex(self, directory: str | Path) -> IndexBuild:
        with self._build_lock:
            build = index_directory(
                directory, self.config, metrics_hook=self.metrics_hook
            )
            self._engine = QueryEngine(build.index, metrics_hook=self.metrics_hook)
            self._last_build = build
        logger.info("Active index swapped to build of %s", build.directory)
        return build

    def search(self, query: str, limit: int | None = None) -> list[SearchResult]:
        try:
            engine = self._current_engine()
        except EmptyIndexError as e:
            logger.warning("Query %r ignored: %s", query, e)
            self.metrics_hook.increment(names.QUERIES_EMPTY_INDEX_TOTAL)
            return []
        if limit is None:
            limit = self.config.default_limit
        return engine.search(query, limit=limit)

    def _current_engine(self) -> QueryEngine:
        engine = self._engine
        if engine is None:
            raise EmptyIndexError("No index has been built yet")
        return engine

    async def areindex(self, directory: str | Path) -> IndexBuild:
        return await asyncio.to_thread(self.reindex, directory)

    async def asearch(
        self, query: str, limit: int | None = None
    ) -> list[SearchResult]:
        return await asyncio.to_thread(self.search, query, limit)
