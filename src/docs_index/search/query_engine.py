import logging
from time import monotonic

from docs_index.index.inverted_index import InvertedIndex
from docs_index.observability import names
from docs_index.observability.base import MetricsHook, NoOpMetricsHook
from docs_index.text.tokenizer import tokenize

from .types import SearchResult

logger = logging.getLogger(__name__)


class QueryEngine:
    """Keyword search over a built InvertedIndex.

    Query terms are OR-ed. A section's score is the total occurrence count of
    the distinct query terms it contains. Results are ordered by score
    (highest first), then document path, then position in the document.
    """

    def __init__(
        self,
        index: InvertedIndex,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.index = index
        self.metrics_hook = metrics_hook

    def search(self, query: str, limit: int | None = None) -> list[SearchResult]:
        if limit is not None and limit < 1:
            raise ValueError("limit must be at least 1")

        start = monotonic()
        terms = list(dict.fromkeys(tokenize(query)))
        logger.debug("Query %r -> terms %s", query, terms)

        scores: dict[str, int] = {}
        for term in terms:
            for posting in self.index.postings(term):
                previous = scores.get(posting.section_id, 0)
                scores[posting.section_id] = previous + posting.count

        results = [
            SearchResult(section=self.index.section(section_id), score=score)
            for section_id, score in scores.items()
        ]
        results.sort(
            key=lambda r: (-r.score, r.section.document_path, r.section.ordinal)
        )
        if limit is not None:
            results = results[:limit]

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.QUERY_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.QUERIES_TOTAL)
        logger.debug("Query %r matched %d sections", query, len(scores))
        return results
