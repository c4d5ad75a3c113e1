"""In-memory inverted index over Markdown sections."""

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from time import monotonic
from types import MappingProxyType
from typing import Any

from docs_index.documents.models import Section
from docs_index.observability import names
from docs_index.observability.base import MetricsHook, NoOpMetricsHook
from docs_index.text.tokenizer import term_counts

from .types import IndexStats, Posting

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InvertedIndex:
    """Immutable term -> postings mapping.

    Every section id referenced by a posting is a key of `sections`.
    Postings for a term are ordered by (document path, ordinal).
    Instances are never mutated; re-indexing builds a new one.
    """

    postings_by_term: Mapping[str, tuple[Posting, ...]]
    sections: Mapping[str, Section]

    @classmethod
    def empty(cls) -> "InvertedIndex":
        return cls(
            postings_by_term=MappingProxyType({}),
            sections=MappingProxyType({}),
        )

    def postings(self, term: str) -> tuple[Posting, ...]:
        return self.postings_by_term.get(term, ())

    def section(self, section_id: str) -> Section:
        try:
            return self.sections[section_id]
        except KeyError:
            raise KeyError(f"Section '{section_id}' not found")

    def __contains__(self, term: object) -> bool:
        return term in self.postings_by_term

    @property
    def terms(self) -> list[str]:
        return list(self.postings_by_term)

    @property
    def section_count(self) -> int:
        return len(self.sections)

    @property
    def term_count(self) -> int:
        return len(self.postings_by_term)

    def stats(self) -> IndexStats:
        return IndexStats(
            documents=len({s.document_path for s in self.sections.values()}),
            sections=self.section_count,
            terms=self.term_count,
            postings=sum(len(p) for p in self.postings_by_term.values()),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "sections": {
                section_id: {
                    "document_path": s.document_path,
                    "ordinal": s.ordinal,
                    "heading": s.heading,
                    "level": s.level,
                    "offset_start": s.offset_start,
                    "offset_end": s.offset_end,
                }
                for section_id, s in self.sections.items()
            },
            "postings": {
                term: [[p.section_id, p.count] for p in postings]
                for term, postings in self.postings_by_term.items()
            },
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True, separators=(",", ":"))


def _section_order(section: Section) -> tuple[str, int]:
    return (section.document_path, section.ordinal)


def build_index(
    sections: Iterable[Section],
    *,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> InvertedIndex:
    """Build an inverted index from sections.

    Each section's raw text (heading line plus body) is tokenized and the
    per-section occurrence count of every term recorded. Building twice from
    the same sections yields equal indexes with identical `to_json()` output.

    Args:
        sections: All sections to index.
        metrics_hook: Hook for recording metrics.

    Returns:
        A new InvertedIndex.

    Raises:
        ValueError: If two sections share a section id.
    """
    start = monotonic()
    by_id: dict[str, Section] = {}
    counts: dict[str, dict[str, int]] = {}

    for section in sorted(sections, key=_section_order):
        section_id = section.section_id
        if section_id in by_id:
            raise ValueError(f"Duplicate section id: {section_id}")
        by_id[section_id] = section

        for term, count in term_counts(section.raw).items():
            counts.setdefault(term, {})[section_id] = count

    postings_by_term = {
        term: tuple(Posting(section_id=sid, count=n) for sid, n in per_section.items())
        for term, per_section in sorted(counts.items())
    }
    index = InvertedIndex(
        postings_by_term=MappingProxyType(postings_by_term),
        sections=MappingProxyType(by_id),
    )

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.INDEX_BUILD_DURATION, elapsed_ms)
    metrics_hook.increment(names.INDEX_BUILDS_TOTAL)
    metrics_hook.record_gauge(names.INDEX_SECTIONS, index.section_count)
    metrics_hook.record_gauge(names.INDEX_TERMS, index.term_count)
    logger.info(
        "Built index with %d sections and %d terms",
        index.section_count,
        index.term_count,
    )
    return index
