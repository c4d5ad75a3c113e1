# Config
from .config import IndexerConfig, load_config

# Documents
from .documents import Document, LoadResult, Section, load_documents

# Errors
from .errors import ConfigError, DocsIndexError, DocumentReadError, EmptyIndexError

# Holder
from .holder import IndexHolder

# Index
from .index import IndexStats, InvertedIndex, Posting, build_index

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import DocumentParser, MarkdownParser

# Pipeline
from .pipeline import IndexBuild, index_directory

# Search
from .search import QueryEngine, SearchResult

# Text
from .text import term_counts, tokenize

__all__ = [
    # Config
    "IndexerConfig",
    "load_config",
    # Documents
    "Document",
    "LoadResult",
    "Section",
    "load_documents",
    # Errors
    "ConfigError",
    "DocsIndexError",
    "DocumentReadError",
    "EmptyIndexError",
    # Holder
    "IndexHolder",
    # Index
    "IndexStats",
    "InvertedIndex",
    "Posting",
    "build_index",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "DocumentParser",
    "MarkdownParser",
    # Pipeline
    "IndexBuild",
    "index_directory",
    # Search
    "QueryEngine",
    "SearchResult",
    # Text
    "term_counts",
    "tokenize",
]
