from .query_engine import QueryEngine
from .types import SearchResult

__all__ = [
    "QueryEngine",
    "SearchResult",
]
