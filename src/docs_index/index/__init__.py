from .inverted_index import InvertedIndex, build_index
from .types import IndexStats, Posting

__all__ = [
    "IndexStats",
    "InvertedIndex",
    "Posting",
    "build_index",
]
