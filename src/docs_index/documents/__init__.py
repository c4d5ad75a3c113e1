from .loader import LoadResult, load_documents, read_document
from .models import Document, Section

__all__ = [
    "Document",
    "LoadResult",
    "Section",
    "load_documents",
    "read_document",
]
