# parsers/base.py

from abc import ABC, abstractmethod
from collections.abc import Iterator

from docs_index.documents.models import Document, Section


class DocumentParser(ABC):
    @abstractmethod
    def parse(self, document: Document) -> Iterator[Section]:
        """
        Lazily split a document into sections.

        Requirements:
        - Deterministic output for same input
        - Offsets are document-global
        - Sections cover the whole text, in order, without gaps or overlap
        """
        raise NotImplementedError
