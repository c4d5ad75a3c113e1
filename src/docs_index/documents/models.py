# documents/models.py

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Document:
    path: str
    text: str = field(repr=False)


@dataclass(frozen=True)
class Section:
    """A heading-delimited span of a Document.

    `raw` is the exact slice `text[offset_start:offset_end]` of the owning
    document: the heading line followed by `body`. Level 0 marks a preamble
    or a document without headings, in which case `heading` is empty.
    The document is referenced by path only.
    """

    document_path: str
    ordinal: int
    heading: str
    level: int
    raw: str = field(repr=False)
    body: str = field(repr=False)
    offset_start: int
    offset_end: int

    @property
    def section_id(self) -> str:
        return f"{self.document_path}#{self.ordinal}"
