from dataclasses import dataclass

from docs_index.documents.models import Section


@dataclass(frozen=True)
class SearchResult:
    section: Section
    score: int

    @property
    def document_path(self) -> str:
        return self.section.document_path

    @property
    def heading(self) -> str:
        return self.section.heading

    def excerpt(self, length: int = 200) -> str:
        """Body text collapsed to single spaces and cut to `length` characters."""
        text = " ".join(self.section.body.split())
        if len(text) > length:
            text = text[: max(length - 3, 0)].rstrip() + "..."
        return text

    def to_dict(self, excerpt_length: int = 200) -> dict:
        return {
            "document_path": self.document_path,
            "section_id": self.section.section_id,
            "heading": self.heading,
            "level": self.section.level,
            "score": self.score,
            "excerpt": self.excerpt(excerpt_length),
        }
