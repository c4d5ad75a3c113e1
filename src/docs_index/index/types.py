from dataclasses import dataclass


@dataclass(frozen=True)
class Posting:
    section_id: str
    count: int


@dataclass(frozen=True)
class IndexStats:
    documents: int
    sections: int
    terms: int
    postings: int
