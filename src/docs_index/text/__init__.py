from .tokenizer import MIN_TERM_LENGTH, term_counts, tokenize

__all__ = [
    "MIN_TERM_LENGTH",
    "term_counts",
    "tokenize",
]
