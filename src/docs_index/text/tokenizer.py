import re
from collections import Counter
from collections.abc import Iterator

MIN_TERM_LENGTH = 2

# Anything that is neither a word character nor whitespace. Underscores and
# digits are word characters, so identifiers like aws_instance or boto3 stay whole.
_PUNCTUATION = re.compile(r"[^\w\s]+")


def tokenize(text: str) -> Iterator[str]:
    """Yield normalized search terms from `text`.

    Lowercases, replaces punctuation with spaces and splits on whitespace.
    Leading and trailing underscores (Markdown `_emphasis_`) are stripped from
    each token, inner ones kept. Tokens shorter than MIN_TERM_LENGTH are
    dropped. Fenced code is not treated specially.
    """
    for token in _PUNCTUATION.sub(" ", text.lower()).split():
        token = token.strip("_")
        if len(token) >= MIN_TERM_LENGTH:
            yield token


def term_counts(text: str) -> Counter[str]:
    return Counter(tokenize(text))
