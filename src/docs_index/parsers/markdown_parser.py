# parsers/markdown_parser.py

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass

from docs_index.documents.models import Document, Section
from docs_index.observability import names
from docs_index.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentParser

logger = logging.getLogger(__name__)

_HEADING = re.compile(r"^ {0,3}(#{1,6})(?:[ \t]+(.*?))?[ \t]*$")
_CLOSING_HASHES = re.compile(r"(?:^|[ \t]+)#+$")
_FENCE = re.compile(r"^ {0,3}(`{3,}|~{3,})(.*)$")
_LINK = re.compile(r"\[([^\]]+)\]\([^\)]+\)")
_LINE = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)?")
_CODE_SPAN = re.compile(r"(`+)(.+?)\1")
_EMPHASIS = re.compile(r"[*`~]")


@dataclass(frozen=True)
class _Heading:
    offset: int
    line_length: int
    level: int
    text: str


class MarkdownParser(DocumentParser):
    """
    Deterministic Markdown section parser.
    - Splits at ATX headings (# .. ######)
    - Ignores heading-like lines inside fenced code blocks
    - Emits document-global character offsets
    """

    def __init__(self, metrics_hook: MetricsHook = NoOpMetricsHook()) -> None:
        self.metrics_hook = metrics_hook

    def parse(self, document: Document) -> Iterator[Section]:
        text = document.text
        headings = self._find_headings(text)
        count = 0

        if not headings:
            logger.debug("No headings in %s, emitting whole document", document.path)
            yield Section(
                document_path=document.path,
                ordinal=0,
                heading="",
                level=0,
                raw=text,
                body=text,
                offset_start=0,
                offset_end=len(text),
            )
            self.metrics_hook.increment(names.PARSER_SECTIONS_CREATED)
            return

        if headings[0].offset > 0:
            preamble = text[: headings[0].offset]
            yield Section(
                document_path=document.path,
                ordinal=0,
                heading="",
                level=0,
                raw=preamble,
                body=preamble,
                offset_start=0,
                offset_end=headings[0].offset,
            )
            count += 1

        for i, heading in enumerate(headings):
            end = headings[i + 1].offset if i + 1 < len(headings) else len(text)
            raw = text[heading.offset : end]
            yield Section(
                document_path=document.path,
                ordinal=count,
                heading=heading.text,
                level=heading.level,
                raw=raw,
                body=raw[heading.line_length :],
                offset_start=heading.offset,
                offset_end=end,
            )
            count += 1

        self.metrics_hook.increment(names.PARSER_SECTIONS_CREATED, count)
        logger.debug("Parsed %d sections from %s", count, document.path)

    def _find_headings(self, text: str) -> list[_Heading]:
        headings: list[_Heading] = []
        fence: str | None = None
        offset = 0

        for line in _iter_lines(text):
            content = line.rstrip("\r\n")
            fence_match = _FENCE.match(content)

            if fence is not None:
                if fence_match and self._closes(fence, fence_match):
                    fence = None
            elif fence_match and self._opens(fence_match):
                fence = fence_match.group(1)
            else:
                heading_match = _HEADING.match(content)
                if heading_match:
                    headings.append(
                        _Heading(
                            offset=offset,
                            line_length=len(line),
                            level=len(heading_match.group(1)),
                            text=self._clean_heading(heading_match.group(2) or ""),
                        )
                    )

            offset += len(line)

        return headings

    @staticmethod
    def _opens(match: re.Match[str]) -> bool:
        # a backtick fence's info string may not contain backticks
        return not (match.group(1)[0] == "`" and "`" in match.group(2))

    @staticmethod
    def _closes(fence: str, match: re.Match[str]) -> bool:
        marker = match.group(1)
        return (
            marker[0] == fence[0]
            and len(marker) >= len(fence)
            and not match.group(2).strip()
        )

    @staticmethod
    def _clean_heading(text: str) -> str:
        text = _CLOSING_HASHES.sub("", text)
        text = _LINK.sub(r"\1", text)
        # emphasis markers are only stripped outside inline code spans
        parts: list[str] = []
        last = 0
        for span in _CODE_SPAN.finditer(text):
            parts.append(_EMPHASIS.sub("", text[last : span.start()]))
            parts.append(span.group(2))
            last = span.end()
        parts.append(_EMPHASIS.sub("", text[last:]))
        return "".join(parts).strip()


def _iter_lines(text: str) -> Iterator[str]:
    """Yield lines with their endings, breaking only at \\n, \\r\\n and \\r."""
    for match in _LINE.finditer(text):
        if match.group():
            yield match.group()
