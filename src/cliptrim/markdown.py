"""Markdown detection and reflow.

Chat and terminal output is often hard-wrapped at a fixed width. `reflow_markdown`
rejoins wrapped paragraphs and list items into single logical lines while
keeping headings, blank separators and fenced code blocks exactly where they
are.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from cliptrim.lines import split_lines

INLINE_WHITESPACE = " \t"
FENCE_CHARS = ("`", "~")
MIN_FENCE_RUN = 3
MAX_HEADING_LEVEL = 6
BULLET_MARKERS = ("-", "*", "+", "•")
NUMBER_MARKERS = (".", ")")

TRAILING_WHITESPACE = re.compile(r"[ \t]+$")
WHITESPACE_RUN = re.compile(r"\s+")


@dataclass(frozen=True)
class Fence:
    char: str
    count: int


@dataclass(frozen=True)
class ListMatch:
    indent: str
    marker: str
    content: str

    @property
    def indent_count(self) -> int:
        return len(self.indent)


@dataclass
class ListItem:
    indent: str
    marker: str
    parts: list[str] = field(default_factory=list)

    @property
    def indent_count(self) -> int:
        return len(self.indent)


def leading_whitespace(line: str) -> str:
    return line[: len(line) - len(line.lstrip(INLINE_WHITESPACE))]


def _leading_run(text: str, char: str) -> int:
    return len(text) - len(text.lstrip(char))


def fence_open(line: str) -> Fence | None:
    """Opening fence: a run of 3+ backticks or tildes after optional indentation."""
    rest = line.lstrip(INLINE_WHITESPACE)
    if not rest or rest[0] not in FENCE_CHARS:
        return None
    count = _leading_run(rest, rest[0])
    if count < MIN_FENCE_RUN:
        return None
    return Fence(char=rest[0], count=count)


def is_fence_close(line: str, fence: Fence) -> bool:
    rest = line.lstrip(INLINE_WHITESPACE)
    if not rest.startswith(fence.char):
        return False
    return _leading_run(rest, fence.char) >= fence.count


def is_heading_line(line: str) -> bool:
    rest = line.lstrip(INLINE_WHITESPACE)
    hashes = _leading_run(rest, "#")
    if not 1 <= hashes <= MAX_HEADING_LEVEL:
        return False
    return len(rest) > hashes and rest[hashes] in INLINE_WHITESPACE


def list_match(line: str) -> ListMatch | None:
    """Parse a bullet (`- * + •`) or numbered (`1.` / `1)`) list item opener."""
    indent = leading_whitespace(line)
    rest = line[len(indent) :]
    if not rest:
        return None

    if rest[0] in BULLET_MARKERS:
        if len(rest) < 2 or not rest[1].isspace():
            return None
        content = rest[1:].strip()
        return ListMatch(indent=indent, marker=rest[0], content=content) if content else None

    digits = len(rest) - len(rest.lstrip("0123456789"))
    if digits == 0 or len(rest) < digits + 2:
        return None
    if rest[digits] not in NUMBER_MARKERS or not rest[digits + 1].isspace():
        return None
    content = rest[digits + 1 :].strip()
    if not content:
        return None
    return ListMatch(indent=indent, marker=rest[: digits + 1], content=content)


def join_parts(parts: list[str]) -> str:
    """Join wrapped fragments with single spaces, undoing hyphenated-word wraps."""
    result = ""
    for part in parts:
        trimmed = part.strip()
        if not trimmed:
            continue
        if not result:
            result = trimmed
            continue
        elide_space = result.endswith("-") and trimmed[0].isalnum()
        result += trimmed if elide_space else " " + trimmed
    return WHITESPACE_RUN.sub(" ", result).strip()


def reflow_markdown(text: str) -> str:
    """Rejoin hard-wrapped paragraphs and list items.

    Lines are processed in order with these priorities: inside a fence
    (verbatim until the matching close), fence open, blank line, heading, list
    item opener, continuation of the open list item (indented deeper than its
    marker), and finally paragraph text.

    Args:
        text (str): markdown-ish text, any line-ending style

    Returns:
        str: the reflowed text joined with `\\n`
    """
    output: list[str] = []
    paragraph: list[str] = []
    item: ListItem | None = None
    fence: Fence | None = None

    def flush_paragraph() -> None:
        if paragraph:
            output.append(join_parts(paragraph))
            paragraph.clear()

    def flush_item() -> None:
        nonlocal item
        if item is not None:
            output.append(f"{item.indent}{item.marker} {join_parts(item.parts)}")
            item = None

    def flush() -> None:
        flush_paragraph()
        flush_item()

    for line in split_lines(text):
        if fence is not None:
            output.append(line)
            if is_fence_close(line, fence):
                fence = None
            continue

        opened = fence_open(line)
        if opened is not None:
            flush()
            output.append(line)
            fence = opened
            continue

        if not line.strip():
            flush()
            output.append("")
            continue

        if is_heading_line(line):
            flush()
            output.append(TRAILING_WHITESPACE.sub("", line))
            continue

        match = list_match(line)
        if match is not None:
            flush()
            item = ListItem(indent=match.indent, marker=match.marker, parts=[match.content])
            continue

        if item is not None:
            if len(leading_whitespace(line)) > item.indent_count:
                item.parts.append(line.strip())
            else:
                flush_item()
                paragraph.append(line.strip())
            continue

        paragraph.append(line.strip())

    flush_item()
    flush_paragraph()
    return "\n".join(output)


def count_structure(text: str) -> tuple[int, int]:
    """Count headings and list items outside fenced code blocks.

    Returns:
        tuple[int, int]: (heading count, list item count)
    """
    headings = 0
    items = 0
    fence: Fence | None = None
    for line in split_lines(text):
        if fence is not None:
            if is_fence_close(line, fence):
                fence = None
            continue
        opened = fence_open(line)
        if opened is not None:
            fence = opened
            continue
        if is_heading_line(line):
            headings += 1
        elif list_match(line) is not None:
            items += 1
    return headings, items


def is_likely_markdown(text: str) -> bool:
    """Two list items, two headings, or a heading plus a list item."""
    headings, items = count_structure(text)
    return items >= 2 or headings >= 2 or (headings >= 1 and items >= 1)
