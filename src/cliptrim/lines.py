from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

LINE_BREAK = re.compile(r"\r\n|[\n\v\f\r\x85\u2028\u2029]")


def split_lines(text: str, *, keep_empty: bool = True) -> list[str]:
    """Split text on any line break.

    Args:
        text (str): the text to split
        keep_empty (bool): keep zero-length segments so lines stay positional.
            Whitespace-only segments are always kept.

    Returns:
        list[str]: the physical lines, without their terminators
    """
    parts = LINE_BREAK.split(text)
    if keep_empty:
        return parts
    return [p for p in parts if p]


def is_blank(line: str) -> bool:
    return not line.strip()


def non_empty_lines(lines: Iterable[str]) -> list[str]:
    return [ln for ln in lines if not is_blank(ln)]


def majority_threshold(count: int) -> int:
    """Strict-majority count used by every line-vote heuristic."""
    return count // 2 + 1
