"""Box-drawing gutter removal for text copied out of terminal UIs.

Terminal apps and TUI frameworks frame their output with vertical box-drawing
glyphs. When such a frame is copied, the glyphs end up at the start and end of
every line, or injected in the middle of a wrapped command. This pass removes
them while keeping the actual content aligned.
"""

from __future__ import annotations

import re

from cliptrim.lines import is_blank, majority_threshold, split_lines

BOX_DRAWING_CLASS = "[│┃╎╏┆┇┊┋╽╿￨｜]"
PAIR_GUTTER = "│ │"

ANY_BOX = re.compile(BOX_DRAWING_CLASS)
LEADING_GUTTER = re.compile(rf"^\s*{BOX_DRAWING_CLASS}+ ?")
TRAILING_GUTTER = re.compile(rf" ?{BOX_DRAWING_CLASS}+\s*$")
BOX_AFTER_PIPE = re.compile(rf"\|\s*{BOX_DRAWING_CLASS}+\s*")
BOX_PATH_JOIN = re.compile(rf"([:/])\s*{BOX_DRAWING_CLASS}+\s*([A-Za-z0-9])")
BOX_MID_TOKEN = re.compile(rf"(\S)\s*{BOX_DRAWING_CLASS}+\s*(\S)")
BOX_LEFTOVER = re.compile(rf"\s*{BOX_DRAWING_CLASS}+\s*")
REPEATED_SPACES = re.compile(r" {2,}")


def _strip_gutters(text: str) -> str:
    lines = split_lines(text)
    candidates = [ln for ln in lines if not is_blank(ln)]
    if not candidates:
        return text

    threshold = majority_threshold(len(candidates))
    strip_leading = sum(1 for ln in candidates if LEADING_GUTTER.search(ln)) >= threshold
    strip_trailing = sum(1 for ln in candidates if TRAILING_GUTTER.search(ln)) >= threshold
    if not (strip_leading or strip_trailing):
        return text

    rebuilt: list[str] = []
    for line in lines:
        if strip_leading:
            line = LEADING_GUTTER.sub("", line)  # noqa: PLW2901
        if strip_trailing:
            line = TRAILING_GUTTER.sub("", line)  # noqa: PLW2901
        rebuilt.append(line)
    return "\n".join(rebuilt)


def strip_decoration(text: str) -> str | None:
    """Remove box-drawing gutters and stray glyphs from a terminal copy.

    Gutters are only stripped when a strict majority of non-empty lines carry
    them, and then from every line, so partially framed text keeps its
    alignment. Glyphs injected after a pipe or in the middle of a token are
    collapsed regardless of the majority vote.

    Args:
        text (str): the copied text

    Returns:
        str | None: the cleaned text, or None when nothing changed
    """
    if not ANY_BOX.search(text):
        return None

    result = text.replace(PAIR_GUTTER, " ") if PAIR_GUTTER in text else text
    result = _strip_gutters(result)

    result = BOX_AFTER_PIPE.sub("| ", result)
    result = BOX_PATH_JOIN.sub(r"\1\2", result)
    result = BOX_MID_TOKEN.sub(r"\1 \2", result)
    result = BOX_LEFTOVER.sub(" ", result)

    cleaned = REPEATED_SPACES.sub(" ", result).strip()
    return None if cleaned == text else cleaned
