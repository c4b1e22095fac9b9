from __future__ import annotations

import re

from cliptrim.commands import KNOWN_COMMAND_PREFIXES, is_likely_command_line
from cliptrim.lines import majority_threshold, non_empty_lines, split_lines

PROMPT_MARKERS = ("#", "$")
SENTENCE_ENDINGS = (".", "?", "!")
PROMPT_PUNCTUATION = re.compile(r"[-./~$]|\d")


def is_likely_prompt_command(content: str) -> bool:
    """Whether the text after a `#`/`$` marker reads like a shell command.

    Sentences ("# Release Notes.", "$5 off!") and plain headings
    ("# Release Notes") are rejected: the content needs shell punctuation, a
    digit, or a known program name, and must pass the command-line check.
    """
    trimmed = content.strip()
    if not trimmed or trimmed.endswith(SENTENCE_ENDINGS):
        return False

    has_punctuation = PROMPT_PUNCTUATION.search(trimmed) is not None
    first_token = trimmed.split(" ", 1)[0].lower()
    starts_with_known = first_token.startswith(KNOWN_COMMAND_PREFIXES)
    if not (has_punctuation or starts_with_known):
        return False
    return is_likely_command_line(trimmed)


def strip_prompt(line: str) -> str | None:
    """Drop the prompt marker of one line, or None when the line keeps it."""
    remainder = line.lstrip()
    indent = line[: len(line) - len(remainder)]
    if not remainder.startswith(PROMPT_MARKERS):
        return None

    after_prompt = remainder[1:].lstrip()
    if not is_likely_prompt_command(after_prompt):
        return None
    return indent + after_prompt


def strip_prompts(text: str) -> str | None:
    """Remove leading `#`/`$` shell prompts when most lines look like commands.

    A single non-empty line must strip on its own; otherwise a strict majority
    of non-empty lines must strip, or nothing is changed at all.

    Args:
        text (str): the copied text

    Returns:
        str | None: the text without prompt markers, or None when unchanged
    """
    lines = split_lines(text)
    candidates = non_empty_lines(lines)
    if not candidates:
        return None

    stripped_count = 0
    rebuilt: list[str] = []
    for line in lines:
        stripped = strip_prompt(line)
        if stripped is None:
            rebuilt.append(line)
        else:
            stripped_count += 1
            rebuilt.append(stripped)

    if len(candidates) == 1:
        should_strip = stripped_count == 1
    else:
        should_strip = stripped_count >= majority_threshold(len(candidates))
    if not should_strip:
        return None

    result = "\n".join(rebuilt)
    return None if result == text else result
