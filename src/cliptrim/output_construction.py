from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cliptrim.config import TrimResult

ELLIPSIS = "…"
SUMMARY_LIMIT = 90


def build_json_payload(result: TrimResult) -> str:
    """Render a trim result as the CLI's JSON document.

    Args:
        result (TrimResult): the pipeline outcome

    Returns:
        str: pretty-printed JSON with `original`, `trimmed` and `transformed`
            keys, followed by a newline
    """
    payload = {
        "original": result.original,
        "trimmed": result.trimmed,
        "transformed": result.was_transformed,
    }
    return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"


def build_plain_output(result: TrimResult) -> str:
    return result.trimmed + "\n"


def _truncation_count(count: int, limit: int) -> int:
    if count <= limit or limit <= 0:
        return 0
    return (count + limit - 1) // limit - 1


def _kilo(count: int) -> str:
    k = count / 1000
    return f"{k:.0f}k" if k >= 10 else f"{k:.1f}k"  # noqa: PLR2004


def char_count_suffix(count: int, limit: int | None = None, *, show_truncations: bool = True) -> str:
    """Format a character count such as `" (1.2k chars, 3 truncations)"`.

    Args:
        count (int): number of characters
        limit (int | None): chunk size; counts above it report how many extra
            chunks a consumer would cut
        show_truncations (bool): include the truncation count when non-zero

    Returns:
        str: the parenthesised suffix, with a leading space
    """
    truncations = _truncation_count(count, limit) if show_truncations and limit is not None else 0
    chars = _kilo(count) if count >= 1000 else str(count)  # noqa: PLR2004
    if truncations > 0:
        return f" ({chars} chars, {truncations} truncations)"
    return f" ({chars} chars)"


def pretty_badge(count: int, limit: int | None = None, *, show_truncations: bool = True) -> str:
    chars = f"{_kilo(count)} chars" if count >= 1000 else f"{count} chars"  # noqa: PLR2004
    if not show_truncations or not limit or limit <= 0:
        return f" · {chars}"
    truncations = _truncation_count(count, limit)
    if truncations == 0:
        return f" · {chars}"
    return f" · {chars} · {truncations} trimmed"


def display_string(text: str) -> str:
    """Make line breaks and tabs visible on a single line."""
    return text.replace("\n", "⏎ ").replace("\t", "⇥ ")


def ellipsize(text: str, limit: int) -> str:
    """Shorten text to `limit` characters by cutting out its middle."""
    if limit < 3 or len(text) <= limit:  # noqa: PLR2004
        return text
    keep = limit - 1
    head = keep // 2
    tail = keep - head
    return f"{text[:head]}{ELLIPSIS}{text[-tail:]}"


def summarize(text: str, limit: int = SUMMARY_LIMIT) -> str:
    return ellipsize(text.replace("\n", " "), limit)


def build_summary(result: TrimResult) -> str:
    """One-line preview of the trimmed text with its character badge."""
    return summarize(result.trimmed) + pretty_badge(len(result.trimmed))
