from __future__ import annotations

import json

import pytest

from cliptrim.config import TrimResult
from cliptrim.output_construction import (
    build_json_payload,
    build_plain_output,
    build_summary,
    char_count_suffix,
    display_string,
    ellipsize,
    pretty_badge,
    summarize,
)


@pytest.mark.unit
def test_build_json_payload_has_three_keys() -> None:
    result = TrimResult(original="│ ls │", trimmed="ls", was_transformed=True)

    payload = build_json_payload(result)

    assert payload.endswith("\n")
    assert "│" in payload
    assert json.loads(payload) == {"original": "│ ls │", "trimmed": "ls", "transformed": True}


@pytest.mark.unit
def test_build_plain_output_adds_newline() -> None:
    assert build_plain_output(TrimResult.unchanged("echo hi")) == "echo hi\n"


@pytest.mark.unit
@pytest.mark.parametrize(
    ("count", "expected"),
    [
        (0, " (0 chars)"),
        (999, " (999 chars)"),
        (1000, " (1.0k chars)"),
        (1234, " (1.2k chars)"),
        (10500, " (10k chars)"),
    ],
)
def test_char_count_suffix_without_limit(count: int, expected: str) -> None:
    assert char_count_suffix(count) == expected


@pytest.mark.unit
@pytest.mark.parametrize(
    ("count", "expected"),
    [
        (49, " (49 chars)"),
        (51, " (51 chars, 1 truncations)"),
        (149, " (149 chars, 2 truncations)"),
        (2500, " (2.5k chars, 49 truncations)"),
    ],
)
def test_char_count_suffix_with_limit(count: int, expected: str) -> None:
    assert char_count_suffix(count, limit=50) == expected


@pytest.mark.unit
def test_char_count_suffix_can_hide_truncations() -> None:
    assert char_count_suffix(149, limit=50, show_truncations=False) == " (149 chars)"


@pytest.mark.unit
def test_pretty_badge() -> None:
    assert pretty_badge(118, 50, show_truncations=False) == " · 118 chars"
    assert pretty_badge(118, 50) == " · 118 chars · 2 trimmed"
    assert pretty_badge(2500, 50) == " · 2.5k chars · 49 trimmed"
    assert pretty_badge(40, 50) == " · 40 chars"


@pytest.mark.unit
def test_display_string_marks_whitespace() -> None:
    assert display_string("a\n\tb") == "a⏎ ⇥ b"


@pytest.mark.unit
def test_ellipsize_cuts_middle() -> None:
    assert ellipsize("abcdefghij", 5) == "ab…ij"
    assert ellipsize("abc", 5) == "abc"


@pytest.mark.unit
def test_summary_is_single_line() -> None:
    assert summarize("line one\nline two") == "line one line two"
    assert build_summary(TrimResult.unchanged("echo hi")) == "echo hi · 7 chars"
