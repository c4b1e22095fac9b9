from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from cliptrim import pipeline
from cliptrim.config import Aggressiveness, TrimConfig
from cliptrim.pipeline import transform, transform_markdown

if TYPE_CHECKING:
    from pytest_mock import MockerFixture


@pytest.mark.unit
def test_transform_strips_box_drawing() -> None:
    result = transform("│ │ echo   │ │    hi │ │", TrimConfig())

    assert result.trimmed == "echo hi"
    assert result.was_transformed is True
    assert result.original == "│ │ echo   │ │    hi │ │"


@pytest.mark.unit
def test_transform_keeps_box_drawing_when_disabled() -> None:
    text = "│ │ echo   │ │    hi │ │"

    result = transform(text, TrimConfig(remove_box_drawing=False))

    assert result.was_transformed is False
    assert result.trimmed == text


@pytest.mark.unit
def test_transform_leaves_two_urls_alone() -> None:
    text = "https://example.com/foo\nhttps://example.com/bar"

    result = transform(text, TrimConfig(aggressiveness=Aggressiveness.LOW))

    assert result.was_transformed is False
    assert result.trimmed == text
    assert result.removed_chars == 0


@pytest.mark.unit
def test_transform_repairs_wrapped_url() -> None:
    result = transform("https://example.com/some/\npath", TrimConfig())

    assert result.trimmed == "https://example.com/some/path"


@pytest.mark.unit
def test_transform_quotes_path_with_spaces() -> None:
    result = transform("/Users/me/My Documents/file.txt", TrimConfig())

    assert result.trimmed == '"/Users/me/My Documents/file.txt"'
    assert result.was_transformed is True


@pytest.mark.unit
def test_transform_strips_prompt() -> None:
    assert transform("$ git status", TrimConfig()).trimmed == "git status"


@pytest.mark.unit
def test_transform_flattens_command() -> None:
    text = "ls -la \\\n  | grep '^d' \\\n  > dirs.txt"

    result = transform(text, TrimConfig(aggressiveness=Aggressiveness.LOW))

    assert result.trimmed == "ls -la | grep '^d' > dirs.txt"
    assert result.removed_chars == len(text) - len(result.trimmed)


@pytest.mark.unit
def test_override_takes_precedence_over_config() -> None:
    text = 'echo "hello"\nprint status'
    config = TrimConfig(aggressiveness=Aggressiveness.LOW)

    assert transform(text, config).was_transformed is False
    assert transform(text, config, Aggressiveness.HIGH).trimmed == 'echo "hello" print status'


@pytest.mark.unit
def test_transform_logs_fired_passes(mocker: MockerFixture) -> None:
    mock_logger = mocker.patch.object(pipeline, "logger")

    transform("│ │ echo   │ │    hi │ │", TrimConfig())

    mock_logger.debug.assert_called_once()
    assert mock_logger.debug.call_args.kwargs["passes"] == ["decoration"]


@pytest.mark.unit
def test_transform_markdown_reflows_bullets_and_keeps_fence() -> None:
    text = "- Item one that\n  wraps here\n- Item two\n\n```\nkeep   this\n  as is\n```"

    result = transform_markdown(text)

    assert result.was_transformed is True
    assert result.trimmed == "- Item one that wraps here\n- Item two\n\n```\nkeep   this\n  as is\n```"


@pytest.mark.unit
def test_transform_markdown_skips_plain_text() -> None:
    result = transform_markdown("plain text\nthat wraps")

    assert result.was_transformed is False
    assert result.trimmed == "plain text\nthat wraps"


@pytest.mark.unit
def test_transform_markdown_already_flat() -> None:
    result = transform_markdown("- one\n- two")

    assert result.was_transformed is False
