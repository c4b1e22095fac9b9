from __future__ import annotations

from typing import TYPE_CHECKING

from cliptrim.commands import flatten_if_command
from cliptrim.config import TrimResult
from cliptrim.decoration import strip_decoration
from cliptrim.logging import logger
from cliptrim.markdown import is_likely_markdown, reflow_markdown
from cliptrim.prompts import strip_prompts
from cliptrim.repair import quote_path_with_spaces, repair_wrapped_url

if TYPE_CHECKING:
    from collections.abc import Callable

    from cliptrim.config import Aggressiveness, TrimConfig

    TextPass = Callable[[str], "str | None"]


def transform(
    text: str,
    config: TrimConfig,
    aggressiveness_override: Aggressiveness | None = None,
) -> TrimResult:
    """Run every cleanup pass over one input string.

    Passes run in a fixed order: box-drawing removal (when enabled), prompt
    stripping, wrapped-URL repair, path quoting, and command flattening. Each
    pass sees the output of the previous one; a pass that returns None leaves
    the text as it was.

    Args:
        text (str): the copied text
        config (TrimConfig): caller configuration, read-only for the whole run
        aggressiveness_override (Aggressiveness | None): level used for command
            detection instead of `config.aggressiveness`

    Returns:
        TrimResult: the original text, the trimmed text and whether anything changed
    """
    passes: list[tuple[str, TextPass]] = []
    if config.remove_box_drawing:
        passes.append(("decoration", strip_decoration))
    passes.extend(
        [
            ("prompts", strip_prompts),
            ("url", repair_wrapped_url),
            ("path", quote_path_with_spaces),
            ("command", lambda t: flatten_if_command(t, config, aggressiveness_override)),
        ],
    )

    current = text
    fired: list[str] = []
    for name, text_pass in passes:
        rewritten = text_pass(current)
        if rewritten is not None:
            current = rewritten
            fired.append(name)

    logger.debug(
        "transform",
        passes=fired,
        aggressiveness=str(aggressiveness_override or config.aggressiveness),
        chars_in=len(text),
        chars_out=len(current),
    )
    if not fired:
        return TrimResult.unchanged(text)
    return TrimResult(original=text, trimmed=current, was_transformed=True)


def transform_markdown(text: str) -> TrimResult:
    """Reflow markdown-looking text instead of flattening it.

    Text that does not look like markdown is returned unchanged.
    """
    if not is_likely_markdown(text):
        logger.debug("reflow_skipped", reason="not_markdown")
        return TrimResult.unchanged(text)

    reflowed = reflow_markdown(text)
    logger.debug("reflow", chars_in=len(text), chars_out=len(reflowed))
    return TrimResult(original=text, trimmed=reflowed, was_transformed=reflowed != text)
