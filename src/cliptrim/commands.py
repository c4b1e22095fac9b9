"""Command detection and flattening.

Decides whether a short multi-line blob is a single shell command that was
wrapped or continued across lines, and if so joins it back into one runnable
line.

The decision is made in two stages:

1. Rejection guards (`REJECT_GUARDS`): cheap predicates that recognise text
   which is *not* one command: lists, long copies, columns of independent
   commands, prose without any command cue, and source code.
2. Scoring (`SCORE_SIGNALS`): each heuristic signal that fires adds one
   point; the total must reach the aggressiveness threshold.

Both stages are plain tuples of predicate functions over a `CommandCandidate`
so every rule can be exercised on its own.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cliptrim.config import Aggressiveness, TrimConfig
from cliptrim.lines import is_blank, majority_threshold, non_empty_lines, split_lines

if TYPE_CHECKING:
    from collections.abc import Callable

    CandidatePredicate = Callable[["CommandCandidate"], bool]

KNOWN_COMMAND_PREFIXES: tuple[str, ...] = (
    "sudo",
    "./",
    "~/",
    "apt",
    "brew",
    "git",
    "python",
    "pip",
    "pnpm",
    "npm",
    "yarn",
    "cargo",
    "bundle",
    "rails",
    "go",
    "make",
    "xcodebuild",
    "swift",
    "kubectl",
    "docker",
    "podman",
    "aws",
    "gcloud",
    "az",
    "ls",
    "cd",
    "cat",
    "echo",
    "env",
    "export",
    "open",
    "node",
    "java",
    "ruby",
    "perl",
    "bash",
    "zsh",
    "fish",
    "pwsh",
    "sh",
)

MAX_LINES = 10
MAX_LINES_UNLESS_EAGER = 4
MIN_COMMAND_COLUMN_LINES = 3

# ------------------------------ Line predicates -----------------------------

COMMAND_LINE = re.compile(r"^(sudo\s+)?[A-Za-z0-9./~_-]+(?:\s+|\Z)")
CONTINUATION_PREFIXES = ("|", "&&", "||", ";", ">", "2>", "<", "--", "-")

# ------------------------------ Join signals --------------------------------

LINE_CONTINUATION = "\\\n"
LINE_JOINER_AT_EOL = re.compile(r"(\\|[|&]{1,2}|;)\s*$", re.MULTILINE)
INDENTED_PIPELINE = re.compile(r"^\s*[|&]{1,2}\s+\S", re.MULTILINE)
PIPE_OR_AMPERSAND = re.compile(r"[|&]{1,2}")
PROMPT_AT_LINE_START = re.compile(r"(^|\n)\s*\$")
PATH_TOKEN = re.compile(r"[A-Za-z0-9._~-]+/[A-Za-z0-9._~-]+")
LEADING_COMMAND_TOKEN = re.compile(r"^\s*(sudo\s+)?[A-Za-z0-9./~_-]+", re.MULTILINE)

# ------------------------------ Command punctuation -------------------------

COMMAND_PUNCTUATION: tuple[re.Pattern[str], ...] = (
    re.compile(r"@"),
    re.compile(r"(?:^|\s)--[A-Za-z0-9][A-Za-z0-9_-]*", re.MULTILINE),
    re.compile(r"(?:^|\s)-[A-Za-z](?:\s|\Z)", re.MULTILINE),
    re.compile(r"\b[A-Za-z_][A-Za-z0-9_]*=", re.MULTILINE),
    re.compile(r"(?:^|\s)(?:\./|~/|/)", re.MULTILINE),
    re.compile(r"(?:^|\s)\.[A-Za-z0-9_-]+", re.MULTILINE),
    re.compile(r"[<>]"),
)

# ------------------------------ Lists and source code -----------------------

BULLET_ITEM = re.compile(r"^[-*•]\s+\S")
NUMBERED_ITEM = re.compile(r"^[0-9]+[.)]\s+\S")
BARE_TOKEN = re.compile(r"[A-Za-z0-9]{4,}")
PATHISH_CHARS = re.compile(r"[./$]")
SOURCE_KEYWORD_LINE = re.compile(
    r"^\s*(import|package|namespace|using|template|class|struct|enum|extension|protocol|"
    r"interface|func|def|fn|let|var|public|private|internal|open|protected|if|for|while)\b",
    re.MULTILINE,
)

# ------------------------------ Flattening ----------------------------------

BLANK_PLACEHOLDER = "__BLANK_SEP__"
BLANK_SEPARATOR = re.compile(r"\n\s*\n")
HYPHEN_BREAK = re.compile(r"(?<=[A-Za-z0-9._~-])-\s*\n\s*([A-Za-z0-9._~-])")
TOKEN_BREAK = re.compile(r"(?<!\n)([A-Z0-9_.-])\s*\n\s*([A-Z0-9_.-])(?!\n)")
PATH_BREAK = re.compile(r"(?<=[/~])\s*\n\s*([A-Za-z0-9._-])")
EXPLICIT_CONTINUATION = re.compile(r"\\\s*\n")
NEWLINE_RUN = re.compile(r"\n+")
WHITESPACE_RUN = re.compile(r"\s+")


def is_likely_command_line(line: str) -> bool:
    """Whether a single line, on its own, is shaped like a command invocation."""
    trimmed = line.strip()
    if not trimmed:
        return False
    if trimmed.startswith("[["):
        return True
    if trimmed.endswith("."):
        return False
    return COMMAND_LINE.match(trimmed) is not None


def starts_with_known_command(line: str) -> bool:
    tokens = line.strip().split(" ", 1)
    if not tokens[0]:
        return False
    return tokens[0].lower().startswith(KNOWN_COMMAND_PREFIXES)


def has_command_punctuation(text: str) -> bool:
    """Flags, assignments, redirections, and path starts anywhere in the text."""
    return any(pattern.search(text) for pattern in COMMAND_PUNCTUATION)


def is_list_item_like(line: str) -> bool:
    trimmed = line.strip()
    if BULLET_ITEM.match(trimmed) or NUMBERED_ITEM.match(trimmed):
        return True
    has_spaces = any(ch.isspace() for ch in trimmed)
    return not has_spaces and BARE_TOKEN.fullmatch(trimmed) is not None and not PATHISH_CHARS.search(trimmed)


def is_likely_list(lines: list[str]) -> bool:
    """Whether a strict majority of the non-empty lines are bullets, numbers, or bare words."""
    candidates = non_empty_lines(lines)
    if len(candidates) < 2:
        return False
    listish = sum(1 for ln in candidates if is_list_item_like(ln))
    return listish >= majority_threshold(len(candidates))


def is_likely_source_code(text: str) -> bool:
    has_braces = "{" in text or "}" in text or "begin" in text.lower()
    return has_braces and SOURCE_KEYWORD_LINE.search(text) is not None


def is_single_command_with_indented_continuations(lines: list[str]) -> bool:
    """One command line followed by indented (or operator-led) argument lines.

    Args:
        lines (list[str]): the non-empty lines of the candidate

    Returns:
        bool: True when every line after the first is indented or starts with
            a continuation operator, and at least one of them is indented
    """
    if len(lines) < 2 or not is_likely_command_line(lines[0]):
        return False

    saw_indented = False
    for line in lines[1:]:
        trimmed = line.strip()
        if not trimmed:
            continue
        if line[0].isspace():
            saw_indented = True
            continue
        if trimmed.startswith(CONTINUATION_PREFIXES):
            continue
        return False
    return saw_indented


def has_strong_command_signal(text: str) -> bool:
    return (
        LINE_CONTINUATION in text
        or PIPE_OR_AMPERSAND.search(text) is not None
        or PROMPT_AT_LINE_START.search(text) is not None
        or PATH_TOKEN.search(text) is not None
    )


def has_explicit_line_join(text: str) -> bool:
    return (
        LINE_CONTINUATION in text
        or LINE_JOINER_AT_EOL.search(text) is not None
        or INDENTED_PIPELINE.search(text) is not None
    )


@dataclass(frozen=True)
class CommandCandidate:
    """Everything the guards and signals look at for one input.

    `lines` are the line-break separated segments with zero-length segments
    dropped; whitespace-only segments are kept and counted.
    """

    text: str
    config: TrimConfig
    override: Aggressiveness | None = None
    lines: list[str] = field(init=False)
    non_empty: list[str] = field(init=False)

    def __post_init__(self) -> None:
        lines = split_lines(self.text, keep_empty=False)
        object.__setattr__(self, "lines", lines)
        object.__setattr__(self, "non_empty", [ln for ln in lines if not is_blank(ln)])

    @property
    def aggressiveness(self) -> Aggressiveness:
        return self.override or self.config.aggressiveness

    @property
    def forced(self) -> bool:
        """A manual "high" override relaxes every size and shape guard."""
        return self.override is Aggressiveness.HIGH

    @property
    def eager(self) -> bool:
        return self.aggressiveness is Aggressiveness.HIGH


# ------------------------------ Rejection guards ----------------------------


def lacks_newline(c: CommandCandidate) -> bool:
    return "\n" not in c.text


def too_few_lines(c: CommandCandidate) -> bool:
    return len(c.lines) < 2


def too_many_lines_unless_eager(c: CommandCandidate) -> bool:
    return not c.eager and len(c.lines) > MAX_LINES_UNLESS_EAGER


def looks_like_list(c: CommandCandidate) -> bool:
    return not c.forced and is_likely_list(c.lines)


def too_many_lines(c: CommandCandidate) -> bool:
    """Large copies are assumed not to be a single command."""
    return not c.forced and len(c.lines) > MAX_LINES


def looks_like_command_column(c: CommandCandidate) -> bool:
    """Several independent command-shaped lines with nothing joining them."""
    if c.forced or c.config.aggressiveness is Aggressiveness.HIGH:
        return False
    if has_explicit_line_join(c.text) or len(c.non_empty) < MIN_COMMAND_COLUMN_LINES:
        return False
    return all(is_likely_command_line(ln) for ln in c.non_empty)


def lacks_command_cues(c: CommandCandidate) -> bool:
    if c.eager:
        return False
    return (
        not has_strong_command_signal(c.text)
        and not any(starts_with_known_command(ln) for ln in c.lines)
        and not has_command_punctuation(c.text)
    )


def looks_like_source_code(c: CommandCandidate) -> bool:
    if c.eager:
        return False
    return is_likely_source_code(c.text) and not has_strong_command_signal(c.text)


REJECT_GUARDS: tuple[CandidatePredicate, ...] = (
    lacks_newline,
    too_few_lines,
    too_many_lines_unless_eager,
    looks_like_list,
    too_many_lines,
    looks_like_command_column,
    lacks_command_cues,
    looks_like_source_code,
)

# ------------------------------ Score signals -------------------------------


def has_line_continuation(c: CommandCandidate) -> bool:
    return LINE_CONTINUATION in c.text


def has_pipe_or_ampersand(c: CommandCandidate) -> bool:
    return PIPE_OR_AMPERSAND.search(c.text) is not None


def has_prompt_line(c: CommandCandidate) -> bool:
    return PROMPT_AT_LINE_START.search(c.text) is not None


def has_indented_continuations(c: CommandCandidate) -> bool:
    return is_single_command_with_indented_continuations(c.non_empty)


def all_lines_command_like(c: CommandCandidate) -> bool:
    return all(is_likely_command_line(ln) for ln in c.lines)


def has_leading_command_token(c: CommandCandidate) -> bool:
    return LEADING_COMMAND_TOKEN.search(c.text) is not None


def has_path_token(c: CommandCandidate) -> bool:
    return PATH_TOKEN.search(c.text) is not None


SCORE_SIGNALS: tuple[CandidatePredicate, ...] = (
    has_line_continuation,
    has_pipe_or_ampersand,
    has_prompt_line,
    has_indented_continuations,
    all_lines_command_like,
    has_leading_command_token,
    has_path_token,
)


def rejection_reason(candidate: CommandCandidate) -> str | None:
    """Name of the first guard that rejects the candidate, if any."""
    for guard in REJECT_GUARDS:
        if guard(candidate):
            return guard.__name__
    return None


def command_score(candidate: CommandCandidate) -> int:
    return sum(1 for signal in SCORE_SIGNALS if signal(candidate))


def flatten(text: str, *, preserve_blank_lines: bool = False) -> str:
    """Join a multi-line command into one line.

    Tokens split mid-word by a hard wrap (hyphenated names, upper-case
    identifiers, path segments after `/` or `~`) are rejoined without a space
    before the remaining line breaks become single spaces.

    Args:
        text (str): the multi-line command
        preserve_blank_lines (bool): keep blank-line separators as `\\n\\n`

    Returns:
        str: the flattened, trimmed text
    """
    result = text
    if preserve_blank_lines:
        result = BLANK_SEPARATOR.sub(BLANK_PLACEHOLDER, result)
    result = HYPHEN_BREAK.sub(r"-\1", result)
    result = TOKEN_BREAK.sub(r"\1\2", result)
    result = PATH_BREAK.sub(r"\1", result)
    result = EXPLICIT_CONTINUATION.sub(" ", result)
    result = NEWLINE_RUN.sub(" ", result)
    result = WHITESPACE_RUN.sub(" ", result)
    if preserve_blank_lines:
        result = result.replace(BLANK_PLACEHOLDER, "\n\n")
    return result.strip()


def flatten_if_command(
    text: str,
    config: TrimConfig,
    aggressiveness_override: Aggressiveness | None = None,
) -> str | None:
    """Flatten text into one line when it looks like a single shell command.

    Args:
        text (str): the copied text
        config (TrimConfig): caller configuration (aggressiveness, blank lines)
        aggressiveness_override (Aggressiveness | None): level used instead of
            `config.aggressiveness`; HIGH also lifts the size and list guards

    Returns:
        str | None: the flattened command, or None when the text is rejected,
            scores below the threshold, or would not visibly change
    """
    candidate = CommandCandidate(text=text, config=config, override=aggressiveness_override)
    if rejection_reason(candidate) is not None:
        return None
    if command_score(candidate) < candidate.aggressiveness.score_threshold:
        return None

    flattened = flatten(text, preserve_blank_lines=config.preserve_blank_lines)
    return None if flattened == text else flattened
