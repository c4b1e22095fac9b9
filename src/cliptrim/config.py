from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Aggressiveness(StrEnum):
    """How many heuristic command signals are needed before flattening.

    A lower `score_threshold` means the level is more eager to transform.
    """

    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    CLAUDE_CODE = "claudecode"

    @classmethod
    def parse(cls, value: str) -> Aggressiveness:
        """Case-insensitive lookup by value (e.g. "HIGH" or "ClaudeCode").

        Raises:
            ValueError: if the value names no level.
        """
        return cls(value.strip().lower())

    @property
    def score_threshold(self) -> int:
        return _SCORE_THRESHOLD[self]

    @property
    def title(self) -> str:
        return _TITLE[self]

    @property
    def title_short(self) -> str:
        return _TITLE_SHORT[self]

    @property
    def blurb(self) -> str:
        """Short helper text describing the level."""
        return _BLURB[self]


_SCORE_THRESHOLD: dict[Aggressiveness, int] = {
    Aggressiveness.LOW: 3,
    Aggressiveness.NORMAL: 2,
    Aggressiveness.HIGH: 1,
    Aggressiveness.CLAUDE_CODE: 1,
}

_TITLE: dict[Aggressiveness, str] = {
    Aggressiveness.LOW: "Low (safer)",
    Aggressiveness.NORMAL: "Normal",
    Aggressiveness.HIGH: "High (more eager)",
    Aggressiveness.CLAUDE_CODE: "Claude Code",
}

_TITLE_SHORT: dict[Aggressiveness, str] = {
    Aggressiveness.LOW: "Low",
    Aggressiveness.NORMAL: "Normal",
    Aggressiveness.HIGH: "High",
    Aggressiveness.CLAUDE_CODE: "Claude Code",
}

_BLURB: dict[Aggressiveness, str] = {
    Aggressiveness.LOW: "Keeps light multi-line snippets intact unless they clearly look like shell commands.",
    Aggressiveness.NORMAL: "Good default: flattens typical blog/README commands with pipes or continuations.",
    Aggressiveness.HIGH: "Most eager: will flatten almost any short multi-line text that resembles a command.",
    Aggressiveness.CLAUDE_CODE: "Shares the score threshold of High but keeps the size, cue and source-code checks of Normal.",
}


class TrimConfig(BaseModel):
    """Caller-owned configuration passed by value into every pipeline call.

    Attributes:
        aggressiveness: Threshold level used when no override is given.
        preserve_blank_lines: Keep blank-line separators when flattening.
        remove_box_drawing: Run the box-drawing decoration stripper.
        expected_line_length: Typical wrap width of the source terminal.
    """

    model_config = ConfigDict(frozen=True)

    aggressiveness: Aggressiveness = Field(
        default=Aggressiveness.NORMAL,
        description="Aggressiveness level used without an override",
    )
    preserve_blank_lines: bool = Field(default=False, description="Keep blank lines when flattening")
    remove_box_drawing: bool = Field(default=True, description="Strip box-drawing gutters")
    expected_line_length: int = Field(default=80, ge=1, description="Typical wrap width in characters")


class TrimResult(BaseModel):
    """Outcome of one pipeline run.

    `original` is always the untouched input; `trimmed` equals `original`
    whenever `was_transformed` is False.
    """

    model_config = ConfigDict(frozen=True)

    original: str = Field(..., description="Input text, untouched")
    trimmed: str = Field(..., description="Transformed text, or the input when unchanged")
    was_transformed: bool = Field(..., description="Whether any pass rewrote the text")

    @computed_field
    @property
    def removed_chars(self) -> int:
        """Number of characters the transformation saved (never negative)."""
        return max(len(self.original) - len(self.trimmed), 0)

    @classmethod
    def unchanged(cls, text: str) -> TrimResult:
        return cls(original=text, trimmed=text, was_transformed=False)
