from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from cliptrim.config import Aggressiveness, TrimConfig


class Settings(BaseModel):
    """Command-line settings for the cliptrim CLI."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    trim: Path | None = Field(default=None, description="Input file; stdin when omitted.")
    force: bool = Field(default=False, description="Force High aggressiveness.")
    json_output: bool = Field(default=False, description="Emit JSON {original, trimmed, transformed}.")
    aggressiveness: Aggressiveness = Field(
        default=Aggressiveness.NORMAL,
        description="Aggressiveness level.",
    )
    preserve_blank_lines: bool = Field(default=False, description="Keep blank lines when flattening.")
    remove_box_drawing: bool = Field(default=True, description="Strip box-drawing characters.")
    markdown: bool = Field(default=False, description="Reflow markdown instead of flattening.")
    summary: bool = Field(default=False, description="Write a one-line preview to stderr.")
    log_file: str = Field(default="", description="Log file path.")
    verbose: bool = Field(default=False, description="Log pass decisions.")

    def trim_config(self) -> TrimConfig:
        return TrimConfig(
            aggressiveness=self.aggressiveness,
            preserve_blank_lines=self.preserve_blank_lines,
            remove_box_drawing=self.remove_box_drawing,
        )

    def aggressiveness_override(self) -> Aggressiveness | None:
        return Aggressiveness.HIGH if self.force else None
