from dataclasses import dataclass


@dataclass(frozen=True)
class CliptrimError(Exception):
    """Base exception for errors in the cliptrim package."""

    @property
    def message(self) -> str:
        return "cliptrim failed."


@dataclass(frozen=True)
class NoInputError(CliptrimError):
    """Raised when there is no text to trim."""

    message: str = "No input provided. Use --trim <file> or pipe to stdin."


@dataclass(frozen=True)
class InputDecodeError(CliptrimError):
    """Raised when the input bytes are not valid text."""

    source: str
    encoding: str = "utf-8"

    @property
    def message(self) -> str:
        return f"Input from {self.source} is not valid {self.encoding} text."
