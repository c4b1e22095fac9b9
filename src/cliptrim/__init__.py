"""Clean up copied shell snippets and wrapped markdown."""

from cliptrim.commands import flatten_if_command
from cliptrim.config import Aggressiveness, TrimConfig, TrimResult
from cliptrim.decoration import strip_decoration
from cliptrim.markdown import is_likely_markdown, reflow_markdown
from cliptrim.output_construction import char_count_suffix, display_string, pretty_badge, summarize
from cliptrim.pipeline import transform, transform_markdown
from cliptrim.prompts import strip_prompts
from cliptrim.repair import quote_path_with_spaces, repair_wrapped_url

__version__ = "0.6.4"

__all__ = [
    "Aggressiveness",
    "TrimConfig",
    "TrimResult",
    "__version__",
    "char_count_suffix",
    "display_string",
    "flatten_if_command",
    "is_likely_markdown",
    "pretty_badge",
    "quote_path_with_spaces",
    "reflow_markdown",
    "repair_wrapped_url",
    "strip_decoration",
    "strip_prompts",
    "summarize",
    "transform",
    "transform_markdown",
]
