from __future__ import annotations

import re

URL_SCHEMES = ("http://", "https://")
WHITESPACE_RUN = re.compile(r"\s+")
VALID_URL = re.compile(r"https?://[A-Za-z0-9._~:/?#\[\]@!$&'()*+,;=%-]+")
EXPLICIT_PATH_PREFIXES = ("/", "~/", "./", "../")
FLAG_PATTERN = re.compile(r"\s-[A-Za-z]")


def repair_wrapped_url(text: str) -> str | None:
    """Rejoin a single URL that a terminal or chat window wrapped.

    Only text consisting of exactly one http(s) URL is considered; with two or
    more schemes present it is ambiguous which one wrapped, so nothing changes.

    Args:
        text (str): the copied text

    Returns:
        str | None: the URL without internal whitespace, or None
    """
    trimmed = text.strip()
    lowered = trimmed.lower()
    scheme_count = sum(lowered.count(scheme) for scheme in URL_SCHEMES)
    if scheme_count != 1 or not lowered.startswith(URL_SCHEMES):
        return None

    collapsed = WHITESPACE_RUN.sub("", trimmed)
    if collapsed == trimmed:
        return None
    if not VALID_URL.fullmatch(collapsed):
        return None
    return collapsed


def quote_path_with_spaces(text: str) -> str | None:
    """Wrap a filesystem path containing spaces in double quotes.

    Args:
        text (str): the copied text

    Returns:
        str | None: the quoted path, or None when the text is not a bare path
            with spaces (multi-line, already quoted, a URL, or a command with flags)
    """
    trimmed = text.strip()
    if not trimmed or "\n" in trimmed:
        return None
    if (trimmed.startswith('"') and trimmed.endswith('"')) or (
        trimmed.startswith("'") and trimmed.endswith("'")
    ):
        return None

    has_path_prefix = trimmed.startswith(EXPLICIT_PATH_PREFIXES)
    looks_relative = "/" in trimmed and "://" not in trimmed
    if not (has_path_prefix or looks_relative):
        return None
    if " " not in trimmed:
        return None
    # "ls -la /some/path" is a command, not one path
    if FLAG_PATTERN.search(trimmed):
        return None

    escaped = trimmed.replace('"', '\\"')
    return f'"{escaped}"'
