"""Separator-tolerant patterns for locating merged entities in source text.

A merged span has lost the whitespace and punctuation of the original text
("John Smith" became "JohnSmith"). The pattern built here puts an optional
run of non-alphanumerics back between every pair of characters, so it
matches "John Smith", "John-Smith" and "JOHN  SMITH" alike.
"""

import re

from pseudonymizer.logging.logger import Log

DEFAULT_MAX_SPAN_LENGTH = 256

_NON_ALNUM_RE = re.compile(r"[\W_]+")
_SEPARATOR_RUN = r"[\W_]*"


def strip_to_alnum(text: str) -> str:
    return _NON_ALNUM_RE.sub("", text)


def build_fuzzy_pattern(
    span_text: str,
    max_length: int = DEFAULT_MAX_SPAN_LENGTH,
) -> re.Pattern[str] | None:
    """Compile a case-insensitive pattern for every occurrence of *span_text*.

    The separator run sits only between characters, never after the last
    one, so a match ends on the entity's final character and the text that
    follows it (". Contact") survives the replacement.

    Returns None when the span has no alphanumerics, is longer than
    *max_length* characters once stripped, or does not compile.
    """
    stripped = strip_to_alnum(span_text)
    if not stripped:
        return None
    if len(stripped) > max_length:
        Log.warning(
            f"Skipping span of {len(stripped)} chars (limit {max_length})"
        )
        return None

    pattern = _SEPARATOR_RUN.join(re.escape(ch) for ch in stripped)
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as exc:
        Log.warning(f"Fuzzy pattern failed to compile: {exc}")
        return None
