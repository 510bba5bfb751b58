"""String helpers: ASCII case conversion, insertion and trimming."""

from __future__ import annotations

import string

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

_DEFAULT_TRIM = " "


def to_upper(text: str | None) -> str | None:
    """Return ``text`` with ASCII letters upper-cased; ``None`` stays ``None``."""
    if text is None:
        return None
    return text.translate(_TO_UPPER)


def to_lower(text: str | None) -> str | None:
    """Return ``text`` with ASCII letters lower-cased; ``None`` stays ``None``."""
    if text is None:
        return None
    return text.translate(_TO_LOWER)


def insert(src: str | None, text: str | None, start_index: int) -> str | None:
    """Return ``src`` with ``text`` inserted at ``start_index``.

    An index past the end appends. A missing ``text`` yields a copy of
    ``src``; a missing ``src`` yields ``None``.
    """
    if src is None:
        return None
    if text is None:
        return src
    if start_index < 0:
        raise ValueError("start_index must not be negative")
    start = min(start_index, len(src))
    return src[:start] + text + src[start:]


def trim(src: str | None, trim_chars: str | None) -> str | None:
    """Remove leading and trailing characters found in ``trim_chars``.

    An empty or missing ``trim_chars`` trims spaces.
    """
    if src is None:
        return None
    return src.strip(trim_chars or _DEFAULT_TRIM)