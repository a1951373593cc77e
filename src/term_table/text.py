"""
Display-width measurement and wrapping of cell text.

Widths are terminal columns, not code points: East Asian wide characters
take two columns, combining marks take none, and ANSI escape sequences
(colors, cursor codes) are invisible. Escape sequences are always kept
whole when text is wrapped.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from wcwidth import wcwidth

from .exceptions import ValidationError

# ESC or CSI, optional intermediates, numeric parameters, final byte
ANSI_ESCAPE_RE = re.compile(
    r"[\x1b\x9b][\[()#;?]*(?:[0-9]{1,4}(?:;[0-9]{0,4})*)?[0-9A-PRZcf-nqry=><]"
)


def normalize_newlines(text: str) -> str:
    """Convert ``\\r\\n`` and lone ``\\r`` line endings to ``\\n``."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return ANSI_ESCAPE_RE.sub("", text)


def char_width(char: str) -> int:
    """Columns taken by a single character; unknown widths count as 1."""
    width = wcwidth(char)
    return 1 if width < 0 else width


def display_width(text: str) -> int:
    """
    Terminal columns occupied by text.

    Args:
        text: A single line; escape sequences are ignored

    Returns:
        Sum of the display widths of the visible characters
    """
    return sum(char_width(c) for c in strip_ansi(text))


def iter_segments(text: str) -> Iterator[tuple[str, bool]]:
    """
    Split text into visible characters and whole escape sequences.

    Yields:
        (segment, is_escape) pairs in order. Visible characters are yielded
        one at a time; each escape sequence is yielded as a single segment.
    """
    pos = 0
    for match in ANSI_ESCAPE_RE.finditer(text):
        for char in text[pos : match.start()]:
            yield char, False
        yield match.group(), True
        pos = match.end()
    for char in text[pos:]:
        yield char, False


def wrap_text(text: str, width: int | None = None, pad: str = "") -> list[str]:
    """
    Break text into lines no wider than width.

    Lines break at every ``\\n`` and before any visible character that would
    push the line past width. Escape sequences add no width and are never
    split. Every line is framed by pad on both sides, and the pad counts
    towards width.

    Args:
        text: Text to wrap
        width: Maximum line width in columns, or None for no limit
        pad: Padding placed at both ends of every line (usually "" or " ")

    Returns:
        Non-empty list of lines

    Raises:
        ValidationError: If width is negative
    """
    if width is not None and width < 0:
        raise ValidationError("width", width, "must not be negative")

    pad_width = display_width(pad)
    limit = None if width is None else width - 2 * pad_width
    lines: list[str] = []
    current: list[str] = []
    current_width = 0
    has_content = False

    for segment, is_escape in iter_segments(normalize_newlines(text)):
        if is_escape:
            current.append(segment)
            continue
        if segment == "\n":
            lines.append(pad + "".join(current) + pad)
            current, current_width, has_content = [], 0, False
            continue
        seg_width = char_width(segment)
        if limit is not None and has_content and current_width + seg_width > limit:
            lines.append(pad + "".join(current) + pad)
            current, current_width = [], 0
        current.append(segment)
        current_width += seg_width
        has_content = True

    lines.append(pad + "".join(current) + pad)
    return lines

