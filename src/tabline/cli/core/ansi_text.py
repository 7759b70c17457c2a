"""ANSI text utilities - measuring and truncating strings with escape codes.

Widths are terminal cells, not characters: wide glyphs count two,
combining marks count zero.
"""

from __future__ import annotations

import re

from rich.cells import cell_len

# Pattern to match ANSI escape sequences (including ~ terminator for F-keys, etc.)
_ANSI_ESCAPE = re.compile(r'\x1b\[[0-9;?]*[A-Za-z~]')


def strip_ansi(s: str) -> str:
    return _ANSI_ESCAPE.sub('', s)


def visible_len(s: str) -> int:
    """Get visible width of string (excluding ANSI escape codes)."""
    return cell_len(strip_ansi(s))


def truncate(s: str, max_width: int, reset: bool = True) -> str:
    """
    Truncate an ANSI-escaped string to max visible width.

    Preserves ANSI codes but counts only visible cells. A wide glyph
    that would straddle the limit is dropped rather than split.

    Args:
        s: String to truncate
        max_width: Maximum visible width
        reset: If True, append reset sequence to prevent color bleed
    """
    if max_width <= 0:
        return ""

    result: list[str] = []
    width = 0
    pos = 0

    while pos < len(s):
        match = _ANSI_ESCAPE.match(s, pos)
        if match:
            result.append(match.group())
            pos = match.end()
            continue
        char_width = cell_len(s[pos])
        if width + char_width > max_width:
            break
        result.append(s[pos])
        width += char_width
        pos += 1

    output = ''.join(result)

    # Append reset if truncated to prevent color bleed
    if reset and pos < len(s):
        output += '\x1b[0m'

    return output


def pad_to_width(s: str, width: int, char: str = ' ') -> str:
    """Pad string with char to reach exactly width visible cells."""
    current = visible_len(s)
    if current >= width:
        return s
    return s + char * (width - current)


def truncate_and_pad(s: str, width: int) -> str:
    """Truncate if too long, pad if too short. Always returns exactly width visible cells."""
    return pad_to_width(truncate(s, width), width)

