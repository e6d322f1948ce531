"""
Accidental glyphs - counts of sharps/flats to display strings and back.

An accidental is a signed semitone count: negative for flats, positive for
sharps, zero for natural. Counts are unbounded; beyond a double alteration
the single glyph is repeated.
"""

from __future__ import annotations

import re
from enum import Enum

Accidental = int

NATURAL: Accidental = 0
SHARP: Accidental = 1
DOUBLE_SHARP: Accidental = 2
FLAT: Accidental = -1
DOUBLE_FLAT: Accidental = -2


class AccidentalStyle(str, Enum):
    """Visual convention for rendering accidentals."""

    UNICODE = "unicode"  # ♯ 𝄪 ♭ 𝄫
    ASCII = "ascii"  # # ## b bb
    DUTCH = "dutch"  # is isis es eses (as in cis, bes)


_UNICODE_GLYPHS: dict[int, str] = {
    SHARP: "♯",
    DOUBLE_SHARP: "\U0001d12a",
    FLAT: "♭",
    DOUBLE_FLAT: "\U0001d12b",
}

_GLYPH_VALUES: dict[str, int] = {
    "#": 1,
    "x": 2,
    "b": -1,
    "♯": 1,
    "\U0001d12a": 2,
    "♭": -1,
    "\U0001d12b": -2,
}

_DUTCH_SHARPS = re.compile(r"^(is)+$")
_DUTCH_FLATS = re.compile(r"^(es)+$")


def format_accidental(count: Accidental, style: AccidentalStyle = AccidentalStyle.UNICODE) -> str:
    """
    Render an accidental count.

    Args:
        count: Signed number of semitone alterations
        style: Glyph convention

    Returns:
        Display string ("" for natural)
    """
    if count == NATURAL:
        return ""

    if style is AccidentalStyle.UNICODE:
        if count in _UNICODE_GLYPHS:
            return _UNICODE_GLYPHS[count]
        glyph = _UNICODE_GLYPHS[SHARP] if count > 0 else _UNICODE_GLYPHS[FLAT]
        return glyph * abs(count)

    if style is AccidentalStyle.ASCII:
        return ("#" if count > 0 else "b") * abs(count)

    return ("is" if count > 0 else "es") * abs(count)


def parse_accidental(text: str) -> Accidental:
    """
    Parse an accidental in any AccidentalStyle back to its count.

    Raises:
        ValueError: If the text is not a run of sharps or a run of flats
    """
    if not text:
        return NATURAL

    if _DUTCH_SHARPS.match(text):
        return len(text) // 2
    if _DUTCH_FLATS.match(text):
        return -(len(text) // 2)

    values = []
    for char in text:
        if char not in _GLYPH_VALUES:
            raise ValueError(f"Unknown accidental: {text}")
        values.append(_GLYPH_VALUES[char])

    if any(v > 0 for v in values) and any(v < 0 for v in values):
        raise ValueError(f"Accidental mixes sharps and flats: {text}")

    return sum(values)
