"""
Octave-independent views of spelled notes.

Two levels of de-duplication:
- pitch_set: keeps spelling (E♭ and D♯ stay distinct)
- pitch_class_set: chromatic only (E♭ and D♯ are both 3)
"""

from __future__ import annotations

from collections.abc import Iterable

from .pitch import Note, NoteName, Pitch


def pitch_set(notes: Iterable[Note]) -> frozenset[Pitch]:
    """Spelled pitches with octaves dropped."""
    return frozenset(n.pitch for n in notes)


def pitch_class_set(notes: Iterable[Note]) -> frozenset[int]:
    """Chromatic pitch classes (0-11) with spelling and octaves dropped."""
    return frozenset(n.pitch.pitch_class for n in notes)


def letter_names(notes: Iterable[Note]) -> list[NoteName]:
    """Letter names in order, duplicates kept."""
    return [n.name for n in notes]


def equivalent(a: Iterable[Note], b: Iterable[Note]) -> bool:
    """True if both collections spell the same pitches, ignoring octave and order."""
    return pitch_set(a) == pitch_set(b)
