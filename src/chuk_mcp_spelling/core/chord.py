"""
Chord primitives - ChordQuality, Chord.

Chords are interval sets measured from the root, so a Chord satisfies the
same Scale protocol and is spelled with the same spell() function.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .intervals import Interval
from .pitch import Note
from .scale import check_interval_numbers


@dataclass(frozen=True)
class ChordQuality:
    """
    A chord quality defined by its intervals from the root.

    Intervals are measured from the root, not stacked.
    For example, a major triad is root + M3 + P5.

    Immutable and hashable.
    """

    intervals: frozenset[Interval]
    name: str = ""
    symbol: str = ""

    # Common chord qualities (defined after class)
    MAJOR: ClassVar[ChordQuality]
    MINOR: ClassVar[ChordQuality]
    DIMINISHED: ClassVar[ChordQuality]
    AUGMENTED: ClassVar[ChordQuality]
    SUS2: ClassVar[ChordQuality]
    SUS4: ClassVar[ChordQuality]
    MAJOR_7: ClassVar[ChordQuality]
    MINOR_7: ClassVar[ChordQuality]
    DOMINANT_7: ClassVar[ChordQuality]
    DIMINISHED_7: ClassVar[ChordQuality]
    HALF_DIMINISHED_7: ClassVar[ChordQuality]

    def __post_init__(self) -> None:
        object.__setattr__(self, "intervals", check_interval_numbers(self.intervals))

    @property
    def third(self) -> Interval | None:
        """The third of the chord (if present)."""
        return next((i for i in self.intervals if i.diatonic_steps == 2), None)

    @property
    def fifth(self) -> Interval | None:
        """The fifth of the chord (if present)."""
        return next((i for i in self.intervals if i.diatonic_steps == 4), None)

    @property
    def seventh(self) -> Interval | None:
        """The seventh of the chord (if present)."""
        return next((i for i in self.intervals if i.diatonic_steps == 6), None)

    @classmethod
    def parse(cls, name: str) -> ChordQuality:
        """Parse a quality by name ('minor 7') or symbol ('m7', 'dim', '')."""
        key = name.strip()
        for quality in _ALL_QUALITIES:
            if key == quality.symbol or key.lower() == quality.name:
                return quality
        raise ValueError(f"Unknown chord quality: {name}")

    def __str__(self) -> str:
        return self.name or f"ChordQuality({sorted(self.intervals)})"


def _quality(name: str, symbol: str, *intervals: Interval) -> ChordQuality:
    return ChordQuality(frozenset({Interval.P1, *intervals}), name, symbol)


ChordQuality.MAJOR = _quality("major", "", Interval.M3, Interval.P5)
ChordQuality.MINOR = _quality("minor", "m", Interval.m3, Interval.P5)
ChordQuality.DIMINISHED = _quality("diminished", "dim", Interval.m3, Interval.d5)
ChordQuality.AUGMENTED = _quality("augmented", "aug", Interval.M3, Interval.A5)
ChordQuality.SUS2 = _quality("sus2", "sus2", Interval.M2, Interval.P5)
ChordQuality.SUS4 = _quality("sus4", "sus4", Interval.P4, Interval.P5)
ChordQuality.MAJOR_7 = _quality("major 7", "maj7", Interval.M3, Interval.P5, Interval.M7)
ChordQuality.MINOR_7 = _quality("minor 7", "m7", Interval.m3, Interval.P5, Interval.m7)
ChordQuality.DOMINANT_7 = _quality("dominant 7", "7", Interval.M3, Interval.P5, Interval.m7)
ChordQuality.DIMINISHED_7 = _quality(
    "diminished 7", "dim7", Interval.m3, Interval.d5, Interval.d7
)
ChordQuality.HALF_DIMINISHED_7 = _quality(
    "half-diminished 7", "m7b5", Interval.m3, Interval.d5, Interval.m7
)

_ALL_QUALITIES: tuple[ChordQuality, ...] = (
    ChordQuality.MAJOR,
    ChordQuality.MINOR,
    ChordQuality.DIMINISHED,
    ChordQuality.AUGMENTED,
    ChordQuality.SUS2,
    ChordQuality.SUS4,
    ChordQuality.MAJOR_7,
    ChordQuality.MINOR_7,
    ChordQuality.DOMINANT_7,
    ChordQuality.DIMINISHED_7,
    ChordQuality.HALF_DIMINISHED_7,
)


@dataclass(frozen=True)
class Chord:
    """
    A concrete chord with a root note and quality.

    Examples:
        Chord(note("c"), ChordQuality.DIMINISHED_7) -> C E♭ G♭ B𝄫
    """

    root: Note
    quality: ChordQuality

    @property
    def intervals(self) -> frozenset[Interval]:
        return self.quality.intervals

    def __str__(self) -> str:
        return f"{self.root.pitch}{self.quality.symbol}"
