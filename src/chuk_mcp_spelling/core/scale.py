"""
Scale primitives - Scale protocol, Mode, Major, IntervalScale, spell().

A scale is a set of intervals (at most one per interval number) plus a root
note. Spelling a scale leaps from the root by every interval in ascending
order.

The seven modes of the major scale are derived from Lydian by flattening
one degree at a time:

    Lydian -> Ionian (♯4 -> 4) -> Mixolydian (7 -> ♭7) -> Dorian (3 -> ♭3)
    -> Aeolian (6 -> ♭6) -> Phrygian (2 -> ♭2) -> Locrian (5 -> ♭5)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from .errors import ScaleError
from .intervals import Interval
from .pitch import Note

logger = logging.getLogger(__name__)


class Scale(Protocol):
    """Anything with a root note and a set of intervals above it."""

    @property
    def root(self) -> Note: ...

    @property
    def intervals(self) -> frozenset[Interval]: ...


class Mode(str, Enum):
    """The seven modes of the major scale, in derivation order."""

    LYDIAN = "lydian"
    IONIAN = "ionian"
    MIXOLYDIAN = "mixolydian"
    DORIAN = "dorian"
    AEOLIAN = "aeolian"
    PHRYGIAN = "phrygian"
    LOCRIAN = "locrian"

    @classmethod
    def parse(cls, name: str) -> Mode:
        """Parse a mode name; 'major' and 'minor' map to Ionian and Aeolian."""
        name = name.strip().lower()
        aliases = {"major": cls.IONIAN, "minor": cls.AEOLIAN, "natural_minor": cls.AEOLIAN}
        if name in aliases:
            return aliases[name]
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"Unknown mode: {name}") from None


LYDIAN_INTERVALS: frozenset[Interval] = frozenset(
    {
        Interval.P1,
        Interval.M2,
        Interval.M3,
        Interval.A4,
        Interval.P5,
        Interval.M6,
        Interval.M7,
    }
)

# Each mode is its predecessor with one interval swapped for the same number
MODE_SUBSTITUTIONS: tuple[tuple[Mode, Interval], ...] = (
    (Mode.IONIAN, Interval.P4),
    (Mode.MIXOLYDIAN, Interval.m7),
    (Mode.DORIAN, Interval.m3),
    (Mode.AEOLIAN, Interval.m6),
    (Mode.PHRYGIAN, Interval.m2),
    (Mode.LOCRIAN, Interval.d5),
)


def substitute(intervals: frozenset[Interval], replacement: Interval) -> frozenset[Interval]:
    """
    Replace the interval with the same number as `replacement`.

    Quality is ignored when matching. If no interval has that number the
    set is returned unchanged.
    """
    target = next((i for i in intervals if i.number == replacement.number), None)
    if target is None:
        logger.debug("No %s in %s, substitution skipped", replacement.number.name, intervals)
        return intervals
    return (intervals - {target}) | {replacement}


def _derive_modes() -> dict[Mode, frozenset[Interval]]:
    modes = {Mode.LYDIAN: LYDIAN_INTERVALS}
    current = LYDIAN_INTERVALS
    for mode, replacement in MODE_SUBSTITUTIONS:
        current = substitute(current, replacement)
        modes[mode] = current
    return modes


MODE_INTERVALS: dict[Mode, frozenset[Interval]] = _derive_modes()


def check_interval_numbers(intervals: Iterable[Interval]) -> frozenset[Interval]:
    """
    Freeze an interval collection, rejecting duplicate interval numbers.

    Raises:
        ScaleError: If two intervals share a number (e.g. m3 and M3)
    """
    seen: dict[int, Interval] = {}
    for interval in intervals:
        if interval.number in seen and seen[interval.number] != interval:
            raise ScaleError(
                f"Only one {interval.number.name.lower()} allowed, "
                f"got {seen[interval.number]} and {interval}"
            )
        seen[interval.number] = interval
    return frozenset(seen.values())


@dataclass(frozen=True)
class Major:
    """
    A mode of the major scale on a root note.

    Examples:
        Major(note("c")) = C major
        Major(note("d"), Mode.DORIAN) = D dorian
    """

    root: Note
    mode: Mode = Mode.IONIAN

    @property
    def intervals(self) -> frozenset[Interval]:
        return MODE_INTERVALS[self.mode]

    def __str__(self) -> str:
        suffix = "major" if self.mode is Mode.IONIAN else self.mode.value
        return f"{self.root.pitch} {suffix}"


@dataclass(frozen=True)
class IntervalScale:
    """
    An arbitrary interval set on a root note (harmonic minor, pentatonics, ...).

    Immutable; the interval set is validated on construction.
    """

    root: Note
    intervals: frozenset[Interval]
    name: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "intervals", check_interval_numbers(self.intervals))

    def __str__(self) -> str:
        return f"{self.root.pitch} {self.name}" if self.name else f"{self.root.pitch} scale"


def spell(scale: Scale) -> list[Note]:
    """
    Spell a scale (or chord) from its root.

    Intervals are applied in ascending size order; equal sizes fall back to
    diatonic steps, so an augmented fourth comes before a diminished fifth.

    Returns:
        One note per interval, ascending
    """
    root = scale.root
    return [root.leap(interval) for interval in sorted(scale.intervals)]
