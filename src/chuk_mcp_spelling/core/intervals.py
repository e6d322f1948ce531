"""
Interval primitives - Quality, interval numbers, Interval, Tritone.

An interval has two independent measurements:
- size: distance in semitones (depends on number and quality)
- diatonic_steps: distance in letter names (depends on the number only)

Interval numbers are split into two families so that illegal pairings
("perfect third", "minor fifth") cannot be built:
- PerfectNumber: unison, fourth, fifth, octave
- ImperfectNumber: second, third, sixth, seventh
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, IntEnum
from functools import total_ordering
from typing import ClassVar, Union

from .errors import AmbiguousIntervalError, IntervalError


class Quality(str, Enum):
    """Interval quality, valued by its conventional one-letter abbreviation."""

    DIMINISHED = "d"
    MINOR = "m"
    PERFECT = "P"
    MAJOR = "M"
    AUGMENTED = "A"


class PerfectNumber(IntEnum):
    """Interval numbers that take perfect / diminished / augmented."""

    UNISON = 1
    FOURTH = 4
    FIFTH = 5
    OCTAVE = 8


class ImperfectNumber(IntEnum):
    """Interval numbers that take major / minor / diminished / augmented."""

    SECOND = 2
    THIRD = 3
    SIXTH = 6
    SEVENTH = 7


IntervalNumber = Union[PerfectNumber, ImperfectNumber]

# Semitone tables (module level to avoid IntEnum member issues)
_PERFECT_SIZES: dict[PerfectNumber, int] = {
    PerfectNumber.UNISON: 0,
    PerfectNumber.FOURTH: 5,
    PerfectNumber.FIFTH: 7,
    PerfectNumber.OCTAVE: 12,
}
_MINOR_SIZES: dict[ImperfectNumber, int] = {
    ImperfectNumber.SECOND: 1,
    ImperfectNumber.THIRD: 3,
    ImperfectNumber.SIXTH: 8,
    ImperfectNumber.SEVENTH: 10,
}

_NUMBER_NAMES: dict[int, str] = {
    1: "unison",
    2: "second",
    3: "third",
    4: "fourth",
    5: "fifth",
    6: "sixth",
    7: "seventh",
    8: "octave",
}

_INVERTED_QUALITY: dict[Quality, Quality] = {
    Quality.DIMINISHED: Quality.AUGMENTED,
    Quality.MINOR: Quality.MAJOR,
    Quality.PERFECT: Quality.PERFECT,
    Quality.MAJOR: Quality.MINOR,
    Quality.AUGMENTED: Quality.DIMINISHED,
}

_SHORT_NAME = re.compile(r"^([dmPMA])([1-8])$")


def _number_from_int(value: int) -> IntervalNumber:
    if value in (1, 4, 5, 8):
        return PerfectNumber(value)
    if value in (2, 3, 6, 7):
        return ImperfectNumber(value)
    raise IntervalError(f"Interval number must be 1-8, got {value}")


@total_ordering
@dataclass(frozen=True)
class Interval:
    """
    A quality applied to an interval number, e.g. major third, perfect fifth.

    Prefer the typed constructors (perfect, major, minor, diminished,
    augmented) or the class constants (Interval.M3, Interval.P5).

    Intervals sort by size, then by diatonic steps, so the two spellings of
    the tritone (A4 before d5) always come out in the same order.

    Immutable and hashable.
    """

    quality: Quality
    number: IntervalNumber

    # Named intervals (defined after class)
    P1: ClassVar[Interval]
    d1: ClassVar[Interval]
    A1: ClassVar[Interval]
    d2: ClassVar[Interval]
    m2: ClassVar[Interval]
    M2: ClassVar[Interval]
    A2: ClassVar[Interval]
    d3: ClassVar[Interval]
    m3: ClassVar[Interval]
    M3: ClassVar[Interval]
    A3: ClassVar[Interval]
    d4: ClassVar[Interval]
    P4: ClassVar[Interval]
    A4: ClassVar[Interval]
    d5: ClassVar[Interval]
    P5: ClassVar[Interval]
    A5: ClassVar[Interval]
    d6: ClassVar[Interval]
    m6: ClassVar[Interval]
    M6: ClassVar[Interval]
    A6: ClassVar[Interval]
    d7: ClassVar[Interval]
    m7: ClassVar[Interval]
    M7: ClassVar[Interval]
    A7: ClassVar[Interval]
    d8: ClassVar[Interval]
    P8: ClassVar[Interval]

    # Long aliases
    UNISON: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    AUGMENTED_FOURTH: ClassVar[Interval]
    DIMINISHED_FIFTH: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]

    def __post_init__(self) -> None:
        if not isinstance(self.quality, Quality):
            raise IntervalError(f"Unknown interval quality: {self.quality!r}")
        if not isinstance(self.number, (PerfectNumber, ImperfectNumber)):
            raise IntervalError(
                f"Interval number must be a PerfectNumber or ImperfectNumber, got {self.number!r}"
            )
        if self.quality is Quality.PERFECT and not isinstance(self.number, PerfectNumber):
            raise IntervalError(f"A {_NUMBER_NAMES[self.number]} cannot be perfect")
        if self.quality in (Quality.MAJOR, Quality.MINOR) and not isinstance(
            self.number, ImperfectNumber
        ):
            raise IntervalError(
                f"A {_NUMBER_NAMES[self.number]} cannot be {self.quality.name.lower()}"
            )

    @classmethod
    def perfect(cls, number: PerfectNumber) -> Interval:
        return cls(Quality.PERFECT, number)

    @classmethod
    def major(cls, number: ImperfectNumber) -> Interval:
        return cls(Quality.MAJOR, number)

    @classmethod
    def minor(cls, number: ImperfectNumber) -> Interval:
        return cls(Quality.MINOR, number)

    @classmethod
    def diminished(cls, number: IntervalNumber) -> Interval:
        return cls(Quality.DIMINISHED, number)

    @classmethod
    def augmented(cls, number: IntervalNumber) -> Interval:
        return cls(Quality.AUGMENTED, number)

    @property
    def size(self) -> int:
        """
        Number of semitones in this interval.

        A diminished unison is degenerate and clamps to 0 rather than -1.
        A diminished second is not clamped: it is 0 semitones by arithmetic.
        """
        if isinstance(self.number, PerfectNumber):
            perfect = _PERFECT_SIZES[self.number]
            if self.quality is Quality.DIMINISHED:
                return max(0, perfect - 1)
            if self.quality is Quality.AUGMENTED:
                return perfect + 1
            return perfect

        minor = _MINOR_SIZES[self.number]
        if self.quality is Quality.DIMINISHED:
            return minor - 1
        if self.quality is Quality.MINOR:
            return minor
        if self.quality is Quality.MAJOR:
            return minor + 1
        return minor + 2  # augmented = major + 1

    @property
    def diatonic_steps(self) -> int:
        """Number of letter names crossed (0 for a unison, 7 for an octave)."""
        return int(self.number) - 1

    @property
    def name(self) -> str:
        """Long name, e.g. 'augmented fourth'."""
        return f"{self.quality.name.lower()} {_NUMBER_NAMES[self.number]}"

    def invert(self) -> Interval:
        """
        Invert the interval within an octave.

        M3 -> m6, P5 -> P4, A4 -> d5, P1 -> P8
        """
        return Interval(
            _INVERTED_QUALITY[self.quality],
            _number_from_int(9 - int(self.number)),
        )

    @classmethod
    def parse(cls, name: str) -> Interval:
        """Parse a short name like 'P5', 'm3', 'A4', 'd7'."""
        match = _SHORT_NAME.match(name.strip())
        if match is None:
            raise IntervalError(f"Unknown interval: {name}")
        quality, number = match.groups()
        return cls(Quality(quality), _number_from_int(int(number)))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return (self.size, self.diatonic_steps) < (other.size, other.diatonic_steps)

    def __str__(self) -> str:
        return f"{self.quality.value}{int(self.number)}"

    def __repr__(self) -> str:
        return f"Interval.{self}"


@dataclass(frozen=True)
class Tritone:
    """
    Six semitones with no letter-name distance decided yet.

    The size is known, but leaping by it is a programming error until it is
    resolved to an augmented fourth or a diminished fifth.
    """

    @property
    def size(self) -> int:
        return 6

    @property
    def diatonic_steps(self) -> int:
        raise AmbiguousIntervalError(
            "A tritone has no diatonic distance; use as_augmented_fourth() "
            "or as_diminished_fifth()"
        )

    def as_augmented_fourth(self) -> Interval:
        return Interval.A4

    def as_diminished_fifth(self) -> Interval:
        return Interval.d5

    def __str__(self) -> str:
        return "TT"


TRITONE = Tritone()


def parse_interval(name: str) -> Interval | Tritone:
    """Parse a short interval name, accepting 'TT' for the undecided tritone."""
    if name.strip().upper() == "TT":
        return TRITONE
    return Interval.parse(name)


# Initialize class constants after class is defined
Interval.P1 = Interval.perfect(PerfectNumber.UNISON)
Interval.d1 = Interval.diminished(PerfectNumber.UNISON)
Interval.A1 = Interval.augmented(PerfectNumber.UNISON)
Interval.d2 = Interval.diminished(ImperfectNumber.SECOND)
Interval.m2 = Interval.minor(ImperfectNumber.SECOND)
Interval.M2 = Interval.major(ImperfectNumber.SECOND)
Interval.A2 = Interval.augmented(ImperfectNumber.SECOND)
Interval.d3 = Interval.diminished(ImperfectNumber.THIRD)
Interval.m3 = Interval.minor(ImperfectNumber.THIRD)
Interval.M3 = Interval.major(ImperfectNumber.THIRD)
Interval.A3 = Interval.augmented(ImperfectNumber.THIRD)
Interval.d4 = Interval.diminished(PerfectNumber.FOURTH)
Interval.P4 = Interval.perfect(PerfectNumber.FOURTH)
Interval.A4 = Interval.augmented(PerfectNumber.FOURTH)
Interval.d5 = Interval.diminished(PerfectNumber.FIFTH)
Interval.P5 = Interval.perfect(PerfectNumber.FIFTH)
Interval.A5 = Interval.augmented(PerfectNumber.FIFTH)
Interval.d6 = Interval.diminished(ImperfectNumber.SIXTH)
Interval.m6 = Interval.minor(ImperfectNumber.SIXTH)
Interval.M6 = Interval.major(ImperfectNumber.SIXTH)
Interval.A6 = Interval.augmented(ImperfectNumber.SIXTH)
Interval.d7 = Interval.diminished(ImperfectNumber.SEVENTH)
Interval.m7 = Interval.minor(ImperfectNumber.SEVENTH)
Interval.M7 = Interval.major(ImperfectNumber.SEVENTH)
Interval.A7 = Interval.augmented(ImperfectNumber.SEVENTH)
Interval.d8 = Interval.diminished(PerfectNumber.OCTAVE)
Interval.P8 = Interval.perfect(PerfectNumber.OCTAVE)

# Long aliases
Interval.UNISON = Interval.P1
Interval.MINOR_SECOND = Interval.m2
Interval.MAJOR_SECOND = Interval.M2
Interval.MINOR_THIRD = Interval.m3
Interval.MAJOR_THIRD = Interval.M3
Interval.PERFECT_FOURTH = Interval.P4
Interval.AUGMENTED_FOURTH = Interval.A4
Interval.DIMINISHED_FIFTH = Interval.d5
Interval.PERFECT_FIFTH = Interval.P5
Interval.MINOR_SIXTH = Interval.m6
Interval.MAJOR_SIXTH = Interval.M6
Interval.MINOR_SEVENTH = Interval.m7
Interval.MAJOR_SEVENTH = Interval.M7
Interval.OCTAVE = Interval.P8
