"""
Pitch primitives - NoteName, Pitch, Note.

Spelling is tracked with two independent counters:
- the letter name, advanced one diatonic step at a time
- the accidental, adjusted so the chromatic distance comes out right

A Pitch is a letter name plus accidental (no register).
A Note is a Pitch in a specific octave.

Letter names are never respelled to simplify an accidental: B♯ stays B♯,
and a quadruple sharp is a legal value.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

from chuk_mcp_spelling.constants import DEFAULT_OCTAVE

from .accidentals import NATURAL, Accidental, AccidentalStyle, format_accidental, parse_accidental
from .errors import OctaveUnderflowError

if TYPE_CHECKING:
    from .intervals import Interval, Tritone


class NoteName(IntEnum):
    """
    The 7 letter names, cyclic: after B comes C (one octave up).
    """

    C = 0
    D = 1
    E = 2
    F = 3
    G = 4
    A = 5
    B = 6

    def next(self) -> NoteName:
        """The following letter name, wrapping B -> C."""
        return NoteName((self.value + 1) % 7)

    def prev(self) -> NoteName:
        """The preceding letter name, wrapping C -> B."""
        return NoteName((self.value - 1) % 7)

    @property
    def natural_semitone(self) -> int:
        """Semitones above C of the natural (unaltered) letter."""
        return _NATURAL_SEMITONES[self.value]

    @classmethod
    def parse(cls, letter: str) -> NoteName:
        """Parse a single letter, case-insensitive."""
        letter = letter.strip().upper()
        if letter not in cls.__members__:
            raise ValueError(f"Unknown note name: {letter}")
        return cls[letter]


# Natural letter tables (module level to avoid IntEnum member issues)
_NATURAL_SEMITONES: list[int] = [0, 2, 4, 5, 7, 9, 11]

# Semitones from each natural letter up to the next one: C-D, D-E, E-F, ...
_NATURAL_GAPS: list[int] = [2, 2, 1, 2, 2, 2, 1]

_NOTE_SPELLING = re.compile(r"^(.+?)(\d+)$")


@dataclass(frozen=True, order=True)
class Pitch:
    """
    A letter name plus accidental, with no octave.

    Ordered by letter name first, accidental second.

    Examples:
        Pitch(NoteName.C) = C
        Pitch(NoteName.E, -1) = E♭
        Pitch(NoteName.F, 2) = F𝄪
    """

    name: NoteName
    accidental: Accidental = NATURAL

    def __post_init__(self) -> None:
        if not isinstance(self.name, NoteName):
            raise ValueError(f"Pitch name must be a NoteName, got {self.name!r}")

    @property
    def pitch_class(self) -> int:
        """Chromatic pitch class 0-11 (C = 0). Enharmonics share a value."""
        return (self.name.natural_semitone + self.accidental) % 12

    def step_forward(self, semitones: int = 0) -> Pitch:
        """
        Move to the next letter name, `semitones` above this pitch.

        With the default of 0 the accidental absorbs the natural gap between
        the two letters (C -> D♭♭, E -> F♭); leap() relies on that.
        """
        gap = _NATURAL_GAPS[self.name]
        return Pitch(self.name.next(), self.accidental + semitones - gap)

    def step_backward(self, semitones: int = 0) -> Pitch:
        """Move to the previous letter name, `semitones` below this pitch."""
        prev = self.name.prev()
        return Pitch(prev, self.accidental - semitones + _NATURAL_GAPS[prev])

    def leap(self, interval: Interval | Tritone) -> Pitch:
        """
        Spell the pitch an interval above this one.

        Walks the letter names first (diatonic steps), then corrects the
        accidental by the interval size in one go.
        """
        steps = interval.diatonic_steps
        pitch = self
        for _ in range(steps):
            pitch = pitch.step_forward()
        return Pitch(pitch.name, pitch.accidental + interval.size)

    def fall(self, interval: Interval | Tritone) -> Pitch:
        """Spell the pitch an interval below this one."""
        steps = interval.diatonic_steps
        pitch = self
        for _ in range(steps):
            pitch = pitch.step_backward()
        return Pitch(pitch.name, pitch.accidental - interval.size)

    def at_octave(self, octave: int) -> Note:
        """Place this pitch in an octave."""
        return Note(self, octave)

    def spell(self, style: AccidentalStyle = AccidentalStyle.UNICODE) -> str:
        """Human-readable name, e.g. 'E♭', 'Eb' or 'ees'."""
        if style is AccidentalStyle.DUTCH:
            return f"{self.name.name.lower()}{format_accidental(self.accidental, style)}"
        return f"{self.name.name}{format_accidental(self.accidental, style)}"

    @classmethod
    def parse(cls, text: str) -> Pitch:
        """
        Parse a letter plus accidental, like 'C', 'F#', 'Bb', 'Ex', 'E♭', 'cis', 'bes'.
        """
        text = text.strip()
        if not text:
            raise ValueError("Empty pitch spelling")
        return cls(NoteName.parse(text[0]), parse_accidental(text[1:]))

    def __str__(self) -> str:
        return self.spell()

    def __repr__(self) -> str:
        return f"Pitch(NoteName.{self.name.name}, {self.accidental})"


@dataclass(frozen=True)
class Note:
    """
    A Pitch in a specific octave.

    The octave counter only changes at the B/C boundary: stepping from B up
    to C adds one, stepping from C down to B removes one. Octaves below 0
    are not representable.
    """

    pitch: Pitch
    octave: int

    def __post_init__(self) -> None:
        if self.octave < 0:
            raise OctaveUnderflowError(f"Octave must be >= 0, got {self.octave}")

    @property
    def name(self) -> NoteName:
        return self.pitch.name

    @property
    def accidental(self) -> Accidental:
        return self.pitch.accidental

    @property
    def chromatic_index(self) -> int:
        """Semitones above C in octave 0. Not reduced modulo 12."""
        return self.octave * 12 + self.pitch.name.natural_semitone + self.pitch.accidental

    def step_forward(self, semitones: int = 0) -> Note:
        """Next letter name, `semitones` above. B -> C moves up an octave."""
        octave = self.octave + 1 if self.name is NoteName.B else self.octave
        return Note(self.pitch.step_forward(semitones), octave)

    def step_backward(self, semitones: int = 0) -> Note:
        """
        Previous letter name, `semitones` below. C -> B moves down an octave.

        Raises:
            OctaveUnderflowError: When stepping down from C in octave 0
        """
        octave = self.octave
        if self.name is NoteName.C:
            if octave == 0:
                raise OctaveUnderflowError(f"Cannot step below {self}: octave would be -1")
            octave -= 1
        return Note(self.pitch.step_backward(semitones), octave)

    def leap(self, interval: Interval | Tritone) -> Note:
        """Spell the note an interval above this one."""
        steps = interval.diatonic_steps
        note = self
        for _ in range(steps):
            note = note.step_forward()
        return Note(Pitch(note.name, note.accidental + interval.size), note.octave)

    def fall(self, interval: Interval | Tritone) -> Note:
        """Spell the note an interval below this one."""
        steps = interval.diatonic_steps
        note = self
        for _ in range(steps):
            note = note.step_backward()
        return Note(Pitch(note.name, note.accidental - interval.size), note.octave)

    def spell(self, style: AccidentalStyle = AccidentalStyle.UNICODE) -> str:
        """Human-readable name with octave, e.g. 'E♭4'."""
        return f"{self.pitch.spell(style)}{self.octave}"

    @classmethod
    def parse(cls, text: str) -> Note:
        """Parse a pitch spelling followed by an octave, like 'C4', 'Eb5', 'fis3'."""
        match = _NOTE_SPELLING.match(text.strip())
        if match is None:
            raise ValueError(f"Expected a pitch followed by an octave number, got: {text}")
        spelling, octave = match.groups()
        return cls(Pitch.parse(spelling), int(octave))

    def __str__(self) -> str:
        return self.spell()

    def __repr__(self) -> str:
        return f"Note({self.pitch!r}, {self.octave})"


def pitch(name: NoteName | str, accidental: Accidental = NATURAL) -> Pitch:
    """Build a pitch from a letter name and accidental count."""
    if isinstance(name, str):
        name = NoteName.parse(name)
    return Pitch(name, accidental)


def at_octave(p: Pitch, octave: int) -> Note:
    """Place a pitch in an octave."""
    return Note(p, octave)


def note(spelling: str, octave: int = DEFAULT_OCTAVE) -> Note:
    """
    Build a note from a pitch spelling and an octave.

    Examples:
        note("c") = C4
        note("cis", 5) = C♯5
        note("Eb", 3) = E♭3
    """
    return Pitch.parse(spelling).at_octave(octave)


# Shorthand table of the 21 single-accidental spellings: c, cis, ces, d, ...
PITCHES: dict[str, Pitch] = {
    Pitch(name, accidental).spell(AccidentalStyle.DUTCH): Pitch(name, accidental)
    for name in NoteName
    for accidental in (NATURAL, 1, -1)
}
