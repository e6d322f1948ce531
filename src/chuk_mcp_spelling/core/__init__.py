"""
Core spelling primitives - the Radix layer.

These are the pure value types everything else composes on:
- Interval: Quality applied to a perfect or imperfect interval number
- NoteName / Pitch / Note: Letter name, accidental, octave
- Scale / Major / IntervalScale: Interval sets on a root, spelled with spell()
- ChordQuality / Chord: Interval sets for chords
- Formatting and set helpers for display and comparison
"""

from chuk_mcp_spelling.core.accidentals import (
    DOUBLE_FLAT,
    DOUBLE_SHARP,
    FLAT,
    NATURAL,
    SHARP,
    Accidental,
    AccidentalStyle,
    format_accidental,
    parse_accidental,
)
from chuk_mcp_spelling.core.chord import Chord, ChordQuality
from chuk_mcp_spelling.core.errors import (
    AmbiguousIntervalError,
    IntervalError,
    OctaveUnderflowError,
    ScaleError,
    SpellingError,
)
from chuk_mcp_spelling.core.formatting import (
    format_note,
    format_notes,
    format_pitch,
    note_to_code,
    notes_to_code,
    pitch_to_code,
)
from chuk_mcp_spelling.core.intervals import (
    TRITONE,
    ImperfectNumber,
    Interval,
    PerfectNumber,
    Quality,
    Tritone,
    parse_interval,
)
from chuk_mcp_spelling.core.pitch import PITCHES, Note, NoteName, Pitch, at_octave, note, pitch
from chuk_mcp_spelling.core.scale import (
    LYDIAN_INTERVALS,
    MODE_INTERVALS,
    MODE_SUBSTITUTIONS,
    IntervalScale,
    Major,
    Mode,
    Scale,
    spell,
    substitute,
)
from chuk_mcp_spelling.core.sets import equivalent, letter_names, pitch_class_set, pitch_set

__all__ = [
    # Accidentals
    "Accidental",
    "AccidentalStyle",
    "NATURAL",
    "SHARP",
    "DOUBLE_SHARP",
    "FLAT",
    "DOUBLE_FLAT",
    "format_accidental",
    "parse_accidental",
    # Errors
    "SpellingError",
    "IntervalError",
    "AmbiguousIntervalError",
    "OctaveUnderflowError",
    "ScaleError",
    # Intervals
    "Quality",
    "PerfectNumber",
    "ImperfectNumber",
    "Interval",
    "Tritone",
    "TRITONE",
    "parse_interval",
    # Pitch
    "NoteName",
    "Pitch",
    "Note",
    "PITCHES",
    "pitch",
    "note",
    "at_octave",
    # Scale
    "Scale",
    "Mode",
    "Major",
    "IntervalScale",
    "LYDIAN_INTERVALS",
    "MODE_SUBSTITUTIONS",
    "MODE_INTERVALS",
    "substitute",
    "spell",
    # Chord
    "ChordQuality",
    "Chord",
    # Formatting
    "format_pitch",
    "format_note",
    "format_notes",
    "pitch_to_code",
    "note_to_code",
    "notes_to_code",
    # Sets
    "pitch_set",
    "pitch_class_set",
    "letter_names",
    "equivalent",
]
