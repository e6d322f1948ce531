"""
Formatting helpers - display strings and code literals for spelled notes.

Code literals are Python expressions built on the note() helper, used to
write test fixtures and interop snippets:

    pitch_to_code(Pitch(NoteName.C, 1))  -> 'note("cis", 4)'
    note_to_code(note("bes", 3))         -> 'note("bes", 3)'
"""

from __future__ import annotations

from collections.abc import Iterable

from chuk_mcp_spelling.constants import DEFAULT_OCTAVE

from .accidentals import AccidentalStyle
from .pitch import Note, Pitch


def format_pitch(pitch: Pitch, style: AccidentalStyle = AccidentalStyle.UNICODE) -> str:
    return pitch.spell(style)


def format_note(note: Note, style: AccidentalStyle = AccidentalStyle.UNICODE) -> str:
    return note.spell(style)


def format_notes(notes: Iterable[Note], style: AccidentalStyle = AccidentalStyle.UNICODE) -> str:
    """Comma-separated display string, e.g. 'E♭4, F4, G4'."""
    return ", ".join(n.spell(style) for n in notes)


def pitch_to_code(pitch: Pitch) -> str:
    """Code literal for a pitch, placed in the default octave."""
    return f'note("{pitch.spell(AccidentalStyle.DUTCH)}", {DEFAULT_OCTAVE})'


def note_to_code(note: Note) -> str:
    """Code literal for a note in its own octave."""
    return f'note("{note.pitch.spell(AccidentalStyle.DUTCH)}", {note.octave})'


def notes_to_code(notes: Iterable[Note]) -> str:
    """List literal of note_to_code() entries."""
    return "[" + ", ".join(note_to_code(n) for n in notes) + "]"
