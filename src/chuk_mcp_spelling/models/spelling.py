"""
Spelling models - the serialized view of spelled notes and scales.

These are what the MCP tools return: plain data, no arithmetic.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_spelling.core.accidentals import AccidentalStyle
from chuk_mcp_spelling.core.formatting import note_to_code
from chuk_mcp_spelling.core.pitch import Note
from chuk_mcp_spelling.core.scale import Scale, spell


class SpelledNote(BaseModel):
    """A single spelled note."""

    letter: str = Field(description="Letter name (C-B)")
    accidental: int = Field(description="Signed accidental count (-1 = flat, 1 = sharp)")
    octave: int = Field(ge=0, description="Octave number (C4 = middle C)")
    display: str = Field(description="Display form, e.g. 'E♭4'")
    ascii: str = Field(description="ASCII form, e.g. 'Eb4'")
    code: str = Field(description="Code literal, e.g. 'note(\"ees\", 4)'")

    model_config = {"frozen": True}

    @classmethod
    def from_note(cls, note: Note) -> SpelledNote:
        return cls(
            letter=note.name.name,
            accidental=note.accidental,
            octave=note.octave,
            display=note.spell(),
            ascii=note.spell(AccidentalStyle.ASCII),
            code=note_to_code(note),
        )


class SpelledScale(BaseModel):
    """A spelled scale or chord."""

    name: str = Field(description="Scale name, e.g. 'E♭ major'")
    root: SpelledNote
    intervals: list[str] = Field(description="Interval short names in spelling order")
    notes: list[SpelledNote] = Field(default_factory=list)
    pitch_classes: list[int] = Field(
        default_factory=list,
        description="Sorted chromatic pitch classes (0-11)",
    )

    model_config = {"frozen": True}

    @classmethod
    def from_scale(cls, scale: Scale, name: str | None = None) -> SpelledScale:
        notes = spell(scale)
        return cls(
            name=name or str(scale),
            root=SpelledNote.from_note(scale.root),
            intervals=[str(i) for i in sorted(scale.intervals)],
            notes=[SpelledNote.from_note(n) for n in notes],
            pitch_classes=sorted({n.pitch.pitch_class for n in notes}),
        )
