#!/usr/bin/env python3
"""
Example: Spelling modes, library scales and the circle of fifths.

Every note is chosen by letter name first and accidental second, so keys
come out with one letter each and the expected key signature.

Usage:
    python examples/spell_scales.py
"""

from chuk_mcp_spelling.core import (
    Interval,
    Major,
    Mode,
    format_notes,
    note,
    notes_to_code,
    spell,
)
from chuk_mcp_spelling.scales import ScaleLoader


def main() -> None:
    """Demonstrate scale spelling."""
    print("CHUK Spelling Demo")
    print("=" * 40)
    print()

    # Circle of fifths from C flat to C sharp
    print("Major keys around the circle of fifths:")
    root = note("ces", 4)
    for _ in range(15):
        scale = Major(root)
        print(f"  {str(scale):<10} {format_notes(spell(scale))}")
        root = root.leap(Interval.P5)
    print()

    # The seven modes on D
    print("Modes on D (derived Lydian -> Locrian):")
    for mode in Mode:
        scale = Major(note("d", 4), mode)
        print(f"  {mode.value:<11} {format_notes(spell(scale))}")
    print()

    # Library scales
    loader = ScaleLoader()
    print("Library scales on A:")
    for meta in loader.list_scales():
        definition = loader.get_scale(meta.name)
        if definition is None:
            continue
        notes = spell(definition.to_scale(note("a", 3)))
        print(f"  {meta.name:<17} {format_notes(notes)}")
    print()

    # Code literals for fixtures
    print("E flat major as code:")
    print(f"  {notes_to_code(spell(Major(note('ees', 4))))}")


if __name__ == "__main__":
    main()
