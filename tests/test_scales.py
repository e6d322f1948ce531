"""
Tests for scale and chord assembly.

Tests cover:
- Mode derivation by substitution (scale.py)
- Spelling of modes and arbitrary interval sets (scale.py)
- Chord qualities and chord spelling (chord.py)
- Octave-independent comparisons (sets.py)
"""

import pytest

from chuk_mcp_spelling.core import (
    LYDIAN_INTERVALS,
    MODE_INTERVALS,
    MODE_SUBSTITUTIONS,
    Chord,
    ChordQuality,
    Interval,
    IntervalScale,
    Major,
    Mode,
    NoteName,
    ScaleError,
    equivalent,
    letter_names,
    note,
    pitch,
    pitch_class_set,
    pitch_set,
    spell,
    substitute,
)

WHITE_KEYS = frozenset(pitch(name) for name in NoteName)


class TestModeDerivation:
    """Tests for the Lydian -> Locrian substitution chain."""

    def test_lydian_reference(self) -> None:
        """Lydian is the all-raised reference set."""
        assert LYDIAN_INTERVALS == {
            Interval.P1,
            Interval.M2,
            Interval.M3,
            Interval.A4,
            Interval.P5,
            Interval.M6,
            Interval.M7,
        }

    def test_chain_order(self) -> None:
        """Modes are derived in circle-of-fifths order."""
        assert [mode for mode, _ in MODE_SUBSTITUTIONS] == [
            Mode.IONIAN,
            Mode.MIXOLYDIAN,
            Mode.DORIAN,
            Mode.AEOLIAN,
            Mode.PHRYGIAN,
            Mode.LOCRIAN,
        ]
        assert list(Mode)[0] == Mode.LYDIAN

    def test_each_mode_differs_by_one_interval(self) -> None:
        """Every mode is its predecessor with a single swap."""
        modes = list(Mode)
        for previous, current in zip(modes, modes[1:]):
            assert len(MODE_INTERVALS[previous] - MODE_INTERVALS[current]) == 1
            assert len(MODE_INTERVALS[current] - MODE_INTERVALS[previous]) == 1

    def test_mode_interval_sets(self) -> None:
        """Spot-check derived sets."""
        assert Interval.P4 in MODE_INTERVALS[Mode.IONIAN]
        assert Interval.A4 not in MODE_INTERVALS[Mode.IONIAN]
        assert MODE_INTERVALS[Mode.AEOLIAN] == {
            Interval.P1,
            Interval.M2,
            Interval.m3,
            Interval.P4,
            Interval.P5,
            Interval.m6,
            Interval.m7,
        }
        assert MODE_INTERVALS[Mode.LOCRIAN] == {
            Interval.P1,
            Interval.m2,
            Interval.m3,
            Interval.P4,
            Interval.d5,
            Interval.m6,
            Interval.m7,
        }

    def test_every_mode_has_seven_numbers(self) -> None:
        """Substitution never drops or duplicates a number."""
        for intervals in MODE_INTERVALS.values():
            assert len(intervals) == 7
            assert len({i.number for i in intervals}) == 7

    def test_substitute_matches_number_only(self) -> None:
        """The replaced interval is found by number, whatever its quality."""
        result = substitute(frozenset({Interval.P1, Interval.A4}), Interval.d4)
        assert result == {Interval.P1, Interval.d4}

    def test_substitute_missing_number_is_noop(self) -> None:
        """No interval with that number leaves the set unchanged."""
        intervals = frozenset({Interval.P1, Interval.M3})
        assert substitute(intervals, Interval.m7) is intervals

    def test_reference_not_mutated(self) -> None:
        """Deriving modes leaves the Lydian set alone."""
        assert Interval.A4 in LYDIAN_INTERVALS
        assert MODE_INTERVALS[Mode.LYDIAN] is LYDIAN_INTERVALS

    def test_parse(self) -> None:
        """Mode names and aliases."""
        assert Mode.parse("major") == Mode.IONIAN
        assert Mode.parse("Minor") == Mode.AEOLIAN
        assert Mode.parse("natural_minor") == Mode.AEOLIAN
        assert Mode.parse("dorian") == Mode.DORIAN
        with pytest.raises(ValueError):
            Mode.parse("bebop")


class TestSpell:
    """Tests for spelling scales."""

    def test_c_major(self) -> None:
        """C major has no accidentals."""
        assert spell(Major(note("c", 4))) == [
            note("c", 4),
            note("d", 4),
            note("e", 4),
            note("f", 4),
            note("g", 4),
            note("a", 4),
            note("b", 4),
        ]

    def test_e_flat_major(self) -> None:
        """E♭ major crosses into octave 5 at C."""
        notes = spell(Major(note("ees", 4)))
        assert notes == [
            note("ees", 4),
            note("f", 4),
            note("g", 4),
            note("aes", 4),
            note("bes", 4),
            note("c", 5),
            note("d", 5),
        ]
        assert pitch_set(notes) == {
            pitch("E", -1),
            pitch("F"),
            pitch("G"),
            pitch("A", -1),
            pitch("B", -1),
            pitch("C"),
            pitch("D"),
        }

    def test_d_sharp_major_uses_double_sharp(self) -> None:
        """D♯ major needs C𝄪 rather than respelling to D."""
        notes = spell(Major(note("dis", 4)))
        assert note("cisis", 5) in notes
        assert len(set(letter_names(notes))) == 7

    def test_circle_of_fifths(self) -> None:
        """From C♭ major to C♯ major, each fifth adds one sharp or removes one flat."""
        root = note("ces", 4)
        roots = []

        for step in range(15):
            notes = spell(Major(root))
            accidentals = [n.accidental for n in notes]

            assert len(set(letter_names(notes))) == 7
            assert sum(accidentals) == step - 7
            if step <= 7:
                assert set(accidentals) <= {-1, 0}
            else:
                assert set(accidentals) <= {0, 1}

            roots.append(root.pitch)
            root = root.leap(Interval.P5)

        assert roots[0] == pitch("C", -1)
        assert roots[6] == pitch("F")
        assert roots[7] == pitch("C")
        assert roots[12] == pitch("B")
        assert roots[14] == pitch("C", 1)

    def test_circle_of_fifths_keys(self) -> None:
        """Spot-check key signatures around the circle."""
        assert pitch_set(spell(Major(note("ges")))) == {
            pitch("G", -1),
            pitch("A", -1),
            pitch("B", -1),
            pitch("C", -1),
            pitch("D", -1),
            pitch("E", -1),
            pitch("F"),
        }
        assert pitch_set(spell(Major(note("fis")))) == {
            pitch("F", 1),
            pitch("G", 1),
            pitch("A", 1),
            pitch("B"),
            pitch("C", 1),
            pitch("D", 1),
            pitch("E", 1),
        }

    def test_modes_of_c_major(self) -> None:
        """Each mode on its degree of C major spells the white keys."""
        roots = {
            Mode.LYDIAN: "f",
            Mode.IONIAN: "c",
            Mode.MIXOLYDIAN: "g",
            Mode.DORIAN: "d",
            Mode.AEOLIAN: "a",
            Mode.PHRYGIAN: "e",
            Mode.LOCRIAN: "b",
        }
        for mode, root in roots.items():
            assert pitch_set(spell(Major(note(root), mode))) == WHITE_KEYS, mode

    def test_dorian_on_d(self) -> None:
        """D dorian in order."""
        assert spell(Major(note("d", 4), Mode.DORIAN)) == [
            note("d", 4),
            note("e", 4),
            note("f", 4),
            note("g", 4),
            note("a", 4),
            note("b", 4),
            note("c", 5),
        ]

    def test_locrian_on_b(self) -> None:
        """B locrian crosses the octave on its second note."""
        notes = spell(Major(note("b", 4), Mode.LOCRIAN))
        assert notes[0] == note("b", 4)
        assert notes[1] == note("c", 5)
        assert notes[4] == note("f", 5)

    def test_scale_str(self) -> None:
        """Scale display names."""
        assert str(Major(note("ees"))) == "E♭ major"
        assert str(Major(note("d"), Mode.DORIAN)) == "D dorian"


class TestIntervalScale:
    """Tests for arbitrary interval sets."""

    def test_harmonic_minor(self) -> None:
        """A harmonic minor raises G to G♯."""
        scale = IntervalScale(
            note("a", 4),
            frozenset(
                {
                    Interval.P1,
                    Interval.M2,
                    Interval.m3,
                    Interval.P4,
                    Interval.P5,
                    Interval.m6,
                    Interval.M7,
                }
            ),
            "harmonic minor",
        )
        notes = spell(scale)
        assert notes[-1] == note("gis", 5)
        assert str(scale) == "A harmonic minor"

    def test_tie_breaks_by_diatonic_steps(self) -> None:
        """Equal sizes are ordered by letter distance: A4 before d5."""
        scale = IntervalScale(note("c"), frozenset({Interval.d5, Interval.P1, Interval.A4}))
        assert spell(scale) == [note("c"), note("fis"), note("ges")]

    def test_duplicate_numbers_rejected(self) -> None:
        """Only one interval per number."""
        with pytest.raises(ScaleError):
            IntervalScale(note("c"), frozenset({Interval.P1, Interval.m3, Interval.M3}))

    def test_accepts_any_iterable(self) -> None:
        """Intervals are frozen on construction."""
        scale = IntervalScale(note("c"), [Interval.P1, Interval.P5])  # type: ignore[arg-type]
        assert isinstance(scale.intervals, frozenset)


class TestChord:
    """Tests for chord qualities and spelling."""

    def test_major_triad(self) -> None:
        """C major triad."""
        assert spell(Chord(note("c"), ChordQuality.MAJOR)) == [note("c"), note("e"), note("g")]

    def test_minor_triad_on_e_flat(self) -> None:
        """E♭ minor triad has G♭, not F♯."""
        assert spell(Chord(note("ees"), ChordQuality.MINOR)) == [
            note("ees"),
            note("ges"),
            note("bes"),
        ]

    def test_diminished_seventh(self) -> None:
        """C diminished seventh ends on B𝄫."""
        assert spell(Chord(note("c"), ChordQuality.DIMINISHED_7)) == [
            note("c"),
            note("ees"),
            note("ges"),
            note("beses"),
        ]

    def test_b_major_crosses_octave(self) -> None:
        """B major triad continues into octave 5."""
        assert spell(Chord(note("b", 4), ChordQuality.MAJOR)) == [
            note("b", 4),
            note("dis", 5),
            note("fis", 5),
        ]

    def test_chord_tones(self) -> None:
        """Third, fifth and seventh accessors."""
        assert ChordQuality.DOMINANT_7.third == Interval.M3
        assert ChordQuality.DOMINANT_7.seventh == Interval.m7
        assert ChordQuality.HALF_DIMINISHED_7.fifth == Interval.d5
        assert ChordQuality.MAJOR.seventh is None
        assert ChordQuality.SUS4.third is None

    def test_parse(self) -> None:
        """Parse by symbol or name."""
        assert ChordQuality.parse("m7") == ChordQuality.MINOR_7
        assert ChordQuality.parse("dim7") == ChordQuality.DIMINISHED_7
        assert ChordQuality.parse("half-diminished 7") == ChordQuality.HALF_DIMINISHED_7
        assert ChordQuality.parse("major") == ChordQuality.MAJOR
        with pytest.raises(ValueError):
            ChordQuality.parse("13sus")

    def test_str(self) -> None:
        """Chord symbols."""
        assert str(Chord(note("c"), ChordQuality.DIMINISHED_7)) == "Cdim7"
        assert str(Chord(note("fis"), ChordQuality.MINOR)) == "F♯m"


class TestSets:
    """Tests for octave-independent comparisons."""

    def test_pitch_set_drops_octave(self) -> None:
        """C4 and C5 collapse to one pitch."""
        assert pitch_set([note("c", 4), note("c", 5)]) == {pitch("C")}

    def test_pitch_class_set_merges_enharmonics(self) -> None:
        """E♭ and D♯ share a pitch class."""
        assert pitch_class_set([note("ees"), note("dis")]) == {3}
        assert len(pitch_set([note("ees"), note("dis")])) == 2

    def test_equivalent_modes(self) -> None:
        """C ionian and D dorian spell the same pitches."""
        assert equivalent(
            spell(Major(note("c"))),
            spell(Major(note("d"), Mode.DORIAN)),
        )

    def test_enharmonic_keys_not_equivalent(self) -> None:
        """C♭ major and B major sound alike but are spelled differently."""
        c_flat = spell(Major(note("ces")))
        b = spell(Major(note("b")))
        assert not equivalent(c_flat, b)
        assert pitch_class_set(c_flat) == pitch_class_set(b)
