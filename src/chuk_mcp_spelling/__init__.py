"""
CHUK Spelling - correctly spelled intervals, scales and modes.

Notes are spelled by letter name and accidental, not by semitone alone,
so E♭ major comes out as E♭ F G A♭ B♭ C D rather than D♯ F G G♯ A♯ C D.
"""

__version__ = "0.1.0"
