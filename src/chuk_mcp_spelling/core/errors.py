"""
Exception types for the spelling core.

All of them derive from ValueError so callers that already catch
ValueError around parsing keep working.
"""


class SpellingError(ValueError):
    """Base class for errors raised by the spelling core."""


class IntervalError(SpellingError):
    """A quality was combined with an interval number from the wrong family."""


class AmbiguousIntervalError(SpellingError):
    """A measurement was requested that depends on an undecided spelling."""


class OctaveUnderflowError(SpellingError):
    """A note would fall below octave 0."""


class ScaleError(SpellingError):
    """An interval set breaks the one-interval-per-number rule."""
