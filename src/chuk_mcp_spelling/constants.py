"""
Constants for the spelling system.

No magic strings - defaults and standardized messages live here.
"""

from typing import Literal

# Octave used when a pitch has no register of its own (C4 = middle C)
DEFAULT_OCTAVE = 4

# Direction for single-interval tools
Direction = Literal["up", "down"]


class ErrorMessages:
    """Standardized error messages."""

    INVALID_NOTE = "Invalid note: '{note}'. Expected a spelling like 'C4', 'Eb4' or 'fis3'."
    INVALID_PITCH = "Invalid pitch: '{pitch}'. Expected a spelling like 'C', 'F#' or 'bes'."
    INVALID_INTERVAL = "Invalid interval: '{interval}'. Expected a short name like 'P5' or 'm3'."
    INVALID_DIRECTION = "Invalid direction: '{direction}'. Expected 'up' or 'down'."
    SCALE_NOT_FOUND = "Scale '{name}' not found."


class SuccessMessages:
    """Standardized success messages."""

    SCALE_SPELLED = "Spelled {name}."
    SCALE_COPIED = "Copied scale '{name}' to {path}."
