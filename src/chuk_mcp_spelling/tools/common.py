"""
Argument parsing shared by the MCP tools.

Tool arguments arrive as strings; these turn them into core values and
raise ValueError with a standardized message when they don't parse.
"""

from __future__ import annotations

from chuk_mcp_spelling.constants import ErrorMessages
from chuk_mcp_spelling.core import Interval, Note, Pitch, Tritone, parse_interval


def parse_note_arg(text: str) -> Note:
    try:
        return Note.parse(text)
    except ValueError as e:
        raise ValueError(ErrorMessages.INVALID_NOTE.format(note=text)) from e


def parse_root_arg(text: str, octave: int) -> Note:
    try:
        root = Pitch.parse(text)
    except ValueError as e:
        raise ValueError(ErrorMessages.INVALID_PITCH.format(pitch=text)) from e
    return root.at_octave(octave)


def parse_interval_arg(text: str) -> Interval | Tritone:
    try:
        return parse_interval(text)
    except ValueError as e:
        raise ValueError(ErrorMessages.INVALID_INTERVAL.format(interval=text)) from e
