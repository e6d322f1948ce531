"""
Spelling tools - MCP tools for single intervals and chords.

Tools for describing intervals, spelling a note an interval away,
and spelling chords on a root.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_spelling.constants import DEFAULT_OCTAVE, Direction, ErrorMessages
from chuk_mcp_spelling.core import TRITONE, Chord, ChordQuality, Tritone
from chuk_mcp_spelling.models import SpelledNote, SpelledScale
from chuk_mcp_spelling.tools.common import parse_interval_arg, parse_note_arg, parse_root_arg

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_spelling_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register interval and chord spelling tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_describe_interval(interval: str) -> str:
        """
        Describe an interval by short name.

        Args:
            interval: Short name like 'P5', 'm3', 'A4', 'd7', or 'TT'

        Returns:
            JSON string with size in semitones, diatonic steps and inversion

        Example:
            music_describe_interval(interval="A4")
        """
        try:
            parsed = parse_interval_arg(interval)

            if isinstance(parsed, Tritone):
                return json.dumps(
                    {
                        "status": "success",
                        "interval": {
                            "short": str(TRITONE),
                            "name": "tritone",
                            "size": TRITONE.size,
                            "diatonic_steps": None,
                            "spellings": [
                                str(TRITONE.as_augmented_fourth()),
                                str(TRITONE.as_diminished_fifth()),
                            ],
                        },
                    }
                )

            return json.dumps(
                {
                    "status": "success",
                    "interval": {
                        "short": str(parsed),
                        "name": parsed.name,
                        "quality": parsed.quality.name.lower(),
                        "size": parsed.size,
                        "diatonic_steps": parsed.diatonic_steps,
                        "inversion": str(parsed.invert()),
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to describe interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_describe_interval"] = music_describe_interval

    def _move(note: str, interval: str, direction: Direction) -> str:
        start = parse_note_arg(note)
        parsed = parse_interval_arg(interval)

        if direction == "up":
            result = start.leap(parsed)
        elif direction == "down":
            result = start.fall(parsed)
        else:
            return json.dumps(
                {
                    "status": "error",
                    "message": ErrorMessages.INVALID_DIRECTION.format(direction=direction),
                }
            )

        return json.dumps(
            {
                "status": "success",
                "from": SpelledNote.from_note(start).model_dump(),
                "interval": str(parsed),
                "direction": direction,
                "result": SpelledNote.from_note(result).model_dump(),
            }
        )

    @mcp.tool  # type: ignore[arg-type]
    async def music_leap(note: str, interval: str, direction: Direction = "up") -> str:
        """
        Spell the note an interval above or below another note.

        The letter name is chosen by the interval number and the accidental
        by its size, so C4 up a diminished fourth is F♭4, not E4.

        Args:
            note: Starting note like 'C4', 'Eb4', 'fis3'
            interval: Short interval name like 'P5', 'm3', 'A4'
            direction: 'up' or 'down'

        Returns:
            JSON string with the starting and resulting notes

        Example:
            music_leap(note="B4", interval="m2")
        """
        try:
            return _move(note, interval, direction)
        except Exception as e:
            logger.exception("Failed to leap")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_leap"] = music_leap

    @mcp.tool  # type: ignore[arg-type]
    async def music_fall(note: str, interval: str) -> str:
        """
        Spell the note an interval below another note.

        Args:
            note: Starting note like 'C4', 'Eb4', 'fis3'
            interval: Short interval name like 'P5', 'm3', 'A4'

        Returns:
            JSON string with the starting and resulting notes

        Example:
            music_fall(note="C4", interval="M3")
        """
        try:
            return _move(note, interval, "down")
        except Exception as e:
            logger.exception("Failed to fall")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_fall"] = music_fall

    @mcp.tool  # type: ignore[arg-type]
    async def music_spell_chord(
        root: str,
        quality: str = "major",
        octave: int = DEFAULT_OCTAVE,
    ) -> str:
        """
        Spell a chord on a root.

        Args:
            root: Root pitch like 'C', 'Eb', 'F#'
            quality: Quality name or symbol ('major', 'm7', 'dim7', 'half-diminished 7')
            octave: Octave of the root (default 4)

        Returns:
            JSON string with the spelled chord

        Example:
            music_spell_chord(root="C", quality="dim7")
        """
        try:
            chord = Chord(parse_root_arg(root, octave), ChordQuality.parse(quality))
            spelled = SpelledScale.from_scale(chord, f"{chord.root.pitch} {chord.quality.name}")

            return json.dumps({"status": "success", "chord": spelled.model_dump()})
        except Exception as e:
            logger.exception("Failed to spell chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_spell_chord"] = music_spell_chord

    return tools
