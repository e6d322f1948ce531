"""
Scale tools - MCP tools for spelling modes and library scales.

Tools for listing scales, spelling a mode or a named library scale on a
root, and comparing two spellings across octaves.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_spelling.constants import DEFAULT_OCTAVE, ErrorMessages, SuccessMessages
from chuk_mcp_spelling.core import (
    MODE_INTERVALS,
    Major,
    Mode,
    equivalent,
    pitch_class_set,
    spell,
)
from chuk_mcp_spelling.models import SpelledScale
from chuk_mcp_spelling.scales import ScaleLoader
from chuk_mcp_spelling.tools.common import parse_root_arg

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_scale_tools(mcp: ChukMCPServer, loader: ScaleLoader) -> dict[str, Any]:
    """
    Register scale spelling tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: The scale library loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_list_scales() -> str:
        """
        List the seven modes and the scales in the library.

        Returns:
            JSON string with modes (and their intervals) and library scales

        Example:
            music_list_scales()
        """
        try:
            library = loader.list_scales()

            return json.dumps(
                {
                    "status": "success",
                    "modes": [
                        {
                            "name": mode.value,
                            "intervals": [str(i) for i in sorted(MODE_INTERVALS[mode])],
                        }
                        for mode in Mode
                    ],
                    "scales": [s.model_dump() for s in library],
                    "count": len(Mode) + len(library),
                }
            )
        except Exception as e:
            logger.exception("Failed to list scales")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_list_scales"] = music_list_scales

    @mcp.tool  # type: ignore[arg-type]
    async def music_spell_scale(
        root: str,
        mode: str = "major",
        octave: int = DEFAULT_OCTAVE,
    ) -> str:
        """
        Spell a mode of the major scale on a root.

        Args:
            root: Root pitch like 'C', 'Eb', 'F#', 'cis'
            mode: Mode name ('ionian', 'dorian', ... or 'major' / 'minor')
            octave: Octave of the root (default 4)

        Returns:
            JSON string with the spelled scale

        Example:
            music_spell_scale(root="Eb", mode="major")
        """
        try:
            scale = Major(parse_root_arg(root, octave), Mode.parse(mode))
            spelled = SpelledScale.from_scale(scale)

            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.SCALE_SPELLED.format(name=spelled.name),
                    "scale": spelled.model_dump(),
                }
            )
        except Exception as e:
            logger.exception("Failed to spell scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_spell_scale"] = music_spell_scale

    @mcp.tool  # type: ignore[arg-type]
    async def music_spell_named_scale(
        root: str,
        name: str,
        octave: int = DEFAULT_OCTAVE,
    ) -> str:
        """
        Spell a library scale (harmonic minor, pentatonics, ...) on a root.

        Args:
            root: Root pitch like 'A', 'Bb'
            name: Library scale name (see music_list_scales)
            octave: Octave of the root (default 4)

        Returns:
            JSON string with the spelled scale

        Example:
            music_spell_named_scale(root="A", name="harmonic_minor")
        """
        try:
            definition = loader.get_scale(name)
            if definition is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.SCALE_NOT_FOUND.format(name=name)}
                )

            scale = definition.to_scale(parse_root_arg(root, octave))
            spelled = SpelledScale.from_scale(scale)

            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.SCALE_SPELLED.format(name=spelled.name),
                    "scale": spelled.model_dump(),
                    "description": definition.description,
                }
            )
        except Exception as e:
            logger.exception("Failed to spell named scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_spell_named_scale"] = music_spell_named_scale

    @mcp.tool  # type: ignore[arg-type]
    async def music_compare_scales(
        root_a: str,
        mode_a: str,
        root_b: str,
        mode_b: str,
    ) -> str:
        """
        Compare two mode spellings, ignoring octave and order.

        'same_spelling' requires identical letter names and accidentals;
        'same_pitch_classes' only requires the same sounding pitches.

        Args:
            root_a: Root pitch of the first scale
            mode_a: Mode of the first scale
            root_b: Root pitch of the second scale
            mode_b: Mode of the second scale

        Returns:
            JSON string with both comparisons

        Example:
            music_compare_scales(root_a="C", mode_a="ionian", root_b="D", mode_b="dorian")
        """
        try:
            notes_a = spell(Major(parse_root_arg(root_a, DEFAULT_OCTAVE), Mode.parse(mode_a)))
            notes_b = spell(Major(parse_root_arg(root_b, DEFAULT_OCTAVE), Mode.parse(mode_b)))

            return json.dumps(
                {
                    "status": "success",
                    "same_spelling": equivalent(notes_a, notes_b),
                    "same_pitch_classes": pitch_class_set(notes_a) == pitch_class_set(notes_b),
                }
            )
        except Exception as e:
            logger.exception("Failed to compare scales")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_compare_scales"] = music_compare_scales

    @mcp.tool  # type: ignore[arg-type]
    async def music_copy_scale_to_project(name: str) -> str:
        """
        Copy a library scale into the project for customization.

        Args:
            name: Library scale name

        Returns:
            JSON string with the path of the copy

        Example:
            music_copy_scale_to_project(name="harmonic_minor")
        """
        try:
            path = loader.copy_to_project(name)
            if path is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.SCALE_NOT_FOUND.format(name=name)}
                )

            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.SCALE_COPIED.format(name=name, path=path),
                    "path": str(path),
                }
            )
        except Exception as e:
            logger.exception("Failed to copy scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_copy_scale_to_project"] = music_copy_scale_to_project

    return tools
