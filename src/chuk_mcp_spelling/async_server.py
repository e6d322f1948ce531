#!/usr/bin/env python3
"""
Async Spelling MCP Server using chuk-mcp-server

This server provides MCP tools for spelling notes, intervals, chords and
scales by letter name and accidental rather than by semitone alone.

The server provides tools for:
- Describing intervals and spelling a note an interval away
- Spelling chords on a root
- Spelling the seven modes and library scales (harmonic minor, pentatonics, ...)
- Comparing spellings across octaves
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_spelling.scales import ScaleLoader
from chuk_mcp_spelling.tools import register_scale_tools, register_spelling_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-spelling")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
SCALES_DIR = BASE_PATH / "scales"
SCALES_LIBRARY_PATH = Path(__file__).parent / "scales" / "library"

scale_loader = ScaleLoader(
    library_path=SCALES_LIBRARY_PATH,
    project_path=SCALES_DIR,
)

# Register all tools
spelling_tools = register_spelling_tools(mcp)
scale_tools = register_scale_tools(mcp, scale_loader)

# Export tool functions for direct access
music_describe_interval = spelling_tools["music_describe_interval"]
music_leap = spelling_tools["music_leap"]
music_fall = spelling_tools["music_fall"]
music_spell_chord = spelling_tools["music_spell_chord"]

music_list_scales = scale_tools["music_list_scales"]
music_spell_scale = scale_tools["music_spell_scale"]
music_spell_named_scale = scale_tools["music_spell_named_scale"]
music_compare_scales = scale_tools["music_compare_scales"]
music_copy_scale_to_project = scale_tools["music_copy_scale_to_project"]

logger.info("CHUK Spelling MCP Server initialized")
