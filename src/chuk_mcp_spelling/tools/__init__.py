"""
MCP tool implementations.

Tools are organized by domain:
- spelling - Intervals, single leaps, chords
- scales - Modes, library scales, scale comparison
"""

from chuk_mcp_spelling.tools.scales import register_scale_tools
from chuk_mcp_spelling.tools.spelling import register_spelling_tools

__all__ = [
    "register_scale_tools",
    "register_spelling_tools",
]
