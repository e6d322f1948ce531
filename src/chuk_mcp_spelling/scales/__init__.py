"""
Scale library - named interval sets beyond the seven modes.

Definitions live as YAML files; project files override the built-in library.
"""

from chuk_mcp_spelling.scales.loader import ScaleLoader

__all__ = ["ScaleLoader"]
