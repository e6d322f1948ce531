"""
Pydantic models for the spelling system.

This module provides:
- SpelledNote: Serialized spelled note
- SpelledScale: Serialized spelled scale or chord
- ScaleDefinition: Named interval set loaded from YAML
- ScaleMetadata: Listing entry for a scale definition
"""

from chuk_mcp_spelling.models.scale import ScaleDefinition, ScaleMetadata
from chuk_mcp_spelling.models.spelling import SpelledNote, SpelledScale

__all__ = [
    "ScaleDefinition",
    "ScaleMetadata",
    "SpelledNote",
    "SpelledScale",
]
