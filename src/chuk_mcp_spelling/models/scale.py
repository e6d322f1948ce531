"""
Scale definition models - validated interval sets loaded from YAML.

A definition names a scale and lists its intervals by short name:

    name: harmonic_minor
    description: Natural minor with a raised seventh
    intervals: [P1, M2, m3, P4, P5, m6, M7]
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_spelling.core.intervals import Interval
from chuk_mcp_spelling.core.pitch import Note
from chuk_mcp_spelling.core.scale import IntervalScale, check_interval_numbers


class ScaleDefinition(BaseModel):
    """A named interval set."""

    name: str = Field(description="Scale identifier (matches the YAML file name)")
    description: str = Field(default="", description="Human-readable description")
    intervals: list[str] = Field(min_length=1, description="Interval short names, e.g. 'm3'")
    tags: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}

    @field_validator("intervals")
    @classmethod
    def validate_intervals(cls, v: list[str]) -> list[str]:
        """Every entry must parse, with no interval number repeated."""
        check_interval_numbers(Interval.parse(name) for name in v)
        return v

    def interval_set(self) -> frozenset[Interval]:
        return frozenset(Interval.parse(name) for name in self.intervals)

    def to_scale(self, root: Note) -> IntervalScale:
        """Place this definition on a root note."""
        return IntervalScale(root, self.interval_set(), self.name.replace("_", " "))


class ScaleMetadata(BaseModel):
    """Lightweight scale listing entry."""

    name: str
    description: str = ""
    size: int = Field(description="Number of notes")
    tags: list[str] = Field(default_factory=list)

    @classmethod
    def from_definition(cls, definition: ScaleDefinition) -> ScaleMetadata:
        return cls(
            name=definition.name,
            description=definition.description,
            size=len(definition.intervals),
            tags=definition.tags,
        )
