"""
Scale loader - discovers and loads scale definitions.

Scale definitions can come from:
1. Built-in library (shipped with package)
2. Project scales (user's project/scales directory)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from chuk_mcp_spelling.models.scale import ScaleDefinition, ScaleMetadata

logger = logging.getLogger(__name__)


class ScaleLoader:
    """
    Discovers and loads scale definitions.

    Definitions are loaded from YAML files in the library and project directories.
    Project scales override library scales with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the scale loader.

        Args:
            library_path: Path to built-in scale library
            project_path: Path to project scales directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, ScaleDefinition] = {}

    def list_scales(self) -> list[ScaleMetadata]:
        """
        List all available scale definitions.

        Returns scales from both library and project, with project
        scales taking precedence.
        """
        scales: dict[str, ScaleMetadata] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                definition = self._load_scale_file(path)
                if definition:
                    scales[definition.name] = ScaleMetadata.from_definition(definition)

        return sorted(scales.values(), key=lambda s: s.name)

    def get_scale(self, name: str) -> ScaleDefinition | None:
        """
        Get a scale definition by name.

        Project scales take precedence over library scales.

        Args:
            name: Scale name

        Returns:
            ScaleDefinition if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            path = directory / f"{name}.yaml"
            if path.exists():
                definition = self._load_scale_file(path)
                if definition:
                    self._cache[name] = definition
                    return definition

        return None

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a library scale to the project for customization.

        Args:
            name: Scale name

        Returns:
            Path to copied file, or None if not found
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        library_file = self.library_path / f"{name}.yaml"
        if not library_file.exists():
            return None

        self.project_path.mkdir(parents=True, exist_ok=True)

        dest_file = self.project_path / f"{name}.yaml"
        if dest_file.exists():
            raise ValueError(f"Scale already exists in project: {name}")

        dest_file.write_text(library_file.read_text(encoding="utf-8"), encoding="utf-8")
        logger.info("Copied scale %s to %s", name, dest_file)

        # Invalidate cache
        self._cache.pop(name, None)

        return dest_file

    def _load_scale_file(self, path: Path) -> ScaleDefinition | None:
        """Load a scale definition from a YAML file, or None if it is unusable."""
        # pydantic's ValidationError is a ValueError
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
            return self._parse_scale(data, default_name=path.stem)
        except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
            logger.warning("Skipping scale file %s: %s", path, e)
            return None

    def _parse_scale(self, data: dict[str, Any], default_name: str) -> ScaleDefinition:
        """Parse a scale definition from YAML data."""
        if not isinstance(data, dict):
            raise TypeError(f"Expected a mapping, got {type(data).__name__}")

        name = data.get("name", default_name)
        if name != default_name:
            raise ValueError(f"Scale name '{name}' does not match its file name")

        return ScaleDefinition(
            name=name,
            description=data.get("description", ""),
            intervals=[str(i) for i in data.get("intervals", [])],
            tags=data.get("tags", []),
        )

    def set_project_path(self, project_path: Path | None) -> None:
        """Point the loader at a different project scales directory."""
        self.project_path = project_path
        self.clear_cache()

    def clear_cache(self) -> None:
        """Clear the scale cache."""
        self._cache.clear()
