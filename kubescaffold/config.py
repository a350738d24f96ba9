"""Project configuration.

``ProjectFile`` is the deserialised PROJECT file: the project-wide facts
that every scaffolded artifact is enriched with.  It is loaded once per run
and frozen, so artifacts may be built independently against the same
instance.  ``Options`` carries the per-invocation settings that do not live
in the PROJECT file.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class TrackedResource(BaseModel):
    """A resource previously scaffolded into the project."""

    model_config = ConfigDict(frozen=True)

    group: str = Field(default="")
    version: str = Field(default="")
    kind: str = Field(default="")


class ProjectFile(BaseModel):
    """Project-wide facts read from the PROJECT file.

    Every field is optional and defaults to empty / ``False``.  The
    multi-group flag is stored under the ``multigroup`` key on disk.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    version: str = Field(default="", description="Project version")
    domain: str = Field(default="", description="Domain used for API groups")
    repo: str = Field(default="", description="Go module path of the project root")
    resources: tuple[TrackedResource, ...] = Field(
        default=(), description="Scaffolded resources, tracked from project version 2"
    )
    multi_group: bool = Field(
        default=False, alias="multigroup", description="Whether the project has more than one group"
    )

    def resource_groups(self) -> frozenset[str]:
        """Return the distinct groups of the scaffolded resources."""
        return frozenset(r.group for r in self.resources)

    def has_resource(self, group: str, version: str, kind: str) -> bool:
        """Whether ``group/version, Kind=kind`` is already tracked."""
        return TrackedResource(group=group, version=version, kind=kind) in self.resources

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the project file as JSON, omitting empty fields.

        Args:
            path: Destination file.  Parent directories are created.

        Returns:
            The path that was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(
            self.model_dump_json(indent=2, by_alias=True, exclude_defaults=True),
            encoding="utf-8",
        )
        return target

    @classmethod
    def load(cls, path: Path) -> "ProjectFile":
        """Load a project file from JSON.

        Args:
            path: The JSON file to read.

        Returns:
            A validated, frozen ``ProjectFile``.
        """
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)


class Options(BaseModel):
    """Per-invocation scaffolding options."""

    boilerplate_path: str = Field(default="", description="Path to the boilerplate header file")
    project_path: str = Field(default="", description="Path to the PROJECT file")

    @classmethod
    def from_env(cls) -> "Options":
        """Build ``Options`` from environment variables.

        Recognised variables (all optional):
            KUBESCAFFOLD_BOILERPLATE_PATH, KUBESCAFFOLD_PROJECT_PATH.
        """
        return cls(
            boilerplate_path=os.environ.get("KUBESCAFFOLD_BOILERPLATE_PATH", ""),
            project_path=os.environ.get("KUBESCAFFOLD_PROJECT_PATH", ""),
        )
