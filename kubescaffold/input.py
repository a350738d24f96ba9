"""Scaffold file inputs and the capability defaulting protocol.

An ``Input`` describes one file to generate: where it goes, what template
body renders it, what to do when the file already exists, and the project
context (domain, repo, boilerplate, ...) threaded into its template.

Project context is injected through small capability traits.  A descriptor
declares a capability by inheriting the matching mixin; ``apply_defaults``
only calls the setters a descriptor declares.  Every string setter follows
set-if-empty semantics so re-running the generator never clobbers values a
caller already customised.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field


class InvalidInputError(Exception):
    """Raised when a scaffold file or resource fails validation."""


class IfExistsAction(IntEnum):
    """What the writer does when the target file already exists."""

    SKIP = 0
    """Leave the existing file alone and move on."""

    ERROR = 1
    """Abort, surfacing the conflict to the caller."""

    OVERWRITE = 2
    """Truncate and replace the existing file."""


def set_if_empty(current: str, proposed: str) -> str:
    """Return *current* when it is non-empty, otherwise *proposed*."""
    return current if current else proposed


# ---------------------------------------------------------------------------
# Capability traits
# ---------------------------------------------------------------------------


class Domain(ABC):
    """Accepts the API domain."""

    @abstractmethod
    def set_domain(self, domain: str) -> None: ...


class Repo(ABC):
    """Accepts the Go module / repository path."""

    @abstractmethod
    def set_repo(self, repo: str) -> None: ...


class Boilerplate(ABC):
    """Accepts the boilerplate header text."""

    @abstractmethod
    def set_boilerplate(self, boilerplate: str) -> None: ...


class BoilerplatePath(ABC):
    """Accepts the path of the boilerplate header file."""

    @abstractmethod
    def set_boilerplate_path(self, boilerplate_path: str) -> None: ...


class Version(ABC):
    """Accepts the project version."""

    @abstractmethod
    def set_version(self, version: str) -> None: ...


class ProjectPath(ABC):
    """Accepts the project file location."""

    @abstractmethod
    def set_project_path(self, project_path: str) -> None: ...


class MultiGroup(ABC):
    """Accepts the multi-group flag.  Always overwrites."""

    @abstractmethod
    def set_multi_group(self, multi_group: bool) -> None: ...


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------


class Input(
    BaseModel,
    Domain,
    Repo,
    Boilerplate,
    BoilerplatePath,
    Version,
    ProjectPath,
    MultiGroup,
):
    """The resolved description of one file to scaffold.

    Builders subclass ``Input`` and fill in ``path`` and ``template_body``
    from their own fields in ``get_input``.  Every other field is project
    context, normally supplied by ``apply_defaults``.
    """

    model_config = ConfigDict(validate_assignment=True)

    path: str = Field(default="", description="File to write, relative to the project root")
    if_exists_action: IfExistsAction = Field(default=IfExistsAction.SKIP)
    template_body: str = Field(default="", description="Jinja2 template rendered into the file")
    boilerplate: str = Field(default="", description="Contents of the boilerplate header")
    boilerplate_path: str = Field(default="", description="Path to the boilerplate header file")
    version: str = Field(default="", description="Project version")
    domain: str = Field(default="", description="Domain for the APIs")
    repo: str = Field(default="", description="Go module path of the project root")
    project_path: str = Field(default="", description="Relative path to the project root")
    multi_group: bool = Field(default=False, description="Multi-group flag from the PROJECT file")

    def set_domain(self, domain: str) -> None:
        self.domain = set_if_empty(self.domain, domain)

    def set_repo(self, repo: str) -> None:
        self.repo = set_if_empty(self.repo, repo)

    def set_boilerplate(self, boilerplate: str) -> None:
        self.boilerplate = set_if_empty(self.boilerplate, boilerplate)

    def set_boilerplate_path(self, boilerplate_path: str) -> None:
        self.boilerplate_path = set_if_empty(self.boilerplate_path, boilerplate_path)

    def set_version(self, version: str) -> None:
        self.version = set_if_empty(self.version, version)

    def set_project_path(self, project_path: str) -> None:
        self.project_path = set_if_empty(self.project_path, project_path)

    def set_multi_group(self, multi_group: bool) -> None:
        self.multi_group = multi_group

    def to_input(self) -> Input:
        """Return a plain ``Input`` copy holding only the file-level fields."""
        return Input.model_validate(
            {name: getattr(self, name) for name in Input.model_fields}
        )


# ---------------------------------------------------------------------------
# File contracts
# ---------------------------------------------------------------------------


class File(ABC):
    """A scaffoldable file."""

    @abstractmethod
    def get_input(self) -> Input:
        """Compute path and template body, returning the resolved ``Input``."""


class RequiresValidation(File):
    """A scaffoldable file that validates its fields before building."""

    @abstractmethod
    def validate_file(self) -> None:
        """Raise ``InvalidInputError`` when the file's fields are unusable."""


def apply_defaults(
    file: object,
    *,
    domain: str = "",
    repo: str = "",
    boilerplate: str = "",
    boilerplate_path: str = "",
    version: str = "",
    project_path: str = "",
    multi_group: bool = False,
) -> None:
    """Inject project context into every capability *file* declares.

    Capabilities the file does not declare are skipped.  The multi-group
    flag is applied last since it is the only setter that overwrites.
    """
    if isinstance(file, Domain):
        file.set_domain(domain)
    if isinstance(file, Repo):
        file.set_repo(repo)
    if isinstance(file, Boilerplate):
        file.set_boilerplate(boilerplate)
    if isinstance(file, BoilerplatePath):
        file.set_boilerplate_path(boilerplate_path)
    if isinstance(file, Version):
        file.set_version(version)
    if isinstance(file, ProjectPath):
        file.set_project_path(project_path)
    if isinstance(file, MultiGroup):
        file.set_multi_group(multi_group)
