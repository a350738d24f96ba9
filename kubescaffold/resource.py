"""API resource descriptors consumed by the artifact builders."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field

from .input import InvalidInputError

_VERSION_RE = re.compile(r"^v\d+(?:(?:alpha|beta)\d+)?$")
_GROUP_RE = re.compile(r"^[a-z0-9]+(?:[.-][a-z0-9]+)*$")
_KIND_RE = re.compile(r"^[A-Z][A-Za-z0-9]*$")


class Resource(BaseModel):
    """A Kubernetes API resource: group, version and kind.

    Builders only read resources, so instances are frozen.
    """

    model_config = ConfigDict(frozen=True)

    group: str = Field(default="", description="API group, e.g. 'apps' or 'ship'")
    version: str = Field(default="", description="API version, e.g. 'v1beta1'")
    kind: str = Field(default="", description="Kind, e.g. 'Frigate'")

    def validate_resource(self) -> None:
        """Raise ``InvalidInputError`` if group, version or kind is malformed."""
        if not self.group:
            raise InvalidInputError("group cannot be empty")
        if not _GROUP_RE.match(self.group):
            raise InvalidInputError(
                f"group must be lowercase alphanumeric with '.' or '-' separators, got {self.group!r}"
            )
        if not self.version:
            raise InvalidInputError("version cannot be empty")
        if not _VERSION_RE.match(self.version):
            raise InvalidInputError(
                f"version must match {_VERSION_RE.pattern} (e.g. v1 or v1beta1), got {self.version!r}"
            )
        if not self.kind:
            raise InvalidInputError("kind cannot be empty")
        if not _KIND_RE.match(self.kind):
            raise InvalidInputError(
                f"kind must start with an uppercase letter and be alphanumeric, got {self.kind!r}"
            )

    @property
    def import_alias(self) -> str:
        """Go import alias for the resource's package, e.g. ``appsv1``."""
        return f"{self.group.replace('.', '')}{self.version}"
