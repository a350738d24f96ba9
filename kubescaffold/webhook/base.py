"""Common base for webhook scaffold files."""

from __future__ import annotations

from pathlib import Path
from typing import cast

from pydantic import Field

from ..input import Input, InvalidInputError, RequiresValidation
from ..resource import Resource
from ..templates import load_template
from . import naming
from .config import Config

TEMPLATE_DIR = Path(__file__).parent / "templates"


class WebhookFile(Input, Config, RequiresValidation):
    """A scaffold file belonging to one webhook type of one resource kind.

    Holds the resource and webhook configuration every webhook file needs.
    ``resolve_names`` fills in the derived fields the templates read.
    """

    resource: Resource | None = Field(default=None, description="Resource the webhook serves")
    resource_package: str = Field(default="", description="Go package of the resource's API group")
    builder_name: str = Field(default="", description="Webhook builder identifier")
    mutating: bool = Field(default=False)

    def validate_file(self) -> None:
        if self.resource is None:
            raise InvalidInputError(f"{type(self).__name__}: resource cannot be empty")
        self.resource.validate_resource()
        self.validate_config()

    def resolve_names(self) -> Resource:
        """Validate, then derive package, mode and builder name from the inputs."""
        self.validate_file()
        resource = cast(Resource, self.resource)

        self.resource_package = naming.resource_package(resource, self.repo)
        self.mutating = self.is_mutating
        self.type = self.type.lower()
        self.builder_name = naming.builder_name(self, resource.kind)
        return resource


def read_template(name: str) -> str:
    """Raw body of the webhook template *name*."""
    return load_template(TEMPLATE_DIR, name)
