"""Scaffolds a webhook builder registering one admission webhook."""

from __future__ import annotations

import posixpath

from pydantic import Field

from ..input import Input
from . import naming
from .base import WebhookFile, read_template

ADMISSION_BUILDER_TEMPLATE = read_template("admission_builder.go.j2")


class AdmissionWebhookBuilder(WebhookFile):
    """Adds a webhook builder for a resource to its webhook server.

    The generated ``init`` registers the builder under ``builder_name`` in
    the package's ``Builders`` map.
    """

    operations_parameter_string: str = Field(default="")

    def get_input(self) -> Input:
        resource = self.resolve_names()
        self.operations_parameter_string = naming.operations_parameter_string(self.operations)

        if not self.path:
            self.path = posixpath.join(
                naming.webhook_dir(self, resource),
                naming.operations_file_name(self, "webhook"),
            )
        self.template_body = ADMISSION_BUILDER_TEMPLATE
        return self.to_input()
