"""Scaffolds the admission handler for a webhook builder."""

from __future__ import annotations

import posixpath

from pydantic import Field

from ..input import Input
from . import naming
from .base import WebhookFile, read_template

ADMISSION_HANDLER_TEMPLATE = read_template("admission_handler.go.j2")


class AdmissionHandler(WebhookFile):
    """Adds a handler skeleton appended to the package's ``HandlerMap``."""

    handler_name: str = Field(default="", description="Go type name of the handler")

    def get_input(self) -> Input:
        resource = self.resolve_names()
        ops = "".join(op.lower().title() for op in self.operations)
        self.handler_name = f"{resource.kind}{ops}Handler"

        if not self.path:
            self.path = posixpath.join(
                naming.webhook_dir(self, resource),
                naming.operations_file_name(self, "handler"),
            )
        self.template_body = ADMISSION_HANDLER_TEMPLATE
        return self.to_input()
