"""Scaffolds the per-package file declaring the builder and handler maps."""

from __future__ import annotations

import posixpath

from ..input import IfExistsAction, Input
from . import naming
from .base import WebhookFile, read_template

WEBHOOKS_TEMPLATE = read_template("webhooks.go.j2")


class AdmissionWebhooks(WebhookFile):
    """Declares ``Builders`` and ``HandlerMap`` for one webhook package.

    Every builder and handler of the package registers into these maps, so
    the file is written once and left alone afterwards.
    """

    def get_input(self) -> Input:
        resource = self.resolve_names()
        if not self.path:
            self.path = posixpath.join(naming.webhook_dir(self, resource), "webhooks.go")
        self.template_body = WEBHOOKS_TEMPLATE
        self.if_exists_action = IfExistsAction.SKIP
        return self.to_input()
