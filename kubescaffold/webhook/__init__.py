"""Admission webhook scaffold files.

Quick usage::

    from kubescaffold.resource import Resource
    from kubescaffold.webhook import BuilderRegistry, Config, webhook_files

    registry = BuilderRegistry()
    files = webhook_files(
        Resource(group="ship", version="v1beta1", kind="Frigate"),
        Config(type="mutating", operations=["create", "update"]),
        registry,
    )
"""

from __future__ import annotations

from ..resource import Resource
from .admission_builder import AdmissionWebhookBuilder
from .admission_handler import AdmissionHandler
from .admission_webhooks import AdmissionWebhooks
from .base import WebhookFile
from .config import Config
from .registry import BuilderRegistry, DuplicateBuilderError


def webhook_files(
    resource: Resource,
    config: Config,
    registry: BuilderRegistry | None = None,
) -> list[WebhookFile]:
    """Return the files that add one webhook to a server.

    When *registry* is given the builder name is claimed first, so a second
    webhook with the same name in the same package is rejected before any
    file is built.
    """
    if registry is not None:
        registry.register(config, resource)
    return [
        cls(resource=resource, **config.model_dump())
        for cls in (AdmissionWebhooks, AdmissionWebhookBuilder, AdmissionHandler)
    ]


__all__ = [
    "AdmissionHandler",
    "AdmissionWebhookBuilder",
    "AdmissionWebhooks",
    "BuilderRegistry",
    "Config",
    "DuplicateBuilderError",
    "WebhookFile",
    "webhook_files",
]
