"""Pure naming helpers for webhook scaffold files.

Each function is deterministic in its inputs so builder names and paths are
stable across runs.  Builder names end up as map keys in generated code.
"""

from __future__ import annotations

import posixpath

from ..resource import Resource
from .config import Config

# Built-in API groups, resolved to the upstream k8s.io/api package.
CORE_GROUPS = frozenset(
    {
        "admission",
        "admissionregistration",
        "apps",
        "auditregistration",
        "apiextensions",
        "authentication",
        "authorization",
        "autoscaling",
        "batch",
        "certificates",
        "coordination",
        "core",
        "events",
        "extensions",
        "imagepolicy",
        "networking",
        "node",
        "metrics",
        "policy",
        "rbac.authorization",
        "scheduling",
        "setting",
        "storage",
    }
)

ADMISSION_API_ALIAS = "admissionregistrationv1beta1"


def is_core_group(group: str) -> bool:
    return group in CORE_GROUPS


def resource_package(resource: Resource, repo: str) -> str:
    """Go package holding the API versions of *resource*'s group."""
    if is_core_group(resource.group):
        return posixpath.join("k8s.io", "api")
    return posixpath.join(repo, "pkg", "apis")


def builder_name(config: Config, kind: str) -> str:
    """Identifier of a webhook builder: ``<type>-<ops...>-<kind>``.

    >>> builder_name(Config(type="mutating", operations=["create", "update"]), "foo")
    'mutating-create-update-foo'
    """
    ops = "-".join(op.lower() for op in config.operations)
    return f"{config.type.lower()}-{ops}-{kind.lower()}"


def operations_parameter_string(operations: list[str]) -> str:
    """Render *operations* as a Go argument list of admission operation constants."""
    return ", ".join(f"{ADMISSION_API_ALIAS}.{op.lower().title()}" for op in operations)


def webhook_dir(config: Config, resource: Resource) -> str:
    """Directory of the Go package holding one webhook type for one kind."""
    return posixpath.join(
        "pkg",
        "webhook",
        f"{config.server}_server",
        resource.kind.lower(),
        config.type.lower(),
    )


def operations_file_name(config: Config, suffix: str) -> str:
    """File name built from the operation list, e.g. ``create_update_webhook.go``."""
    ops = "_".join(op.lower() for op in config.operations)
    return f"{ops}_{suffix}.go"
