"""Webhook configuration shared by every webhook scaffold file."""

from __future__ import annotations

import re

from pydantic import BaseModel, Field

from ..input import InvalidInputError

MUTATING = "mutating"
VALIDATING = "validating"

WEBHOOK_TYPES = (MUTATING, VALIDATING)

# Verbs accepted by admissionregistration/v1beta1 rules.
OPERATIONS = ("create", "update", "delete", "connect")

# Server names become a directory component, so they must be a DNS-1123 label.
_SERVER_RE = re.compile(r"^[a-z0-9](?:[-a-z0-9]*[a-z0-9])?$")


class Config(BaseModel):
    """Which server a webhook belongs to, its type and the operations it intercepts."""

    server: str = Field(default="default", description="Webhook server name")
    type: str = Field(default="", description="Webhook type: 'mutating' or 'validating'")
    operations: list[str] = Field(
        default_factory=list, description="Operations the webhook intercepts, e.g. ['create']"
    )

    @property
    def is_mutating(self) -> bool:
        """Whether the (case-insensitive) type selects a mutating webhook."""
        return self.type.lower() == MUTATING

    def validate_config(self) -> None:
        """Raise ``InvalidInputError`` for an unknown type or a bad operation list."""
        if not self.server:
            raise InvalidInputError("webhook server name cannot be empty")
        if not _SERVER_RE.match(self.server):
            raise InvalidInputError(
                f"webhook server name must be a lowercase DNS label, got {self.server!r}"
            )
        if self.type.lower() not in WEBHOOK_TYPES:
            raise InvalidInputError(
                f"webhook type must be one of {', '.join(WEBHOOK_TYPES)}, got {self.type!r}"
            )
        if not self.operations:
            raise InvalidInputError("webhook operations cannot be empty")
        seen: set[str] = set()
        for op in self.operations:
            lowered = op.lower()
            if lowered not in OPERATIONS:
                raise InvalidInputError(
                    f"unknown webhook operation {op!r}, expected one of {', '.join(OPERATIONS)}"
                )
            if lowered in seen:
                raise InvalidInputError(f"duplicate webhook operation {op!r}")
            seen.add(lowered)
