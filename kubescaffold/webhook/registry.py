"""Explicit registry of webhook builder names.

Generated code registers each builder into its package's ``Builders`` map
under ``builder_name``.  Two builders with the same name in the same package
would silently replace each other at runtime, so the registry refuses the
second claim at scaffold time.  A registry lives for one scaffolding run.
"""

from __future__ import annotations

from ..resource import Resource
from . import naming
from .config import Config


class DuplicateBuilderError(Exception):
    """Raised when a builder name is already taken in a webhook package."""

    def __init__(self, name: str, package: str) -> None:
        self.name = name
        self.package = package
        super().__init__(f"builder {name!r} is already registered in package {package!r}")


class BuilderRegistry:
    """Tracks the builder names claimed in each webhook package."""

    def __init__(self) -> None:
        self._names: dict[str, set[str]] = {}

    def register(self, config: Config, resource: Resource) -> str:
        """Claim the builder name for *config* and *resource*.

        Returns:
            The builder name.

        Raises:
            DuplicateBuilderError: The name is already taken in the package.
        """
        package = naming.webhook_dir(config, resource)
        name = naming.builder_name(config, resource.kind)
        taken = self._names.setdefault(package, set())
        if name in taken:
            raise DuplicateBuilderError(name, package)
        taken.add(name)
        return name

    def names(self, package: str) -> list[str]:
        """Sorted builder names registered in *package*."""
        return sorted(self._names.get(package, ()))

    def __contains__(self, name: object) -> bool:
        return any(name in names for names in self._names.values())

    def __len__(self) -> int:
        return sum(len(names) for names in self._names.values())
