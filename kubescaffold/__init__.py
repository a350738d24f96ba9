"""kubescaffold -- computes fully resolved scaffold files for Kubernetes API projects.

Project-wide facts (domain, repo, version, boilerplate, multi-group layout)
are injected into each scaffold file through capability setters that never
clobber values a caller already set.  Each file then resolves its own output
path and template body, and the driver renders it with Jinja2.

Quick usage::

    from kubescaffold import ProjectFile, Scaffold
    from kubescaffold.resource import Resource
    from kubescaffold.webhook import Config, webhook_files

    project = ProjectFile(domain="example.com", repo="github.com/acme/proj")
    scaffold = Scaffold(project, boilerplate="// Copyright 2026 Acme.")
    files = webhook_files(
        Resource(group="apps", version="v1", kind="Foo"),
        Config(type="mutating", operations=["create", "update"]),
    )
    result = await scaffold.execute(*files)
"""

from kubescaffold.config import Options, ProjectFile, TrackedResource
from kubescaffold.input import IfExistsAction, Input, InvalidInputError, apply_defaults, set_if_empty
from kubescaffold.scaffold import RenderedFile, Scaffold, ScaffoldError, ScaffoldResult
from kubescaffold.templates import TemplateRenderer, TemplateRenderError
from kubescaffold.writer import FileExistsConflictError, FileWriter, WriteOutcome

__all__ = [
    "FileExistsConflictError",
    "FileWriter",
    "IfExistsAction",
    "Input",
    "InvalidInputError",
    "Options",
    "ProjectFile",
    "RenderedFile",
    "Scaffold",
    "ScaffoldError",
    "ScaffoldResult",
    "TemplateRenderError",
    "TemplateRenderer",
    "TrackedResource",
    "WriteOutcome",
    "apply_defaults",
    "set_if_empty",
]
