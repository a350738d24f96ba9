"""Shared pytest fixtures for the kubescaffold test suite.

Provides reusable fixtures for:
- Project files and options
- Resources and webhook configurations
- A quiet console and a writer rooted in a temporary directory
"""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from kubescaffold.config import Options, ProjectFile, TrackedResource
from kubescaffold.resource import Resource
from kubescaffold.scaffold import Scaffold
from kubescaffold.webhook.config import Config
from kubescaffold.writer import FileWriter


BOILERPLATE = "/*\nCopyright 2026 Acme.\n*/"


@pytest.fixture
def boilerplate() -> str:
    return BOILERPLATE


# ---------------------------------------------------------------------------
# Project context
# ---------------------------------------------------------------------------

@pytest.fixture
def project_file() -> ProjectFile:
    """A version 2 project with two resources in one group."""
    return ProjectFile(
        version="2",
        domain="example.com",
        repo="github.com/acme/proj",
        resources=(
            TrackedResource(group="ship", version="v1beta1", kind="Frigate"),
            TrackedResource(group="ship", version="v1", kind="Destroyer"),
        ),
    )


@pytest.fixture
def options() -> Options:
    return Options(boilerplate_path="hack/boilerplate.go.txt", project_path="PROJECT")


# ---------------------------------------------------------------------------
# Resources & webhook configs
# ---------------------------------------------------------------------------

@pytest.fixture
def apps_resource() -> Resource:
    """A resource in the built-in ``apps`` group."""
    return Resource(group="apps", version="v1", kind="Foo")


@pytest.fixture
def custom_resource() -> Resource:
    """A resource in a user-defined group."""
    return Resource(group="ship", version="v1beta1", kind="Frigate")


@pytest.fixture
def mutating_config() -> Config:
    return Config(server="default", type="mutating", operations=["create", "update"])


@pytest.fixture
def validating_config() -> Config:
    return Config(server="default", type="validating", operations=["create", "update"])


# ---------------------------------------------------------------------------
# Driver
# ---------------------------------------------------------------------------

@pytest.fixture
def quiet_console() -> Console:
    """A console that records output instead of printing it."""
    return Console(file=io.StringIO(), width=120, record=True)


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary project root for written files (auto-cleanup)."""
    root = tmp_path / "proj"
    root.mkdir()
    yield root


@pytest.fixture
def scaffold(project_file, options, project_root, quiet_console) -> Scaffold:
    """A Scaffold writing below ``project_root`` with a quiet console."""
    return Scaffold(
        project_file,
        options,
        boilerplate=BOILERPLATE,
        writer=FileWriter(project_root),
        output=quiet_console,
    )
