"""Tests for FileWriter (kubescaffold.writer).

Covers:
- New files are written with parent directories
- Skip / Error / Overwrite policies on existing files
"""

from __future__ import annotations

from pathlib import Path

import pytest

from kubescaffold.input import IfExistsAction
from kubescaffold.scaffold import RenderedFile
from kubescaffold.writer import FileExistsConflictError, FileWriter, WriteOutcome


pytestmark = pytest.mark.unit


def _rendered(action: IfExistsAction, content: str = "new\n") -> RenderedFile:
    return RenderedFile(path="pkg/webhook/webhooks.go", content=content, if_exists_action=action)


@pytest.fixture
def existing(project_root: Path) -> Path:
    path = project_root / "pkg" / "webhook" / "webhooks.go"
    path.parent.mkdir(parents=True)
    path.write_text("old\n", encoding="utf-8")
    return path


class TestFileWriter:
    @pytest.mark.asyncio
    async def test_writes_new_file(self, project_root: Path):
        writer = FileWriter(project_root)
        outcome = await writer.write(_rendered(IfExistsAction.ERROR))
        assert outcome is WriteOutcome.WRITTEN
        assert (project_root / "pkg/webhook/webhooks.go").read_text(encoding="utf-8") == "new\n"

    @pytest.mark.asyncio
    async def test_skip_keeps_existing(self, project_root: Path, existing: Path):
        outcome = await FileWriter(project_root).write(_rendered(IfExistsAction.SKIP))
        assert outcome is WriteOutcome.SKIPPED
        assert existing.read_text(encoding="utf-8") == "old\n"

    @pytest.mark.asyncio
    async def test_error_raises_conflict(self, project_root: Path, existing: Path):
        with pytest.raises(FileExistsConflictError) as exc_info:
            await FileWriter(project_root).write(_rendered(IfExistsAction.ERROR))
        assert exc_info.value.path == existing
        assert existing.read_text(encoding="utf-8") == "old\n"

    @pytest.mark.asyncio
    async def test_overwrite_replaces(self, project_root: Path, existing: Path):
        outcome = await FileWriter(project_root).write(_rendered(IfExistsAction.OVERWRITE))
        assert outcome is WriteOutcome.OVERWRITTEN
        assert existing.read_text(encoding="utf-8") == "new\n"

    @pytest.mark.unit
    def test_target(self, project_root: Path):
        writer = FileWriter(project_root)
        assert writer.target(_rendered(IfExistsAction.SKIP)) == project_root / "pkg/webhook/webhooks.go"
