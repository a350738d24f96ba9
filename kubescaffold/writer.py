"""Writes rendered scaffold files to disk, honouring their if-exists policy."""

from __future__ import annotations

import asyncio
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from .input import IfExistsAction

if TYPE_CHECKING:
    from .scaffold import RenderedFile


class FileExistsConflictError(Exception):
    """Raised when a file exists and its policy is ``IfExistsAction.ERROR``."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"{path} already exists")


class WriteOutcome(str, Enum):
    WRITTEN = "written"
    OVERWRITTEN = "overwritten"
    SKIPPED = "skipped"


class FileWriter:
    """Writes rendered files below a project root directory."""

    def __init__(self, root: str | Path = ".") -> None:
        self.root = Path(root)

    def target(self, rendered: RenderedFile) -> Path:
        """Absolute destination of *rendered*."""
        return self.root / rendered.path

    async def write(self, rendered: RenderedFile) -> WriteOutcome:
        """Write *rendered* according to its ``if_exists_action``.

        Raises:
            FileExistsConflictError: The file exists and the policy is ``ERROR``.
        """
        path = self.target(rendered)
        exists = await asyncio.to_thread(path.exists)
        if exists:
            if rendered.if_exists_action == IfExistsAction.SKIP:
                return WriteOutcome.SKIPPED
            if rendered.if_exists_action == IfExistsAction.ERROR:
                raise FileExistsConflictError(path)

        await asyncio.to_thread(_write_file, path, rendered.content)
        return WriteOutcome.OVERWRITTEN if exists else WriteOutcome.WRITTEN


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
