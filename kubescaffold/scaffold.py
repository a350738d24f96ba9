"""Scaffolding driver.

``Scaffold`` holds the project context for one run and turns scaffold files
into rendered files:

1. inject project context into every capability the file declares,
2. validate the file when it asks for validation,
3. let the file compute its ``Input`` (path, template body, policy),
4. render the template body with the file as the context,
5. hand the result to the writer (``execute`` only).

Steps 1-4 (``build``) are synchronous and free of I/O; each file is built
independently against the same frozen ``ProjectFile``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict
from rich.console import Console
from rich.table import Table

from .config import Options, ProjectFile
from .input import File, IfExistsAction, InvalidInputError, RequiresValidation, apply_defaults
from .templates import TemplateRenderer, TemplateRenderError
from .writer import FileExistsConflictError, FileWriter, WriteOutcome

console = Console()

_OUTCOME_MARKS: dict[WriteOutcome, str] = {
    WriteOutcome.WRITTEN: "[green]+[/green]",
    WriteOutcome.OVERWRITTEN: "[yellow]~[/yellow]",
    WriteOutcome.SKIPPED: "[dim]=[/dim]",
}


class ScaffoldError(Exception):
    """Raised when a scaffold file cannot be turned into a rendered file."""

    def __init__(self, file: str, message: str) -> None:
        self.file = file
        super().__init__(f"{file}: {message}")


class RenderedFile(BaseModel):
    """A fully resolved file, ready for the writer."""

    model_config = ConfigDict(frozen=True)

    path: str
    content: str
    if_exists_action: IfExistsAction = IfExistsAction.SKIP


@dataclass
class ScaffoldResult:
    """Outcome of one ``Scaffold.execute`` run."""

    outcomes: dict[str, WriteOutcome] = field(default_factory=dict)
    errors: list[tuple[str, Exception]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def paths(self, outcome: WriteOutcome) -> list[str]:
        """Paths that ended with *outcome*, in run order."""
        return [path for path, o in self.outcomes.items() if o == outcome]


class Scaffold:
    """Builds and writes scaffold files against one project's context."""

    # Errors that abort a single file; anything else propagates untouched.
    FILE_ERRORS = (
        InvalidInputError,
        TemplateRenderError,
        ScaffoldError,
        FileExistsConflictError,
    )

    def __init__(
        self,
        project: ProjectFile | None = None,
        options: Options | None = None,
        *,
        boilerplate: str = "",
        renderer: TemplateRenderer | None = None,
        writer: FileWriter | None = None,
        output: Console | None = None,
    ) -> None:
        self.project = project or ProjectFile()
        self.options = options or Options()
        self.boilerplate = boilerplate
        self.renderer = renderer or TemplateRenderer()
        self.writer = writer or FileWriter()
        self.console = output or console

    # -- Core --------------------------------------------------------------

    def apply_defaults(self, file: Any) -> None:
        """Inject this run's project context into *file*."""
        apply_defaults(
            file,
            domain=self.project.domain,
            repo=self.project.repo,
            boilerplate=self.boilerplate,
            boilerplate_path=self.options.boilerplate_path,
            version=self.project.version,
            project_path=self.options.project_path,
            multi_group=self.project.multi_group,
        )

    def build(self, file: File) -> RenderedFile:
        """Enrich, validate, resolve and render *file*.

        Raises:
            InvalidInputError: The file failed validation.
            ScaffoldError: The file resolved to an empty path.
            TemplateRenderError: The template references a missing field.
        """
        self.apply_defaults(file)
        if isinstance(file, RequiresValidation):
            file.validate_file()

        spec = file.get_input()
        if not spec.path:
            raise ScaffoldError(type(file).__name__, "no output path was resolved")
        if not spec.template_body:
            raise ScaffoldError(spec.path, "template body is empty")

        return RenderedFile(
            path=spec.path,
            content=self.renderer.render_file(file),
            if_exists_action=spec.if_exists_action,
        )

    # -- Execution ---------------------------------------------------------

    async def execute(self, *files: File, fail_fast: bool = True) -> ScaffoldResult:
        """Build and write every file in order.

        Args:
            files: Scaffold files to generate.
            fail_fast: Re-raise the first file error.  When ``False`` the
                error is recorded in the result and the remaining files are
                still generated.

        Returns:
            Write outcome per path, plus any recorded errors.
        """
        result = ScaffoldResult()
        for file in files:
            label = getattr(file, "path", "") or type(file).__name__
            try:
                rendered = self.build(file)
                outcome = await self.writer.write(rendered)
            except self.FILE_ERRORS as exc:
                self.console.print(f"  [red]x[/red] {label}: {exc}")
                if fail_fast:
                    raise
                result.errors.append((label, exc))
                continue

            result.outcomes[rendered.path] = outcome
            self.console.print(f"  {_OUTCOME_MARKS[outcome]} {rendered.path}")

        self._print_summary(result)
        return result

    def _print_summary(self, result: ScaffoldResult) -> None:
        table = Table(title="Scaffold summary", show_header=True, header_style="bold")
        table.add_column("Outcome")
        table.add_column("Files", justify="right")
        for outcome in WriteOutcome:
            table.add_row(outcome.value, str(len(result.paths(outcome))))
        table.add_row("failed", str(len(result.errors)), style="red" if result.errors else None)
        self.console.print(table)
