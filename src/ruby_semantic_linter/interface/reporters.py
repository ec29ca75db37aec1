"""Interface for diagnostic reporting."""

from typing import Iterable, Protocol

import typer

from ruby_semantic_linter.domain.entities import Diagnostic

LEVEL_COLORS: dict[str, str] = {
    "error": typer.colors.RED,
    "warning": typer.colors.YELLOW,
    "info": typer.colors.BLUE,
}


class DiagnosticReporter(Protocol):
    """Protocol for reporting diagnostics."""

    def report(self, diagnostics: Iterable[Diagnostic]) -> int:
        """Print diagnostics; return how many were printed."""
        ...

    def summary(self, count: int, files: int) -> None:
        """Print the closing line for a run over ``files`` files."""
        ...


class TerminalReporter(DiagnosticReporter):
    """One ``file:line:column: level: message`` line per diagnostic."""

    def __init__(self, color: bool = True) -> None:
        self.color = color

    def format(self, diagnostic: Diagnostic) -> str:
        level = diagnostic.level
        if self.color:
            level = typer.style(level, fg=LEVEL_COLORS.get(level), bold=level == "error")
        return f"{diagnostic.location()}: {level}: {diagnostic.message}"

    def report(self, diagnostics: Iterable[Diagnostic]) -> int:
        count = 0
        for diagnostic in diagnostics:
            typer.echo(self.format(diagnostic))
            if diagnostic.code:
                typer.echo(f"    {diagnostic.code.strip()}")
            count += 1
        return count

    def summary(self, count: int, files: int) -> None:
        if count:
            typer.echo(typer.style(f"{count} problem(s) in {files} file(s)", fg=typer.colors.RED))
        else:
            typer.echo(typer.style(f"No problems in {files} file(s)", fg=typer.colors.GREEN))
