"""CLI entry points - Thin Controller using Typer."""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

import typer

from ruby_semantic_linter.domain.config import ConfigurationError, ConfigurationLoader
from ruby_semantic_linter.domain.definitions import Definition
from ruby_semantic_linter.domain.protocols import (
    ConstantResolverProtocol,
    NodeSourceProtocol,
    TelemetryPort,
)
from ruby_semantic_linter.interface.reporters import DiagnosticReporter
from ruby_semantic_linter.use_cases.analyze_tree import AnalyzeTreeUseCase, select_checks

# B008: avoid function call in default; use module-level singletons for Typer Options
_DIRECTORY_OPTION = typer.Option(None, "--directory", "-d", help="Directory searched for constant definitions")
_IGNORE_OPTION = typer.Option(None, "--ignore", help="Skip candidate files whose path contains this text")
_LEVEL_OPTION = typer.Option(None, "--level", "-l", help="Report level to enable (error, warning, info)")


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    telemetry: TelemetryPort
    node_source: NodeSourceProtocol
    reporter: DiagnosticReporter
    core_root: Callable[[], Definition]
    resolver_factory: Callable[[ConfigurationLoader], ConstantResolverProtocol]


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def configure(
        deps: CLIDependencies,
        directories: Optional[List[str]],
        ignore: Optional[List[str]],
        levels: Optional[List[str]],
    ) -> ConfigurationLoader:
        """Command line options on top of the file configuration. Exits 2 on bad values."""
        try:
            return deps.config_loader.with_overrides(
                directories=[str(Path(d).resolve()) for d in directories or []],
                ignore_paths=ignore,
                levels=levels,
            )
        except ConfigurationError as error:
            typer.echo(f"Configuration error: {error}", err=True)
            raise typer.Exit(code=2) from error

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="ruby-semantic-linter",
            help="Semantic lint checks over Ruby node dumps.",
            add_completion=False,
        )

        @app.command()
        def analyze(
            paths: List[Path] = typer.Argument(..., help="JSON node dumps to analyze"),  # noqa: B008
            directory: Optional[List[str]] = _DIRECTORY_OPTION,
            ignore: Optional[List[str]] = _IGNORE_OPTION,
            level: Optional[List[str]] = _LEVEL_OPTION,
        ) -> None:
            """Analyze node dumps and print diagnostics. Exits 1 when any are found."""
            config = CLIAppFactory.configure(deps, directory, ignore, level)
            try:
                checks = select_checks(config.checks)
            except ValueError as error:
                typer.echo(f"Configuration error: {error}", err=True)
                raise typer.Exit(code=2) from error

            use_case = AnalyzeTreeUseCase(
                root=deps.core_root(),
                telemetry=deps.telemetry,
                resolver=deps.resolver_factory(config),
                node_source=deps.node_source,
                checks=checks,
                levels=config.levels,
            )

            total = 0
            for path in paths:
                try:
                    report = use_case.execute_files([str(path.resolve())])[0]
                except (OSError, ValueError) as error:
                    typer.echo(f"{path}: {error}", err=True)
                    raise typer.Exit(code=2) from error
                total += deps.reporter.report(report)

            deps.reporter.summary(total, len(paths))
            if total:
                raise typer.Exit(code=1)

        @app.command()
        def scan(
            constant: str = typer.Argument(..., help="Constant path, e.g. Foo::BarBaz"),
            directory: Optional[List[str]] = _DIRECTORY_OPTION,
            ignore: Optional[List[str]] = _IGNORE_OPTION,
        ) -> None:
            """Print the files that could define CONSTANT, top level first."""
            config = CLIAppFactory.configure(deps, directory, ignore, None)
            paths = deps.resolver_factory(config).scan(constant)
            if not paths:
                typer.echo(f"No candidate files for {constant}", err=True)
                raise typer.Exit(code=1)
            for path in paths:
                typer.echo(path)

        return app


def create_app(deps: CLIDependencies) -> typer.Typer:
    return CLIAppFactory.create_app(deps)
