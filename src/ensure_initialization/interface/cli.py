"""CLI entry points - Thin Controller using Typer."""

from dataclasses import dataclass
from pathlib import Path

import typer

from ensure_initialization.domain.constants import INITIALIZATION_CODE
from ensure_initialization.domain.protocols import LinterAdapterProtocol
from ensure_initialization.interface.reporters import AuditReporter
from ensure_initialization.use_cases.check_initialization import (
    CheckInitializationUseCase,
)


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    linter_adapter: LinterAdapterProtocol
    reporter: AuditReporter


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def resolve_target_path(path: Path | None) -> str:
        """Resolve target path: explicit path, else src/ if exists, else '.'."""
        if path and str(path) != ".":
            return str(path)
        src_dir = Path.cwd() / "src"
        if src_dir.is_dir():
            return "src"
        return "."

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="ensure-init",
            help="Report components built with Instantiate(...) whose initialization method is never called.",
            add_completion=False,
        )

        @app.command()
        def check(
            path: Path | None = typer.Argument(None, help="Path to audit (default: src/ if present, else .)"),  # noqa: B008
        ) -> None:
            """Run pylint with the initialization checker and report uninitialized components."""
            target_path = CLIAppFactory.resolve_target_path(path)
            use_case = CheckInitializationUseCase(linter_adapter=deps.linter_adapter)
            audit_result = use_case.execute(target_path)
            deps.reporter.report_audit(audit_result)
            if audit_result.has_violations():
                raise typer.Exit(code=1)

        @app.command()
        def explain(
            rule: str = typer.Argument(INITIALIZATION_CODE, help="Rule code, symbol or id"),
        ) -> None:
            """Show what a rule checks and how to fix it."""
            if not deps.reporter.report_guidance(rule):
                raise typer.Exit(code=2)

        return app
