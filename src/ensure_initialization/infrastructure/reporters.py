"""Terminal reporter implementation - lives in infrastructure."""

from typing import TYPE_CHECKING

import typer

from ensure_initialization.infrastructure.services.guidance_service import (
    GuidanceService,
)

if TYPE_CHECKING:
    from ensure_initialization.domain.entities import AuditResult, LinterResult


class TerminalAuditReporter:
    """Prints audit results grouped by message, one location per line."""

    def __init__(self, guidance_service: GuidanceService) -> None:
        self._guidance = guidance_service

    def report_audit(self, audit_result: "AuditResult") -> None:
        """Report audit results to the terminal."""
        if not audit_result.has_violations():
            typer.secho(
                f"No uninitialized components found in {audit_result.target_path}.",
                fg=typer.colors.GREEN,
            )
            return
        for result in audit_result.results:
            self._report_result(result)
        typer.secho(
            f"{audit_result.violation_count} issue(s) found in {audit_result.target_path}.",
            fg=typer.colors.RED,
            bold=True,
        )

    def _report_result(self, result: "LinterResult") -> None:
        typer.secho(f"{result.code}: {result.message}", fg=typer.colors.RED)
        for location in result.locations:
            typer.echo(f"    {location}")

    def report_guidance(self, rule_code: str) -> bool:
        """Print display name, description and manual instructions for a rule."""
        entry = self._guidance.get_entry(rule_code)
        if entry is None:
            typer.secho(f"Unknown rule: {rule_code}", fg=typer.colors.YELLOW, err=True)
            return False
        title = entry.get("display_name") or rule_code
        typer.secho(f"{entry.get('symbol', rule_code)}: {title}", bold=True)
        if entry.get("short_description"):
            typer.echo(str(entry["short_description"]))
        typer.echo("")
        typer.echo(self._guidance.get_manual_instructions(rule_code))
        return True
