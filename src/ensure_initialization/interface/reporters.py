"""Protocol for audit reporting - no infrastructure imports."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ensure_initialization.domain.entities import AuditResult


class AuditReporter(Protocol):
    """Protocol for reporting audit results."""

    def report_audit(self, audit_result: "AuditResult") -> None:
        """Report audit results to the user."""
        ...

    def report_guidance(self, rule_code: str) -> bool:
        """Print registry guidance for a rule. Returns False if the rule is unknown."""
        ...
