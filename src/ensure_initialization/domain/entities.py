from dataclasses import dataclass, field


@dataclass(frozen=True)
class LinterResult:
    """Standardized linter result."""
    code: str
    message: str
    locations: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class AuditResult:
    """Result of running the initialization audit over a path."""
    target_path: str
    results: list[LinterResult] = field(default_factory=list)

    def has_violations(self) -> bool:
        """Check if any violations were found."""
        return bool(self.results)

    @property
    def violation_count(self) -> int:
        """Number of reported locations across all results."""
        return sum(max(len(r.locations), 1) for r in self.results)
