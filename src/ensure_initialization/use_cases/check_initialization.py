"""Use Case: run the initialization audit over a path and return the results."""

import logging

from ensure_initialization.domain.entities import AuditResult
from ensure_initialization.domain.protocols import LinterAdapterProtocol


class CheckInitializationUseCase:
    """Orchestrate the pylint run and wrap its results."""

    def __init__(self, linter_adapter: LinterAdapterProtocol) -> None:
        self.linter_adapter = linter_adapter

    def execute(self, target_path: str) -> AuditResult:
        """Audit target_path for uninitialized components."""
        logging.info("Auditing %s for uninitialized components", target_path)
        results = self.linter_adapter.gather_results(target_path)
        return AuditResult(target_path=target_path, results=results)
