"""Initialization checks (E9601)."""

from collections.abc import Mapping
from typing import TYPE_CHECKING

import astroid

if TYPE_CHECKING:
    from pylint.lint import PyLinter

from pylint.checkers import BaseChecker

from ensure_initialization.domain.config import ConfigurationLoader
from ensure_initialization.domain.constants import INITIALIZATION_CODE
from ensure_initialization.domain.protocols import AstroidProtocol
from ensure_initialization.domain.registry_types import RuleRegistryEntry
from ensure_initialization.domain.rule_msgs import RuleMsgBuilder
from ensure_initialization.domain.rules.ensure_initialization import (
    EnsureInitializationRule,
)


class EnsureInitializationChecker(BaseChecker):
    """E9601: components built by the factory must be initialized. Thin: delegates to EnsureInitializationRule."""

    name: str = "ensure-init"
    CODES = [INITIALIZATION_CODE]

    def __init__(
        self,
        linter: "PyLinter",
        ast_gateway: AstroidProtocol,
        config_loader: ConfigurationLoader,
        registry: Mapping[str, RuleRegistryEntry],
    ) -> None:
        self.msgs = RuleMsgBuilder.build_msgs_for_codes(
            registry, self.CODES)  # type: ignore[assignment]
        super().__init__(linter)
        self._rule = EnsureInitializationRule(
            ast_gateway=ast_gateway,
            config_loader=config_loader,
        )

    def visit_call(self, node: astroid.nodes.Call) -> None:
        """Delegate E9601 to the domain rule; report each violation via add_message."""
        for v in self._rule.check(node):
            self.add_message(
                v.code,
                node=v.node,
                args=v.message_args or (),
            )
