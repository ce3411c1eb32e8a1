"""
Pylint plugin entry point - composition root for the checker plugin.
Lives in infrastructure as it creates the container and wires dependencies.

Load with: pylint --load-plugins=ensure_initialization.infrastructure.checker
"""

from pylint.lint import PyLinter

from ensure_initialization.infrastructure.di.container import EnsureInitContainer
from ensure_initialization.use_cases.checks.initialization import (
    EnsureInitializationChecker,
)


def register(linter: PyLinter) -> None:
    """Register checkers."""
    container = EnsureInitContainer()
    linter.register_checker(
        EnsureInitializationChecker(
            linter,
            ast_gateway=container.get_astroid_gateway(),
            config_loader=container.get_config_loader(),
            registry=container.get_guidance_service().get_registry(),
        )
    )
