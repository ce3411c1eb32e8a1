"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from ensure_initialization.infrastructure.di.container import EnsureInitContainer
from ensure_initialization.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = EnsureInitContainer()
    deps = CLIDependencies(
        linter_adapter=container.get_pylint_adapter(),
        reporter=container.get_reporter(),
    )
    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
