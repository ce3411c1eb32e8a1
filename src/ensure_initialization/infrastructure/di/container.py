from typing import Any, TypeVar, cast

from ensure_initialization.domain.config import ConfigurationLoader
from ensure_initialization.infrastructure.adapters.pylint_adapter import PylintAdapter
from ensure_initialization.infrastructure.config_file_loader import ConfigFileLoader
from ensure_initialization.infrastructure.gateways.astroid_gateway import AstroidGateway
from ensure_initialization.infrastructure.reporters import TerminalAuditReporter
from ensure_initialization.infrastructure.services.guidance_service import GuidanceService

T = TypeVar("T")


class EnsureInitContainer:
    """Dependency Injection Container for the initialization linter."""

    def __init__(self) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default implementations for protocols."""
        config_loader = ConfigurationLoader(ConfigFileLoader.load_config_from_fs())
        self.register_singleton("ConfigurationLoader", config_loader)
        self.register_singleton("AstroidGateway", AstroidGateway())
        guidance_service = GuidanceService()
        self.register_singleton("GuidanceService", guidance_service)
        self.register_singleton("PylintAdapter", PylintAdapter(config_loader=config_loader))
        self.register_singleton(
            "TerminalAuditReporter",
            TerminalAuditReporter(guidance_service=guidance_service),
        )

    def register_singleton(self, key: str, instance: object) -> None:
        """Register (or replace) a shared instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Return a registered instance by key."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def _typed(self, key: str, _type: type[T]) -> T:
        return cast(T, self.get(key))

    def get_config_loader(self) -> ConfigurationLoader:
        return self._typed("ConfigurationLoader", ConfigurationLoader)

    def get_astroid_gateway(self) -> AstroidGateway:
        return self._typed("AstroidGateway", AstroidGateway)

    def get_guidance_service(self) -> GuidanceService:
        return self._typed("GuidanceService", GuidanceService)

    def get_pylint_adapter(self) -> PylintAdapter:
        return self._typed("PylintAdapter", PylintAdapter)

    def get_reporter(self) -> TerminalAuditReporter:
        return self._typed("TerminalAuditReporter", TerminalAuditReporter)
