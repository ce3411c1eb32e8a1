from typing import TYPE_CHECKING, Optional, Protocol

from ensure_initialization.domain.registry_types import RuleRegistryEntry

if TYPE_CHECKING:
    import astroid

    from ensure_initialization.domain.entities import LinterResult


class AstroidProtocol(Protocol):
    """Semantic lookups the initialization rule needs from the inference engine."""

    def resolve_function(self, node: "astroid.nodes.NodeNG") -> Optional["astroid.nodes.FunctionDef"]:
        """Infer a callee expression to the function it names, or None."""
        ...

    def resolve_class(self, node: "astroid.nodes.NodeNG") -> Optional["astroid.nodes.ClassDef"]:
        """Infer an expression to a class (or the class of an instance), or None."""
        ...

    def direct_supertypes(self, node: "astroid.nodes.ClassDef") -> list["astroid.nodes.ClassDef"]:
        """Return the resolved direct base classes of a class."""
        ...

    def infer_string(self, node: "astroid.nodes.NodeNG") -> Optional[str]:
        """Infer an expression to a str constant, or None."""
        ...


class LinterAdapterProtocol(Protocol):
    def gather_results(self, target_path: str) -> list["LinterResult"]:
        ...


class GuidanceServiceProtocol(Protocol):
    def get_registry(self) -> dict[str, RuleRegistryEntry]:
        ...

    def get_entry(self, rule_code: str) -> Optional[RuleRegistryEntry]:
        ...
