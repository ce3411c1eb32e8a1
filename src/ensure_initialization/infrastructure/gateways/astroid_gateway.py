import logging
from typing import Optional

import astroid  # type: ignore[import-untyped]
from pylint.checkers.utils import safe_infer

from ensure_initialization.domain.protocols import AstroidProtocol


class AstroidGateway(AstroidProtocol):
    """Inference gateway: turns syntax nodes into the symbols the rule compares."""

    def resolve_function(self, node: astroid.nodes.NodeNG) -> Optional[astroid.nodes.FunctionDef]:
        """Infer a callee; bound and unbound methods are unwrapped to their FunctionDef."""
        inferred = safe_infer(node)
        # BoundMethod proxies an UnboundMethod, which proxies the FunctionDef.
        while isinstance(inferred, astroid.UnboundMethod):
            inferred = inferred._proxied
        if isinstance(inferred, astroid.nodes.FunctionDef):
            return inferred
        if inferred is None:
            logging.debug("Could not infer callee %s", node.as_string())
        return None

    def resolve_class(self, node: astroid.nodes.NodeNG) -> Optional[astroid.nodes.ClassDef]:
        """A class expression resolves to itself; an instance to its class."""
        inferred = safe_infer(node)
        if isinstance(inferred, astroid.nodes.ClassDef):
            return inferred
        if isinstance(inferred, astroid.Instance):
            proxied = inferred._proxied
            if isinstance(proxied, astroid.nodes.ClassDef):
                return proxied
        return None

    def direct_supertypes(self, node: astroid.nodes.ClassDef) -> list[astroid.nodes.ClassDef]:
        """Resolved direct bases; unresolvable bases are dropped."""
        try:
            return list(node.ancestors(recurs=False))
        except astroid.InferenceError:
            logging.debug("Could not resolve bases of %s", node.qname())
            return []

    def infer_string(self, node: astroid.nodes.NodeNG) -> Optional[str]:
        """Value of a str constant expression, or None."""
        inferred = safe_infer(node)
        if isinstance(inferred, astroid.nodes.Const) and isinstance(inferred.value, str):
            return inferred.value
        return None
