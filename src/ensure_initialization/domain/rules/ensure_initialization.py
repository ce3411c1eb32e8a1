"""Ensure Initialization rule (E9601): factory-built components must be initialized in the same block."""

from typing import TYPE_CHECKING, ClassVar

import astroid

from ensure_initialization.domain.constants import INITIALIZATION_CODE
from ensure_initialization.domain.rules import Checkable, Violation

if TYPE_CHECKING:
    from ensure_initialization.domain.config import ConfigurationLoader
    from ensure_initialization.domain.protocols import AstroidProtocol


class EnsureInitializationRule(Checkable):
    """
    Rule for E9601: a component built by the factory is never initialized.

    Applies to calls like ``enemy = Object.Instantiate(Enemy)`` where ``Enemy``
    derives from the base component and carries ``@RequiresInitialization("Init")``.
    The call is reported unless the enclosing block contains ``enemy.Init(...)``.
    Matching of the initialization call is textual and ignores control flow.
    """

    code: str = INITIALIZATION_CODE
    description: str = "Every instance created by the factory must be initialized."
    MESSAGE: ClassVar[str] = "The method '{0}' was not called on the instantiated object"
    MARKER_KEYWORD: ClassVar[str] = "method_name"
    # Statement lists that form a block. Class bodies are not blocks.
    BLOCK_FIELDS: ClassVar[tuple[str, ...]] = ("body", "orelse", "finalbody")

    def __init__(
        self,
        ast_gateway: "AstroidProtocol",
        config_loader: "ConfigurationLoader",
    ) -> None:
        self._ast_gateway = ast_gateway
        self._factory_owner = config_loader.factory_owner
        self._factory_name = config_loader.factory_name
        self._base_component = config_loader.base_component
        self._marker_name = config_loader.marker_name

    def check(self, node: astroid.nodes.NodeNG) -> list[Violation]:
        """Check a Call node for E9601. Returns at most one violation."""
        if not isinstance(node, astroid.nodes.Call):
            return []
        if not self.is_factory_call(node):
            return []
        method_name = self.get_required_method(node.args[0])
        if not method_name:
            return []
        variable_name = self.get_destination_variable(node)
        if variable_name is None:
            return []
        block = self.get_enclosing_block(node)
        if block is None:
            return []
        if self.is_initialized(block, variable_name, method_name):
            return []
        return [
            Violation.from_node(
                code=self.code,
                message=self.MESSAGE.format(method_name),
                node=node,
                message_args=(method_name,),
            )
        ]

    def is_factory_call(self, node: astroid.nodes.Call) -> bool:
        """True if the callee resolves to the factory on the owning class and has an argument."""
        if not isinstance(node.func, (astroid.nodes.Attribute, astroid.nodes.Name)):
            return False
        if not node.args:
            return False
        function = self._ast_gateway.resolve_function(node.func)
        if function is None or function.name != self._factory_name:
            return False
        owner = function.parent
        return isinstance(owner, astroid.nodes.ClassDef) and owner.qname() == self._factory_owner

    def get_required_method(self, target: astroid.nodes.NodeNG) -> str | None:
        """Return the initialization method the constructed type requires, if any."""
        klass = self._ast_gateway.resolve_class(target)
        if klass is None or not self.is_component(klass):
            return None
        return self.get_marker_method(klass)

    def is_component(self, klass: astroid.nodes.ClassDef) -> bool:
        """Walk the class and its supertypes looking for the base component."""
        pending = [klass]
        seen: set[str] = set()
        while pending:
            current = pending.pop()
            qname = current.qname()
            if qname == self._base_component:
                return True
            if qname in seen:
                continue
            seen.add(qname)
            pending.extend(self._ast_gateway.direct_supertypes(current))
        return False

    def get_marker_method(self, klass: astroid.nodes.ClassDef) -> str | None:
        """Read the method name from the first marker decorator on the class."""
        decorators = klass.decorators.nodes if klass.decorators else []
        for decorator in decorators:
            if not isinstance(decorator, astroid.nodes.Call):
                continue
            if self._simple_name(decorator.func) != self._marker_name:
                continue
            argument = self._marker_argument(decorator)
            if argument is None:
                return None
            return self._ast_gateway.infer_string(argument) or None
        return None

    def _marker_argument(self, decorator: astroid.nodes.Call) -> astroid.nodes.NodeNG | None:
        if decorator.args:
            return decorator.args[0]
        for keyword in decorator.keywords or []:
            if keyword.arg == self.MARKER_KEYWORD:
                return keyword.value
        return None

    @staticmethod
    def _simple_name(node: astroid.nodes.NodeNG) -> str | None:
        if isinstance(node, astroid.nodes.Name):
            return node.name
        if isinstance(node, astroid.nodes.Attribute):
            return node.attrname
        return None

    @staticmethod
    def get_destination_variable(node: astroid.nodes.Call) -> str | None:
        """
        Name of the variable receiving the call's result.

        ``x = call`` and ``x: T = call`` bind a single declarator;
        ``(x := call)`` assigns a bare identifier. In ``a = b = call`` the
        innermost target ``b`` receives the value. Every other parent shape
        (argument, return, discarded, attribute target, unpacking) gives None.
        """
        parent = node.parent
        if isinstance(parent, astroid.nodes.Assign):
            if parent.value is node and all(
                isinstance(target, astroid.nodes.AssignName) for target in parent.targets
            ):
                return parent.targets[-1].name
            return None
        if isinstance(parent, (astroid.nodes.AnnAssign, astroid.nodes.NamedExpr)):
            if parent.value is node and isinstance(parent.target, astroid.nodes.AssignName):
                return parent.target.name
        return None

    @classmethod
    def get_enclosing_block(cls, node: astroid.nodes.NodeNG) -> list[astroid.nodes.NodeNG] | None:
        """Return the statement list directly holding the statement that contains node."""
        statement = node.statement()
        container = statement.parent
        if container is None or isinstance(container, astroid.nodes.ClassDef):
            return None
        for field in cls.BLOCK_FIELDS:
            statements = getattr(container, field, None)
            if isinstance(statements, list) and any(s is statement for s in statements):
                return statements
        return None

    @staticmethod
    def is_initialized(
        block: list[astroid.nodes.NodeNG], variable_name: str, method_name: str
    ) -> bool:
        """True if any call in the block, at any depth, is ``<variable_name>.<method_name>(...)``."""
        for statement in block:
            for call in statement.nodes_of_class(astroid.nodes.Call):
                func = call.func
                if (
                    isinstance(func, astroid.nodes.Attribute)
                    and func.attrname == method_name
                    and func.expr.as_string() == variable_name
                ):
                    return True
        return False
