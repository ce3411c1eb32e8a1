"""Domain models for rules and violations."""

from dataclasses import dataclass

__all__ = [
    "Checkable",
    "Violation",
]

from typing import Protocol

import astroid


@dataclass(frozen=True)
class Violation:
    """A rule violation with code, message and location."""

    code: str
    message: str
    location: str
    node: astroid.nodes.NodeNG
    message_args: tuple[str, ...] | None = None
    """Args for Pylint add_message (e.g. (method_name,))."""

    @staticmethod
    def _location_from_node(node: astroid.nodes.NodeNG) -> str:
        """Compute path:lineno:col_offset from an astroid node. Used by from_node."""
        root = node.root()
        path = getattr(root, "file", "") or ""
        lineno = getattr(node, "lineno", 0)
        col_offset = getattr(node, "col_offset", 0)
        return f"{path}:{lineno}:{col_offset}"

    @classmethod
    def from_node(
        cls,
        *,
        code: str,
        message: str,
        node: astroid.nodes.NodeNG,
        message_args: tuple[str, ...] | None = None,
    ) -> "Violation":
        """Build a Violation with location derived from node."""
        return cls(
            code=code,
            message=message,
            location=cls._location_from_node(node),
            node=node,
            message_args=message_args,
        )


class Checkable(Protocol):
    """One-and-done check: given a node, return violations."""

    code: str
    description: str

    def check(self, node: astroid.nodes.NodeNG) -> list[Violation]:
        """Interrogate a node for a rule breach."""
        ...
