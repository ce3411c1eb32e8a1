"""Runtime marker for components that need an explicit initialization call.

Usage::

    @RequiresInitialization("Init")
    class Enemy(MonoBehaviour):
        def Init(self, target): ...

The linter reads the decorator statically; at runtime the marker is attached
to the class so tools can look it up with ``get_initialization_method``.
"""

from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T", bound=type)

MARKER_ATTRIBUTE = "__requires_initialization__"


@dataclass(frozen=True)
class RequiresInitialization:
    """Class decorator recording the name of the method that initializes instances."""

    method_name: str

    def __post_init__(self) -> None:
        if not isinstance(self.method_name, str) or not self.method_name:
            raise ValueError("RequiresInitialization needs a non-empty method name")

    def __call__(self, cls: T) -> T:
        if not isinstance(cls, type):
            raise TypeError("RequiresInitialization can only decorate classes")
        # Read back through vars(), so subclasses do not inherit it.
        setattr(cls, MARKER_ATTRIBUTE, self)
        return cls

    @staticmethod
    def get_initialization_method(klass: type) -> str | None:
        """Return the method name declared on klass itself, or None."""
        marker = vars(klass).get(MARKER_ATTRIBUTE)
        if isinstance(marker, RequiresInitialization):
            return marker.method_name
        return None
