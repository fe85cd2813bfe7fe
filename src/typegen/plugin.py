from abc import ABC, abstractmethod
from typing import Any


class Plugin(ABC):
    """Abstract base class for a generation pass that adds objects to a tree.

    Objects created while a plugin runs record it as their ``generated_by``.
    """

    def __init__(self, options: dict[str, Any] | None = None):
        self.options = options or {}

    @abstractmethod
    def generate(self, root) -> None:
        """Add definitions to the given root namespace.

        Args:
            root: The root object of the definition tree being built
        """
        pass
