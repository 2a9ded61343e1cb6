"""Base engine class for highlighting engines."""

from abc import ABC, abstractmethod
from typing import Any


class BaseEngine(ABC):
    """Base class for all engines.

    Engines are pure: every input arrives as an argument to ``process``.
    """

    @abstractmethod
    def process(self, *args: Any, **kwargs: Any) -> Any:
        """Process input and return results."""
        pass
