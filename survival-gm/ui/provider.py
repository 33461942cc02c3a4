from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class UIProvider(ABC):
    """
    UI abstraction. The game emits structured events. The provider renders them.
    Providers may be CLI, Web, etc.
    """

    is_blocking = False

    @abstractmethod
    def scene(self, text: str, data: Optional[Dict[str, Any]] = None) -> None:
        pass

    @abstractmethod
    def status(self, inventory: Dict[str, int], base: Dict[str, Any]) -> None:
        pass

    @abstractmethod
    def game_over(self, text: str, data: Optional[Dict[str, Any]] = None) -> None:
        pass

    @abstractmethod
    def loading(self, active: bool) -> None:
        pass

    @abstractmethod
    def system(self, text: str, data: Optional[Dict[str, Any]] = None) -> None:
        pass

    @abstractmethod
    def error(self, text: str, data: Optional[Dict[str, Any]] = None) -> None:
        pass

    @abstractmethod
    def choice(
        self,
        prompt: str,
        options: List[str],
        data: Optional[Dict[str, Any]] = None,
    ) -> Optional[int]:
        """
        Returns the 0-based index of the selected option.
        Non-blocking providers only publish the options and return None.
        """
        pass
