"""Port for looking up user-facing messages by key."""

from abc import ABC, abstractmethod


class Localizer(ABC):
    @abstractmethod
    def message(self, key: str) -> str:
        """Return the localized text for ``key``."""
        ...
