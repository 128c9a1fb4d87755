"""Switch mapping interface shared by all rack resolution strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod


class MappingError(Exception):
    """Raised when a switch mapping breaks its resolve contract."""

    pass


class SwitchMapping(ABC):
    """
    Resolves host names to rack identifiers.

    Implementations may be static tables, script driven or DNS driven;
    callers only rely on this interface so strategies stay interchangeable.
    """

    @abstractmethod
    def resolve(self, names: list[str]) -> list[str]:
        """
        Resolve host names to rack identifiers.

        Returns one rack per name, in the same order as ``names``.
        """

    @abstractmethod
    def reload_cached_mappings(self, names: list[str] | None = None) -> None:
        """
        Drop cached resolutions.

        Args:
            names: Hosts to reload, or None to reload everything
        """
