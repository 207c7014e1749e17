"""Abstract repository for the ``sales`` collection."""

from __future__ import annotations

from abc import ABC, abstractmethod

from insuite.domain.model.sale import Sale


class SalesRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Sale]:
        """Return every sale, most recent (highest id) first."""

    @abstractmethod
    def add(self, sale: Sale) -> Sale:
        """Insert a sale and return the stored row."""

    @abstractmethod
    def delete(self, sale_id: int) -> None:
        """Remove a single sale (only used to compensate a failed workflow)."""

    @abstractmethod
    def delete_all(self) -> None:
        """Remove every sale."""
