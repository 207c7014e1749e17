"""Abstract repository for the ``inventory`` collection.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (Supabase, in-memory) live
elsewhere.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from insuite.domain.model.inventory import InventoryItem


class InventoryRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[InventoryItem]:
        """Return every item, ordered by ascending id."""

    @abstractmethod
    def add(self, item: InventoryItem) -> InventoryItem:
        """Insert a new item and return it with its store-assigned id."""

    @abstractmethod
    def update(self, item: InventoryItem) -> None:
        """Replace every stored attribute of the item with the same id."""

    @abstractmethod
    def set_quantity(self, item_id: int, quantity: int) -> None:
        """Overwrite only the stock level of an item."""

    @abstractmethod
    def delete(self, item_id: int) -> None:
        """Remove a single item."""

    @abstractmethod
    def delete_all(self) -> None:
        """Remove every item."""
