"""Application service: List Inventory use case (query)."""

from __future__ import annotations

import logging

from insuite.domain.exceptions import RemoteCallError
from insuite.domain.model.inventory import InventoryItem
from insuite.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


class ListInventoryHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self) -> list[InventoryItem]:
        try:
            return self._inventory_repo.list_all()
        except RemoteCallError as exc:
            logger.error("Error fetching inventory: %s", exc)
            raise RemoteCallError(f"Error fetching inventory: {exc}") from exc
