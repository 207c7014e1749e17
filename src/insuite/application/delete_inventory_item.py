"""Application service: Delete Inventory Item use case."""

from __future__ import annotations

import logging

from insuite.domain.exceptions import RemoteCallError
from insuite.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


class DeleteInventoryItemHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, item_id: int) -> None:
        try:
            self._inventory_repo.delete(item_id)
        except RemoteCallError as exc:
            logger.error("Error deleting item: %s", exc)
            raise RemoteCallError(f"Failed to delete item: {exc}") from exc

        logger.info("Deleted inventory item #%s", item_id)
