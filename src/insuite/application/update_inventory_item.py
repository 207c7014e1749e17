"""Application service: Update Inventory Item use case.

The caller sends its whole locally-edited record, not a patch. The
remote copy is authoritative afterwards, so views refetch the list
instead of trusting their local edit.
"""

from __future__ import annotations

import logging

from insuite.domain.exceptions import RemoteCallError, ValidationError
from insuite.domain.model.inventory import InventoryItem
from insuite.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


class UpdateInventoryItemHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, item: InventoryItem) -> None:
        if item.id is None:
            raise ValidationError("Cannot update an item that was never saved")
        if not item.product_name or not item.product_name.strip():
            raise ValidationError("Product name is required")
        if item.quantity < 0:
            raise ValidationError("Quantity cannot be negative")

        try:
            self._inventory_repo.update(item)
        except RemoteCallError as exc:
            logger.error("Error updating item: %s", exc)
            raise RemoteCallError(f"Failed to update item: {exc}") from exc

        logger.info("Updated inventory item #%s", item.id)
