"""Application service: Reset Data use case.

Deletes every sale, then every inventory item. The inventory delete is
only attempted once the sales delete succeeded. There is no undo.
"""

from __future__ import annotations

import logging

from insuite.domain.exceptions import RemoteCallError
from insuite.domain.repository.inventory_repository import InventoryRepository
from insuite.domain.repository.sales_repository import SalesRepository

logger = logging.getLogger(__name__)

RESET_SUCCESS_MESSAGE = "All data has been successfully reset."


class ResetDataHandler:

    def __init__(
        self,
        sales_repo: SalesRepository,
        inventory_repo: InventoryRepository,
    ) -> None:
        self._sales_repo = sales_repo
        self._inventory_repo = inventory_repo

    def handle(self) -> None:
        try:
            self._sales_repo.delete_all()
            self._inventory_repo.delete_all()
        except RemoteCallError as exc:
            logger.error("Error resetting data: %s", exc)
            raise RemoteCallError(f"Failed to reset data: {exc}") from exc

        logger.warning("All sales and inventory data deleted")
