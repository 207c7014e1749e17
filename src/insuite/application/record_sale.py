"""Application service: Record Sale use case.

The only multi-step workflow in the application:

1. Validate locally against the last-fetched inventory snapshot.
2. Insert the sale row with the snapshot's price.
3. Write the decremented stock back to the inventory row.

The two writes are not atomic. If step 3 fails the sale stays persisted
and a ``PartialSaleError`` is raised. With ``compensate=True`` the
handler instead deletes the freshly inserted sale before reporting the
failure. Concurrent sales of the same product are not serialized; the
later stock write wins.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Sequence

from insuite.domain.exceptions import (
    EntityNotFoundError,
    PartialSaleError,
    RemoteCallError,
    ValidationError,
)
from insuite.domain.model.inventory import InventoryItem
from insuite.domain.model.sale import Sale
from insuite.domain.model.value_objects import Quantity
from insuite.domain.repository.inventory_repository import InventoryRepository
from insuite.domain.repository.sales_repository import SalesRepository

logger = logging.getLogger(__name__)


class RecordSaleHandler:

    def __init__(
        self,
        sales_repo: SalesRepository,
        inventory_repo: InventoryRepository,
        compensate: bool = False,
    ) -> None:
        self._sales_repo = sales_repo
        self._inventory_repo = inventory_repo
        self._compensate = compensate

    def handle(
        self,
        product_id: int | None,
        quantity: int | None,
        snapshot: Sequence[InventoryItem],
    ) -> Sale:
        """Record a sale of *quantity* units of *product_id*.

        Returns the stored sale. The caller is expected to refresh its
        inventory snapshot afterwards.
        """
        if not product_id or not quantity:
            raise ValidationError("Please select a product and enter a quantity.")
        qty = Quantity(quantity)

        product = self._find(product_id, snapshot)
        remaining = product.stock_after_sale(qty.value)

        # Step 2: insert the sale with the snapshot price
        sale = Sale(
            id=None,
            product_id=product.id,  # type: ignore[arg-type]
            quantity=qty,
            price=product.price,
            sale_date=datetime.now(timezone.utc),
        )
        try:
            stored = self._sales_repo.add(sale)
        except RemoteCallError as exc:
            logger.error("Error adding sale: %s", exc)
            raise RemoteCallError(f"Failed to add sale: {exc}") from exc

        # Step 3: decrement stock
        try:
            self._inventory_repo.set_quantity(product.id, remaining)  # type: ignore[arg-type]
        except RemoteCallError as exc:
            logger.error("Error updating inventory: %s", exc)
            if self._compensate:
                self._undo(stored, exc)
            raise PartialSaleError(
                f"Sale added but failed to update inventory: {exc}", sale=stored
            ) from exc

        logger.info(
            "Recorded sale #%s: %s x %s (stock now %s)",
            stored.id, qty, product.product_name, remaining,
        )
        return stored

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _find(product_id: int, snapshot: Sequence[InventoryItem]) -> InventoryItem:
        for item in snapshot:
            if item.id == product_id:
                return item
        raise EntityNotFoundError("Selected product not found in inventory.")

    def _undo(self, sale: Sale, cause: RemoteCallError) -> None:
        """Delete *sale* after its stock update failed.

        Raises RemoteCallError when the sale is gone again; if the delete
        itself fails the caller falls through to PartialSaleError.
        """
        if sale.id is None:
            return
        try:
            self._sales_repo.delete(sale.id)
        except RemoteCallError as exc:
            logger.error("Error removing sale #%s after failed update: %s", sale.id, exc)
            return
        logger.warning("Removed sale #%s because inventory could not be updated", sale.id)
        raise RemoteCallError(
            f"Failed to add sale: inventory update failed ({cause}); sale was rolled back"
        ) from cause
