"""Application service: Add Inventory Item use case."""

from __future__ import annotations

import logging
from decimal import Decimal

from insuite.domain.exceptions import RemoteCallError, ValidationError
from insuite.domain.model.inventory import InventoryItem
from insuite.domain.model.value_objects import Money
from insuite.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Product name, quantity, price, and cost are required."


class AddInventoryItemHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(
        self,
        product_name: str | None,
        quantity: int | None,
        price: str | float | Decimal | None,
        cost: str | float | Decimal | None,
        supplier_id: int | None = None,
    ) -> InventoryItem:
        """Add a new item and return it with its store-assigned id.

        Every required field is checked before the backend is contacted;
        ``supplier_id`` falls back to the default supplier.
        """
        if not product_name or quantity is None or price is None or cost is None:
            raise ValidationError(MISSING_FIELDS_MESSAGE)

        item = InventoryItem.create(
            product_name=product_name,
            quantity=quantity,
            price=Money.of(price),
            cost=Money.of(cost),
            supplier_id=supplier_id,
        )

        try:
            stored = self._inventory_repo.add(item)
        except RemoteCallError as exc:
            logger.error("Error adding item: %s", exc)
            raise RemoteCallError(f"Failed to add item: {exc}") from exc

        logger.info("Added inventory item #%s '%s'", stored.id, stored.product_name)
        return stored
