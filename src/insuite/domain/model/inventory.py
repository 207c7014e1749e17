"""InventoryItem — one row of the ``inventory`` collection.

Each item knows its stock, unit price and unit cost. The store assigns
the identifier on insert; items built locally carry ``id=None`` until
then.
"""

from __future__ import annotations

from dataclasses import dataclass

from insuite.domain.exceptions import ValidationError
from insuite.domain.model.value_objects import Money

DEFAULT_SUPPLIER_ID = 1


@dataclass
class InventoryItem:
    """Mutable inventory record.

    Invariants:
    - ``product_name`` is never blank
    - ``quantity`` is always >= 0
    """

    id: int | None
    product_name: str
    quantity: int
    price: Money
    cost: Money
    supplier_id: int = DEFAULT_SUPPLIER_ID

    # --- Factory (used for NEW items only) ------------------------------------

    @staticmethod
    def create(
        product_name: str,
        quantity: int,
        price: Money,
        cost: Money,
        supplier_id: int | None = None,
    ) -> InventoryItem:
        if not product_name or not product_name.strip():
            raise ValidationError("Product name is required")
        if quantity < 0:
            raise ValidationError("Quantity cannot be negative")
        return InventoryItem(
            id=None,
            product_name=product_name.strip(),
            quantity=quantity,
            price=price,
            cost=cost,
            supplier_id=supplier_id or DEFAULT_SUPPLIER_ID,
        )

    # --- Stock ----------------------------------------------------------------

    def can_supply(self, quantity: int) -> bool:
        return quantity <= self.quantity

    def stock_after_sale(self, quantity: int) -> int:
        """Stock level left once *quantity* units have been sold."""
        if not self.can_supply(quantity):
            raise ValidationError("Quantity exceeds available inventory.")
        return self.quantity - quantity
