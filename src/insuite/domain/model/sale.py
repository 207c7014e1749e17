"""Sale — one row of the ``sales`` collection.

Sales are immutable once recorded: the unit price is a snapshot of the
product's price at the moment of sale, so later price edits never change
historic revenue.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from insuite.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class Sale:

    id: int | None
    product_id: int
    quantity: Quantity
    price: Money  # locked at sale time
    sale_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    created_at: datetime | None = None

    @property
    def total(self) -> Money:
        return self.price * self.quantity.value
