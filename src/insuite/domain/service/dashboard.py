"""Domain service: dashboard figures.

A pure reduction over already-fetched sales and inventory rows. It makes
no remote calls and keeps no state, so the figures are recomputed every
time the dashboard is shown.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from insuite.domain.model.inventory import InventoryItem
from insuite.domain.model.sale import Sale


@dataclass(frozen=True)
class DashboardSummary:
    total_sales: Decimal
    total_cost: Decimal
    items_sold: int

    @property
    def profit(self) -> Decimal:
        # Can go negative, so this stays a plain Decimal rather than Money.
        return self.total_sales - self.total_cost


def summarize(
    sales: Iterable[Sale],
    inventory: Iterable[InventoryItem],
) -> DashboardSummary:
    """Reduce raw rows into the dashboard figures.

    ``total_cost`` is the literal sum of each item's unit cost; it is a
    cost-basis figure and is not scaled by stock or sold quantity.
    """
    total_sales = Decimal("0")
    items_sold = 0
    for sale in sales:
        total_sales += sale.total.amount
        items_sold += sale.quantity.value

    total_cost = Decimal("0")
    for item in inventory:
        total_cost += item.cost.amount

    return DashboardSummary(
        total_sales=total_sales,
        total_cost=total_cost,
        items_sold=items_sold,
    )
