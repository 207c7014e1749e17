"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry already-formatted values from the application layer to the
CLI so display rules (two decimals, local dates) live in one place.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from insuite.domain.model.inventory import InventoryItem
from insuite.domain.model.sale import Sale
from insuite.domain.model.value_objects import format_amount
from insuite.domain.service.dashboard import DashboardSummary


@dataclass(frozen=True)
class InventoryLineDTO:
    id: int
    product_name: str
    quantity: int
    price: str  # formatted, e.g. "$5.00"
    cost: str
    supplier_id: int


@dataclass(frozen=True)
class SaleLineDTO:
    id: int
    product_name: str  # blank when the product no longer exists
    quantity: int
    price: str
    total: str
    sale_date: str


@dataclass(frozen=True)
class DashboardDTO:
    total_sales: str
    total_cost: str
    items_sold: int
    profit: str


def to_inventory_line(item: InventoryItem) -> InventoryLineDTO:
    return InventoryLineDTO(
        id=item.id,  # type: ignore[arg-type]
        product_name=item.product_name,
        quantity=item.quantity,
        price=str(item.price),
        cost=str(item.cost),
        supplier_id=item.supplier_id,
    )


def to_sale_line(sale: Sale, product_names: Mapping[int, str]) -> SaleLineDTO:
    return SaleLineDTO(
        id=sale.id,  # type: ignore[arg-type]
        product_name=product_names.get(sale.product_id, ""),
        quantity=sale.quantity.value,
        price=str(sale.price),
        total=str(sale.total),
        sale_date=sale.sale_date.astimezone().strftime("%Y-%m-%d"),
    )


def to_dashboard(summary: DashboardSummary) -> DashboardDTO:
    return DashboardDTO(
        total_sales=format_amount(summary.total_sales),
        total_cost=format_amount(summary.total_cost),
        items_sold=summary.items_sold,
        profit=format_amount(summary.profit),
    )
