"""Supabase-backed implementation of InventoryRepository."""

from __future__ import annotations

import logging

from supabase import Client

from insuite.domain.exceptions import RemoteCallError
from insuite.domain.model.inventory import DEFAULT_SUPPLIER_ID, InventoryItem
from insuite.domain.model.value_objects import Money
from insuite.domain.repository.inventory_repository import InventoryRepository
from insuite.infrastructure.supabase_client import run

logger = logging.getLogger(__name__)


class SupabaseInventoryRepository(InventoryRepository):

    def __init__(self, client: Client, table: str = "inventory") -> None:
        self._client = client
        self._table = table

    # --- InventoryRepository interface ----------------------------------------

    def list_all(self) -> list[InventoryItem]:
        response = run(
            self._query().select("*").order("id", desc=False)
        )
        return [self._to_domain(raw) for raw in response.data or []]

    def add(self, item: InventoryItem) -> InventoryItem:
        response = run(self._query().insert([self._to_raw(item)]))
        if not response.data:
            raise RemoteCallError("insert returned no rows")
        return self._to_domain(response.data[0])

    def update(self, item: InventoryItem) -> None:
        run(self._query().update(self._to_raw(item)).eq("id", item.id))

    def set_quantity(self, item_id: int, quantity: int) -> None:
        run(self._query().update({"quantity": quantity}).eq("id", item_id))

    def delete(self, item_id: int) -> None:
        run(self._query().delete().eq("id", item_id))

    def delete_all(self) -> None:
        # PostgREST refuses unfiltered deletes; "id is not null" matches every row.
        run(self._query().delete().not_.is_("id", "null"))
        logger.debug("Deleted every row of %s", self._table)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: InventoryItem) -> dict:
        return {
            "product_name": item.product_name,
            "quantity": item.quantity,
            "price": float(item.price),
            "cost": float(item.cost),
            "supplier_id": item.supplier_id,
        }

    @staticmethod
    def _to_domain(raw: dict) -> InventoryItem:
        return InventoryItem(
            id=raw["id"],
            product_name=raw["product_name"],
            quantity=int(raw["quantity"]),
            price=Money.stored(raw.get("price")),
            cost=Money.stored(raw.get("cost")),
            supplier_id=raw.get("supplier_id") or DEFAULT_SUPPLIER_ID,
        )

    def _query(self):
        return self._client.table(self._table)
