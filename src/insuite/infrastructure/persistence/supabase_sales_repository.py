"""Supabase-backed implementation of SalesRepository."""

from __future__ import annotations

from datetime import datetime

from supabase import Client

from insuite.domain.exceptions import RemoteCallError
from insuite.domain.model.sale import Sale
from insuite.domain.model.value_objects import Money, Quantity
from insuite.domain.repository.sales_repository import SalesRepository
from insuite.infrastructure.supabase_client import run


class SupabaseSalesRepository(SalesRepository):

    def __init__(self, client: Client, table: str = "sales") -> None:
        self._client = client
        self._table = table

    # --- SalesRepository interface --------------------------------------------

    def list_all(self) -> list[Sale]:
        response = run(self._query().select("*").order("id", desc=True))
        return [self._to_domain(raw) for raw in response.data or []]

    def add(self, sale: Sale) -> Sale:
        response = run(self._query().insert([self._to_raw(sale)]))
        if not response.data:
            raise RemoteCallError("insert returned no rows")
        return self._to_domain(response.data[0])

    def delete(self, sale_id: int) -> None:
        run(self._query().delete().eq("id", sale_id))

    def delete_all(self) -> None:
        run(self._query().delete().not_.is_("id", "null"))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(sale: Sale) -> dict:
        return {
            "product_id": sale.product_id,
            "quantity": sale.quantity.value,
            "price": float(sale.price),
            "sale_date": sale.sale_date.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Sale:
        created_at = raw.get("created_at")
        return Sale(
            id=raw["id"],
            product_id=raw["product_id"],
            quantity=Quantity.stored(raw["quantity"]),
            price=Money.stored(raw["price"]),
            sale_date=datetime.fromisoformat(raw["sale_date"]),
            created_at=datetime.fromisoformat(created_at) if created_at else None,
        )

    def _query(self):
        return self._client.table(self._table)
