"""Per-view state holders.

Each view owns the lists it displays and an ``error`` (or ``message``)
string. Actions return True on success. On failure the message is set
and the lists are left exactly as they were; the only exception is a
partially recorded sale, where the persisted rows no longer match what
is shown until the next refresh.
"""

from __future__ import annotations

import dataclasses

from insuite.application.add_inventory_item import AddInventoryItemHandler
from insuite.application.delete_inventory_item import DeleteInventoryItemHandler
from insuite.application.list_inventory import ListInventoryHandler
from insuite.application.list_sales import ListSalesHandler
from insuite.application.record_sale import RecordSaleHandler
from insuite.application.reset_data import RESET_SUCCESS_MESSAGE, ResetDataHandler
from insuite.application.session_store import SessionStore
from insuite.application.show_dashboard import ShowDashboardHandler
from insuite.application.update_inventory_item import UpdateInventoryItemHandler
from insuite.domain.exceptions import DomainException, EntityNotFoundError
from insuite.domain.model.inventory import InventoryItem
from insuite.domain.model.sale import Sale
from insuite.domain.model.value_objects import Money
from insuite.domain.repository.inventory_repository import InventoryRepository
from insuite.domain.repository.sales_repository import SalesRepository
from insuite.domain.service.dashboard import DashboardSummary, summarize


class InventoryView:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._list = ListInventoryHandler(inventory_repo)
        self._add = AddInventoryItemHandler(inventory_repo)
        self._update = UpdateInventoryItemHandler(inventory_repo)
        self._delete = DeleteInventoryItemHandler(inventory_repo)
        self.items: list[InventoryItem] = []
        self.error: str | None = None

    def refresh(self) -> bool:
        try:
            self.items = self._list.handle()
        except DomainException as exc:
            self.error = str(exc)
            return False
        return True

    def add(self, product_name, quantity, price, cost, supplier_id=None) -> bool:
        try:
            item = self._add.handle(product_name, quantity, price, cost, supplier_id)
        except DomainException as exc:
            self.error = str(exc)
            return False
        self.items = [*self.items, item]
        self.error = None
        return True

    def edit(self, item_id: int, **changes) -> bool:
        """Apply *changes* to the local record and send the full record.

        ``price`` and ``cost`` may be given as plain numbers or strings.
        The list is refetched afterwards because the remote copy wins.
        """
        try:
            current = self._local(item_id)
            for name in ("price", "cost"):
                if name in changes and not isinstance(changes[name], Money):
                    changes[name] = Money.of(changes[name])
            edited = dataclasses.replace(current, **changes)
            self._update.handle(edited)
        except DomainException as exc:
            self.error = str(exc)
            return False
        self.error = None
        return self.refresh()

    def delete(self, item_id: int) -> bool:
        try:
            self._delete.handle(item_id)
        except DomainException as exc:
            self.error = str(exc)
            return False
        self.items = [item for item in self.items if item.id != item_id]
        self.error = None
        return True

    def _local(self, item_id: int) -> InventoryItem:
        for item in self.items:
            if item.id == item_id:
                return item
        raise EntityNotFoundError(f"Inventory item #{item_id} not found")


class SalesView:

    def __init__(
        self,
        sales_repo: SalesRepository,
        inventory_repo: InventoryRepository,
        compensate: bool = False,
    ) -> None:
        self._list_sales = ListSalesHandler(sales_repo)
        self._list_inventory = ListInventoryHandler(inventory_repo)
        self._record = RecordSaleHandler(sales_repo, inventory_repo, compensate=compensate)
        self.sales: list[Sale] = []
        self.inventory: list[InventoryItem] = []
        self.error: str | None = None

    def refresh(self) -> bool:
        # Both lists are fetched independently; either failure is reported.
        ok = True
        try:
            self.sales = self._list_sales.handle()
        except DomainException as exc:
            self.error = str(exc)
            ok = False
        if not self.refresh_inventory():
            ok = False
        return ok

    def refresh_inventory(self) -> bool:
        try:
            self.inventory = self._list_inventory.handle()
        except DomainException as exc:
            self.error = str(exc)
            return False
        return True

    def record(self, product_id: int | None, quantity: int | None) -> bool:
        self.error = None
        try:
            sale = self._record.handle(product_id, quantity, self.inventory)
        except DomainException as exc:
            self.error = str(exc)
            return False
        self.sales = [sale, *self.sales]
        self.refresh_inventory()
        return True

    def product_names(self) -> dict[int, str]:
        return {item.id: item.product_name for item in self.inventory}  # type: ignore[misc]


class DashboardView:

    def __init__(
        self,
        sales_repo: SalesRepository,
        inventory_repo: InventoryRepository,
    ) -> None:
        self._show = ShowDashboardHandler(sales_repo, inventory_repo)
        self.summary: DashboardSummary = summarize([], [])
        self.error: str | None = None

    def refresh(self) -> bool:
        try:
            self.summary = self._show.handle()
        except DomainException as exc:
            self.error = str(exc)
            return False
        self.error = None
        return True


class AccountView:

    def __init__(
        self,
        session_store: SessionStore,
        sales_repo: SalesRepository,
        inventory_repo: InventoryRepository,
    ) -> None:
        self._session_store = session_store
        self._reset = ResetDataHandler(sales_repo, inventory_repo)
        self.is_resetting = False
        self.message = ""

    @property
    def email(self) -> str | None:
        user = self._session_store.user
        return user.email if user else None

    def reset(self) -> bool:
        self.is_resetting = True
        self.message = ""
        try:
            self._reset.handle()
        except DomainException as exc:
            self.message = str(exc)
            return False
        finally:
            self.is_resetting = False
        self.message = RESET_SUCCESS_MESSAGE
        return True
