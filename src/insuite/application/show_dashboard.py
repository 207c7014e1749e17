"""Application service: Show Dashboard use case (query)."""

from __future__ import annotations

import logging

from insuite.domain.exceptions import RemoteCallError
from insuite.domain.repository.inventory_repository import InventoryRepository
from insuite.domain.repository.sales_repository import SalesRepository
from insuite.domain.service.dashboard import DashboardSummary, summarize

logger = logging.getLogger(__name__)


class ShowDashboardHandler:

    def __init__(
        self,
        sales_repo: SalesRepository,
        inventory_repo: InventoryRepository,
    ) -> None:
        self._sales_repo = sales_repo
        self._inventory_repo = inventory_repo

    def handle(self) -> DashboardSummary:
        try:
            sales = self._sales_repo.list_all()
            inventory = self._inventory_repo.list_all()
        except RemoteCallError as exc:
            logger.error("Error fetching dashboard data: %s", exc)
            raise RemoteCallError(f"Error fetching dashboard data: {exc}") from exc
        return summarize(sales, inventory)
