"""Application service: List Sales use case (query)."""

from __future__ import annotations

import logging

from insuite.domain.exceptions import RemoteCallError
from insuite.domain.model.sale import Sale
from insuite.domain.repository.sales_repository import SalesRepository

logger = logging.getLogger(__name__)


class ListSalesHandler:

    def __init__(self, sales_repo: SalesRepository) -> None:
        self._sales_repo = sales_repo

    def handle(self) -> list[Sale]:
        try:
            return self._sales_repo.list_all()
        except RemoteCallError as exc:
            logger.error("Error fetching sales: %s", exc)
            raise RemoteCallError(f"Error fetching sales: {exc}") from exc
