"""
Service layer for inventory reporting.

The report is computed by the store in a single aggregation pass over
the whole collection; nothing is cached.
"""

from ..core.db import ProductStore
from ..core.exceptions import EmptyInventoryError
from ..schemas.report import InventoryReport


class ReportService:
    """Aggregated metrics over the product collection."""

    def __init__(self, store: ProductStore):
        self.store = store

    def inventory_report(self) -> InventoryReport:
        """Return product count, total quantity and total stock value.

        Raises ``EmptyInventoryError`` when there are no products.
        """
        totals = self.store.totals()
        if totals is None:
            raise EmptyInventoryError("No data available to generate the report.")
        return InventoryReport(**totals)
