"""Pydantic model for the inventory report."""

from pydantic import BaseModel


class InventoryReport(BaseModel):
    """Totals over every product in the warehouse."""

    totalProducts: int
    totalQuantity: int
    totalValue: float
