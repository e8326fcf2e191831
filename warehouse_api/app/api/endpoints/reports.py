"""
Inventory report endpoint.

Returns the number of products, the total quantity in stock and the
total stock value.  Responds with 404 when the warehouse is empty.
"""

from fastapi import APIRouter, Depends, HTTPException

from warehouse_api.app.api.deps import get_report_service
from warehouse_api.app.core.exceptions import ProductError
from warehouse_api.app.schemas.report import InventoryReport
from warehouse_api.app.services.report_service import ReportService

router = APIRouter()


@router.get("/inventory-report", response_model=InventoryReport)
def inventory_report(service: ReportService = Depends(get_report_service)) -> InventoryReport:
    """Aggregate totals over all products."""
    try:
        return service.inventory_report()
    except ProductError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e)) from e
