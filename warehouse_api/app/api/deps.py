"""
FastAPI dependencies.

The store is created by the application startup hook (or passed to
``create_app`` by tests) and kept on ``app.state``.  Handlers never
touch it directly; they receive a service bound to it.
"""

import logging

from fastapi import Depends, HTTPException, Request, status

from ..core.db import ProductStore
from ..services.product_service import ProductService
from ..services.report_service import ReportService

logger = logging.getLogger(__name__)


def get_store(request: Request) -> ProductStore:
    """Return the store attached to the running application."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        logger.error("Request received before the product store was initialised")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error")
    return store


def get_product_service(store: ProductStore = Depends(get_store)) -> ProductService:
    return ProductService(store)


def get_report_service(store: ProductStore = Depends(get_store)) -> ReportService:
    return ReportService(store)
