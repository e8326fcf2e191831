"""
Top-level router.

Aggregates the domain routers.  Paths are served without a version
prefix because existing clients call ``/products`` and
``/inventory-report`` directly.
"""

from fastapi import APIRouter

from .endpoints import products, reports

router = APIRouter()

router.include_router(products.router, prefix="/products", tags=["products"])
# The reports router defines its own path.
router.include_router(reports.router, tags=["reports"])
