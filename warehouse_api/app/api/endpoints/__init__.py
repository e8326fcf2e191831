"""
Endpoint subpackage.

Each module in this package defines an APIRouter for a specific
domain (products, reports).  The routers are aggregated in
``routes.py`` and then included in the main application.
"""
