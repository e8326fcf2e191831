"""
Service layer for products.

``ProductService`` implements listing with filters and sorting as well
as the create, update and delete operations.  It works on an injected
``ProductStore`` and holds no state between requests.

Field presence follows a "truthy" rule kept for compatibility with the
existing clients of this API: on create every field must be truthy, so
a ``price`` or ``quantity`` of ``0`` is rejected; on update a falsy
value (``0``, ``""``) is ignored and the stored value is kept.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional

from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError

from ..core.db import ProductStore
from ..core.exceptions import (
    DuplicateProductError,
    InvalidProductError,
    ProductNotFoundError,
    ProductOutOfStockError,
    StoreAnomalyError,
)
from ..schemas.product import ProductCreate, ProductFilter, ProductRead, ProductUpdate

logger = logging.getLogger(__name__)

PRODUCT_FIELDS = ("name", "price", "description", "quantity", "unit")
DEFAULT_SORT_FIELD = "name"

MSG_CREATED = "Product added successfully."
MSG_UPDATED = "Product updated successfully."
MSG_UNCHANGED = "No changes made to the product."
MSG_DELETED = "Product deleted successfully."


class ProductService:
    """Business logic for the product inventory."""

    def __init__(self, store: ProductStore):
        self.store = store

    # Query

    def list_products(self, filters: Optional[ProductFilter] = None, sort_by: Optional[str] = None) -> List[ProductRead]:
        """Return every product matching ``filters`` sorted ascending.

        ``sort_by`` names a product field.  The value ``id`` sorts by the
        collection's internal ``_id`` (insertion order) rather than the
        domain id; without ``sort_by`` products are ordered by name.
        """
        query = self.build_filter(filters or ProductFilter())
        sort = [(self.sort_field(sort_by), ASCENDING)]
        return [self.to_read(doc) for doc in self.store.find(query, sort)]

    @staticmethod
    def build_filter(filters: ProductFilter) -> Dict[str, Any]:
        """Translate ``filters`` into a MongoDB query document."""
        query: Dict[str, Any] = {}
        if filters.name:
            # Substring match, so the user input is not a pattern.
            query["name"] = {"$regex": re.escape(filters.name), "$options": "i"}

        price: Dict[str, float] = {}
        if filters.min_price is not None:
            price["$gte"] = filters.min_price
        if filters.max_price is not None:
            price["$lte"] = filters.max_price
        if price:
            query["price"] = price

        quantity: Dict[str, int] = {}
        if filters.min_quantity is not None:
            quantity["$gte"] = filters.min_quantity
        if filters.max_quantity is not None:
            quantity["$lte"] = filters.max_quantity
        if quantity:
            query["quantity"] = quantity
        return query

    @staticmethod
    def sort_field(sort_by: Optional[str]) -> str:
        if not sort_by:
            return DEFAULT_SORT_FIELD
        return "_id" if sort_by == "id" else sort_by

    @staticmethod
    def to_read(doc: Dict[str, Any]) -> ProductRead:
        """Shape a stored document for the API, dropping ``_id``."""
        return ProductRead(
            id=str(doc["id"]),
            name=doc.get("name"),
            price=doc.get("price"),
            description=doc.get("description"),
            quantity=doc.get("quantity"),
            unit=doc.get("unit"),
        )

    # Mutations

    def add_product(self, data: ProductCreate) -> str:
        """Create a product and return the confirmation message.

        Raises ``InvalidProductError`` when a field is missing or falsy
        and ``DuplicateProductError`` when the name is taken.
        """
        if not all(getattr(data, field) for field in PRODUCT_FIELDS):
            raise InvalidProductError("Invalid input data. All fields are required.")
        if data.price < 0 or data.quantity < 0:
            raise InvalidProductError("Price and quantity must not be negative.")

        if self.store.find_by_name(data.name):
            raise DuplicateProductError("A product with the given name already exists.")

        document = {
            "id": self.store.next_id(),
            "name": data.name,
            "price": float(data.price),
            "description": data.description,
            "quantity": int(data.quantity),
            "unit": data.unit,
        }
        try:
            self.store.insert(document)
        except DuplicateKeyError:
            # Lost a race against a concurrent create of the same name.
            if self.store.find_by_name(data.name):
                raise DuplicateProductError("A product with the given name already exists.")
            raise
        logger.info("Added new product %s: %s", document["id"], data.name)
        return MSG_CREATED

    def update_product(self, product_id: int, data: ProductUpdate) -> str:
        """Apply a partial update and return the outcome message.

        Only truthy values in ``data`` replace stored values.  Returns the
        "no changes" message when the stored document is left as it was.
        """
        existing = self.store.find_by_id(product_id)
        if existing is None:
            raise ProductNotFoundError("A product with the given id does not exist.")

        if (data.price is not None and data.price < 0) or (data.quantity is not None and data.quantity < 0):
            raise InvalidProductError("Price and quantity must not be negative.")

        fields = {
            "name": data.name or existing.get("name"),
            "price": float(data.price) if data.price else existing.get("price"),
            "description": data.description or existing.get("description"),
            "quantity": int(data.quantity) if data.quantity else existing.get("quantity"),
            "unit": data.unit or existing.get("unit"),
        }
        try:
            modified = self.store.update_fields(product_id, fields)
        except DuplicateKeyError:
            raise DuplicateProductError("A product with the given name already exists.")

        if modified > 0:
            logger.info("Updated product %s", product_id)
            return MSG_UPDATED
        logger.info("No changes made to product %s", product_id)
        return MSG_UNCHANGED

    def delete_product(self, product_id: int) -> str:
        """Delete a product that still has stock."""
        existing = self.store.find_by_id(product_id)
        if existing is None:
            raise ProductNotFoundError("A product with the given id does not exist.")
        if existing.get("quantity") == 0:
            raise ProductOutOfStockError("The product is out of stock and cannot be deleted.")

        if not self.store.delete(product_id):
            logger.error("Product %s was not deleted", product_id)
            raise StoreAnomalyError("Error while deleting the product.")
        logger.info("Deleted product %s", product_id)
        return MSG_DELETED
