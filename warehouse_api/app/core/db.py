"""
MongoDB integration for the product inventory.

This module provides ``ProductStore``, a small adapter around a
``pymongo`` collection which exposes exactly the operations the
services need: ordered and filtered queries, single-document writes,
id allocation and the inventory aggregation.  Services receive a store
instance instead of reaching for a global connection, which also lets
tests hand in a ``mongomock`` collection.

``open_store`` builds the client from ``Settings`` and is used by the
application startup hook.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from pymongo import ASCENDING, DESCENDING, MongoClient, ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database

from .config import Settings

logger = logging.getLogger(__name__)

# Key of the document in the ``counters`` collection holding the last
# issued product id.
PRODUCT_ID_COUNTER = "product_id"


class ProductStore:
    """Store adapter for the ``products`` collection.

    Products are addressed by their domain ``id`` field, never by the
    collection's own ``_id``.  A companion ``counters`` collection keeps
    the highest id ever issued so that ids are not reused after
    deletions.
    """

    def __init__(self, collection: Collection, counters: Collection):
        self._collection = collection
        self._counters = counters

    @classmethod
    def from_database(cls, database: Database, collection_name: str = "products") -> "ProductStore":
        """Build a store over ``collection_name`` and ``counters`` in ``database``."""
        return cls(database[collection_name], database["counters"])

    def ensure_indexes(self) -> None:
        """Create the unique indexes on ``id`` and ``name``.

        The name index turns a concurrent duplicate create into a
        ``DuplicateKeyError`` instead of a second document.
        """
        self._collection.create_index([("id", ASCENDING)], unique=True, name="product_id_unique")
        self._collection.create_index([("name", ASCENDING)], unique=True, name="product_name_unique")

    # Queries

    def count(self) -> int:
        return self._collection.count_documents({})

    def find(self, filter: Dict[str, Any], sort: List[Tuple[str, int]]) -> List[Dict[str, Any]]:
        """Return all documents matching ``filter`` ordered by ``sort``."""
        return list(self._collection.find(filter).sort(sort))

    def find_by_id(self, product_id: int) -> Optional[Dict[str, Any]]:
        return self._collection.find_one({"id": product_id})

    def find_by_name(self, name: str) -> Optional[Dict[str, Any]]:
        return self._collection.find_one({"name": name})

    def max_id(self) -> int:
        """Return the highest domain id currently stored, or 0."""
        last = self._collection.find_one({}, sort=[("id", DESCENDING)])
        return last["id"] if last else 0

    def totals(self) -> Optional[Dict[str, Any]]:
        """Aggregate count, quantity and value over the whole collection.

        Returns ``None`` when the collection is empty.  Servers emit no
        ``$group`` output for an empty input, but some report a
        zero-count document instead, so both are treated alike.
        """
        pipeline = [
            {
                "$group": {
                    "_id": None,
                    "totalProducts": {"$sum": 1},
                    "totalQuantity": {"$sum": "$quantity"},
                    "totalValue": {"$sum": {"$multiply": ["$price", "$quantity"]}},
                }
            }
        ]
        report = list(self._collection.aggregate(pipeline))
        if not report or report[0]["totalProducts"] == 0:
            return None
        return {
            "totalProducts": report[0]["totalProducts"],
            "totalQuantity": report[0]["totalQuantity"],
            "totalValue": report[0]["totalValue"],
        }

    # Writes

    def next_id(self) -> int:
        """Atomically allocate the next product id.

        The counter is first raised to the highest stored id (covering
        documents inserted without going through the counter) and then
        incremented, so the result is always greater than every id that
        exists or was ever issued.
        """
        self._counters.update_one(
            {"_id": PRODUCT_ID_COUNTER},
            {"$max": {"seq": self.max_id()}},
            upsert=True,
        )
        counter = self._counters.find_one_and_update(
            {"_id": PRODUCT_ID_COUNTER},
            {"$inc": {"seq": 1}},
            return_document=ReturnDocument.AFTER,
        )
        return counter["seq"]

    def advance_id_counter(self, product_id: int) -> None:
        """Make sure the id counter is at least ``product_id``."""
        self._counters.update_one(
            {"_id": PRODUCT_ID_COUNTER},
            {"$max": {"seq": product_id}},
            upsert=True,
        )

    def insert(self, document: Dict[str, Any]) -> None:
        self._collection.insert_one(document)

    def insert_many(self, documents: List[Dict[str, Any]]) -> int:
        """Insert ``documents`` in one batch and return how many were stored."""
        result = self._collection.insert_many(documents)
        return len(result.inserted_ids)

    def update_fields(self, product_id: int, fields: Dict[str, Any]) -> int:
        """``$set`` ``fields`` on the product and return the modified count."""
        result = self._collection.update_one({"id": product_id}, {"$set": fields})
        return result.modified_count

    def delete(self, product_id: int) -> int:
        """Delete the product and return the deleted count."""
        result = self._collection.delete_one({"id": product_id})
        return result.deleted_count


def open_store(settings: Settings) -> Tuple[MongoClient, ProductStore]:
    """Connect to MongoDB and return the client together with a store.

    The server is pinged once so that an unreachable database fails at
    startup rather than on the first request.  The caller owns the
    client and must close it on shutdown.
    """
    client: MongoClient = MongoClient(settings.mongo_url)
    client.admin.command("ping")
    logger.info("Connected to MongoDB database '%s'", settings.database_name)
    store = ProductStore.from_database(client[settings.database_name], settings.collection_name)
    store.ensure_indexes()
    return client, store
