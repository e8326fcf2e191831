"""
One-time population of an empty product collection.

``seed_products`` is called from the application startup hook before
the server accepts connections.  When the collection already holds
products it does nothing; otherwise it reads the bundled JSON list,
numbers the entries ``1..N`` in file order and inserts them in a
single batch.  Any problem with the seed file raises ``SeedDataError``
so that startup aborts instead of serving an unprepared store.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from .db import ProductStore
from .exceptions import SeedDataError

logger = logging.getLogger(__name__)


def load_seed_file(path: str) -> List[Dict[str, Any]]:
    """Read the seed file and return its product list."""
    seed_path = Path(path)
    try:
        with seed_path.open(encoding="utf-8") as fh:
            data = json.load(fh)
    except FileNotFoundError as e:
        raise SeedDataError(f"Seed file not found: {seed_path}") from e
    except json.JSONDecodeError as e:
        raise SeedDataError(f"Seed file {seed_path} is not valid JSON: {e}") from e

    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise SeedDataError(f"Seed file {seed_path} must contain a JSON array of objects")
    return data


def seed_products(store: ProductStore, path: str) -> int:
    """Insert the seed products if the store is empty.

    Returns the number of inserted products (0 when the collection was
    already populated).
    """
    if store.count() > 0:
        logger.info("Collection already contains products, skipping seed")
        return 0

    products = load_seed_file(path)
    if not products:
        logger.warning("Seed file %s is empty, nothing to insert", path)
        return 0

    for index, product in enumerate(products):
        product["id"] = index + 1

    inserted = store.insert_many(products)
    store.advance_id_counter(len(products))
    logger.info("%d products added to the collection", inserted)
    return inserted
