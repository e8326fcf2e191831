"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts against a local MongoDB without any setup.  In a
production deployment you should override these via environment
variables.
"""

import os
from dataclasses import dataclass
from pathlib import Path

# Bundled product list used to populate an empty collection.
DEFAULT_SEED_FILE = str(Path(__file__).resolve().parent.parent.parent / "data" / "products.json")


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Warehouse Inventory API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # MongoDB connection.  The products live in a single collection;
    # a sibling ``counters`` collection in the same database keeps the
    # last issued product id.
    mongo_url: str = os.getenv("MONGO_URL", "mongodb://localhost:27017")
    database_name: str = os.getenv("MONGO_DB", "warehouseDB")
    collection_name: str = os.getenv("MONGO_COLLECTION", "products")

    # Seed data is loaded once, at startup, when the collection is empty.
    seed_file: str = os.getenv("SEED_FILE", DEFAULT_SEED_FILE)
    seed_on_startup: bool = os.getenv("SEED_ON_STARTUP", "true").lower() in {"1", "true", "yes"}

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
