"""Entry point for the Warehouse Inventory API.

Launches the FastAPI application with Uvicorn.  Host, port and the
MongoDB connection are read from environment variables (see
``warehouse_api/app/core/config.py``).

Usage:
    python run.py
"""
import logging

from uvicorn import Config, Server

from warehouse_api.app.core.config import settings
from warehouse_api.app.main import app


def main() -> None:
    """Serve the API until interrupted.

    Startup seeding runs before the listener accepts connections; if
    it fails, Uvicorn exits with an error.
    """
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, lifespan="on", log_level=settings.log_level.lower())
    server = Server(config)
    server.run()
    if not server.started:
        logging.getLogger(__name__).error("Server failed to start")
        raise SystemExit(1)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        pass
