"""Tests for application assembly: schemas, logging and error handlers."""

import logging

from fastapi.testclient import TestClient

from warehouse_api.app.core.config import Settings
from warehouse_api.app.core.logging_config import setup_logging
from warehouse_api.app.main import create_app
from warehouse_api.app.schemas.product import ProductCreate


def test_create_schema_documents_examples():
    properties = ProductCreate.model_json_schema()["properties"]
    assert properties["name"]["examples"] == ["Apples"]
    assert properties["unit"]["examples"] == ["kg"]


class TestSetupLogging:

    def test_configures_root_once(self, monkeypatch):
        root = logging.getLogger()
        pymongo_logger = logging.getLogger("pymongo")
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setattr(root, "level", root.level)
        monkeypatch.setattr(pymongo_logger, "level", pymongo_logger.level)

        setup_logging("info")
        setup_logging("debug")

        assert len(root.handlers) == 1
        assert root.level == logging.INFO
        assert pymongo_logger.level == logging.WARNING

    def test_file_handler(self, monkeypatch, tmp_path):
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setattr(root, "level", root.level)

        setup_logging("DEBUG", str(tmp_path / "app.log"))

        assert any(isinstance(h, logging.FileHandler) for h in root.handlers)
        for handler in root.handlers:
            handler.close()


class ExplodingStore:
    """Store double failing with an error that is not a driver error."""

    def __getattr__(self, name):
        def fail(*args, **kwargs):
            raise RuntimeError("unexpected")
        return fail


def test_unhandled_error_is_generic_500_without_app_log(caplog):
    app = create_app(store=ExplodingStore(), app_settings=Settings(seed_on_startup=False))
    client = TestClient(app, raise_server_exceptions=False)

    with caplog.at_level(logging.ERROR, logger="warehouse_api"):
        response = client.get("/products")

    assert response.status_code == 500
    assert response.json() == {"detail": "Server error"}
    assert not [r for r in caplog.records if r.name.startswith("warehouse_api")]
