from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient

from excatalog.main import app
from excatalog.models import Catalog, CatalogRecord
from excatalog.routes import exercise as exercise_routes
from excatalog.services.catalog import build_catalog
from tests.test_data import DATASET

# --------------- Catalog ---------------


@pytest.fixture
def catalog() -> Catalog:
    """Catalog built from the three-row test dataset."""
    return build_catalog(DATASET)


@pytest.fixture
def record_factory() -> Callable[..., CatalogRecord]:
    def _make(**overrides: Any) -> CatalogRecord:
        base = {
            "id": "biceps-barbell-curl",
            "muscle_group": "Biceps",
            "name": "Barbell Curl",
            "equipment": "Barbell",
            "video_links": ("https://x/v1.mp4",),
            "difficulty": "Intermediate",
            "force": "Pull",
            "grip": "Underhand: Supinated",
            "mechanic": "Isolation",
            "instructions": ("Stand up", "Curl the weight"),
            "search_keywords": frozenset({"barbell", "curl", "biceps"}),
        }
        base.update(overrides)
        return CatalogRecord(**base)

    return _make


# --------------- Fake sources ---------------


class FakeSource:
    """Stands in for a DatasetSource; raises `error` when set."""

    def __init__(self, text: str = DATASET, error: Exception | None = None):
        self.text = text
        self.error = error
        self.reads = 0

    def read_text(self) -> str:
        self.reads += 1
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def fake_source() -> Callable[..., FakeSource]:
    """
    Factory fixture returning FakeSource objects.
    Example:
        source = fake_source(error=DatasetReadError("boom"))
    """

    def _make(text: str = DATASET, error: Exception | None = None) -> FakeSource:
        return FakeSource(text=text, error=error)

    return _make


# --------------- Test Clients ---------------


@pytest.fixture(scope="session")
def app_instance():
    return app


@pytest.fixture
def client(app_instance, catalog):
    """
    Client with the published catalog replaced by the test catalog.
    """
    app_instance.dependency_overrides[exercise_routes.get_catalog] = lambda: catalog
    client = TestClient(app_instance, raise_server_exceptions=False)

    try:
        yield client
    finally:
        app_instance.dependency_overrides.clear()
