import shutil
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from backend import storage

TEST_DATA_DIR = Path("data-tests")
PRESETS_DIR = Path(__file__).parent / "presets"


@pytest.fixture(autouse=True)
def clean_test_data():
    """Wipe and re-init data-tests/ (plans, user activities, config) before every test."""
    if TEST_DATA_DIR.exists():
        shutil.rmtree(TEST_DATA_DIR)
    storage.init_storage(TEST_DATA_DIR, presets_dir=PRESETS_DIR)
    yield


@pytest.fixture
def client() -> TestClient:
    """API client bound to the test data dir and the repo presets."""
    from backend.app import create_app

    return TestClient(create_app(TEST_DATA_DIR, presets_dir=PRESETS_DIR))
