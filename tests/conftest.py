import pytest
from fastapi.testclient import TestClient

from services.config_manager import ConfigManager


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config singleton at a fresh directory for every test"""
    monkeypatch.setenv("TEXT_DIFF_CONFIG_DIR", str(tmp_path))
    ConfigManager.reset_instance()
    yield tmp_path
    ConfigManager.reset_instance()


@pytest.fixture
def client():
    from main import app

    return TestClient(app)
