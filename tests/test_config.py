import importlib

import pytest

from bug_tracker import config


@pytest.fixture
def reload_config(monkeypatch):
    """Reload config under a patched environment, then restore it."""
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


def test_production_base_url():
    assert config.resolve_base_url("production") == "https://your-api-domain.com"


def test_non_production_base_url():
    assert config.resolve_base_url("development") == "http://localhost:3000"
    assert config.resolve_base_url("test") == "http://localhost:3000"


def test_docs_always_point_at_local_openapi():
    assert config.OPENAPI_URL == "http://localhost:3000/openapi"


def test_port_is_fixed_and_matches_advertised_urls(monkeypatch, reload_config):
    monkeypatch.setenv("PORT", "8080")
    reload_config()

    assert config.PORT == 3000
    assert config.LOCAL_BASE_URL == f"http://localhost:{config.PORT}"
    assert config.OPENAPI_URL == f"http://localhost:{config.PORT}/openapi"


def test_host_defaults_to_all_interfaces(monkeypatch, reload_config):
    monkeypatch.delenv("HOST", raising=False)
    reload_config()

    assert config.HOST == "0.0.0.0"


def test_production_env_only_changes_public_base_url(monkeypatch, reload_config):
    monkeypatch.setenv("APP_ENV", "production")
    reload_config()

    assert config.PUBLIC_BASE_URL == "https://your-api-domain.com"
    assert config.OPENAPI_URL == "http://localhost:3000/openapi"


def test_served_urls_use_configured_port(client):
    doc = client.get("/openapi").json()
    page = client.get("/scalar").text

    assert doc["servers"][0]["url"] == f"http://localhost:{config.PORT}"
    assert f"http://localhost:{config.PORT}/openapi" in page
