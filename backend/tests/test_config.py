"""Settings - env-driven configuration with validated defaults."""

import pytest
from pydantic import ValidationError

from noderefs.config import Settings, get_settings
from noderefs.core.domain_types import InventoryBackend


def test_defaults():
    settings = Settings(_env_file=None, inventory_backend="kubernetes")
    assert settings.inventory_backend is InventoryBackend.KUBERNETES
    assert settings.kube_api_url == "https://kubernetes.default.svc"
    assert settings.kube_page_size == 500
    assert settings.min_ready_seconds == 0
    assert settings.log_format == "json"


def test_reads_prefixed_env(monkeypatch):
    monkeypatch.setenv("NODEREFS_CLUSTER_NAME", "workload-a")
    monkeypatch.setenv("NODEREFS_INVENTORY_BACKEND", "database")
    monkeypatch.setenv("NODEREFS_MIN_READY_SECONDS", "30")
    settings = Settings(_env_file=None)
    assert settings.cluster_name == "workload-a"
    assert settings.inventory_backend is InventoryBackend.DATABASE
    assert settings.min_ready_seconds == 30


def test_rewrites_plain_postgres_url():
    settings = Settings(_env_file=None, database_url="postgresql://u:p@db:5432/x")
    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/x"


def test_strips_trailing_slash_from_api_url():
    settings = Settings(_env_file=None, kube_api_url="https://api.test:6443/")
    assert settings.kube_api_url == "https://api.test:6443"


def test_rejects_unknown_backend():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, inventory_backend="etcd")


def test_get_settings_is_cached():
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
