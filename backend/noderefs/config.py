"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) - single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: in-cluster API server and
      service account token paths work without any env vars
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from noderefs.core.domain_types import InventoryBackend


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="NODEREFS_", case_sensitive=False,
    )

    # Inventory
    inventory_backend: InventoryBackend = InventoryBackend.KUBERNETES
    cluster_name: str = "default"
    label_selector: str | None = None

    # Kubernetes API
    kube_api_url: str = "https://kubernetes.default.svc"
    kube_token: str | None = None
    kube_ca_path: str | None = "/var/run/secrets/kubernetes.io/serviceaccount/ca.crt"
    kube_verify_tls: bool = True
    kube_timeout_seconds: float = 10.0
    kube_page_size: int = 500

    @field_validator("kube_api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # Database mirror
    database_url: str = (
        "postgresql+asyncpg://noderefs:noderefs@db:5432/noderefs"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 5
    database_max_overflow: int = 5

    # Resolution
    min_ready_seconds: int = 0

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
