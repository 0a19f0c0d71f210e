"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with an in‑memory store and no extra setup.  In a
production deployment you should point ``STORE_BACKEND`` at ``mongo``
and provide the connection settings via environment variables.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Service Catalog API")
    api_version: str = os.getenv("API_VERSION", "4.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Either ``memory`` (records are lost on restart) or ``mongo``.
    store_backend: str = os.getenv("STORE_BACKEND", "memory")

    mongodb_uri: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
    mongodb_db: str = os.getenv("MONGODB_DB", "service_catalog")
    mongodb_collection: str = os.getenv("MONGODB_COLLECTION", "serviceSpecifications")

    # Base URL used for links generated outside of a request (the seed
    # record).  Responses always use the host the request was served on.
    public_url: str = os.getenv("PUBLIC_URL", "")

    # Preload the fixed record conformance test kits look for.
    seed_test_record: bool = _env_flag("SEED_TEST_RECORD", "true")

    # Comma‑separated list of allowed origins, ``*`` for any.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    @property
    def base_url(self) -> str:
        return (self.public_url or f"http://localhost:{self.port}").rstrip("/")

    @property
    def allowed_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# TMF633 resource root.  Every route and every ``href`` hangs off it.
BASE_PATH = "/tmf-api/serviceCatalogManagement/v4"

# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
