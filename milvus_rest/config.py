"""Client settings loaded from environment variables / ``.env`` file.

All configuration is expressed as a single :class:`Settings` Pydantic model.
The :func:`get_settings` factory is cached so the ``.env`` file is parsed
only once per process.

Only the transport and logging read these values; request shaping has no
configuration of its own.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralised client configuration.

    Attributes:
        transport_backend:   Registered transport name (``"httpx"``); checked
                             against the registry by
                             :func:`~milvus_rest.transport.factory.get_transport`.
        milvus_url:          Base URL of the Milvus server.
        milvus_api_prefix:   Path the REST API is mounted under.
        milvus_token:        Bearer token (``"user:password"`` or an API
                             key); empty disables the ``Authorization``
                             header.
        milvus_timeout:      Per-request timeout in seconds.
        milvus_max_retries:  Attempts made when the connection cannot be
                             established.
        log_level:           Python logging level name (e.g. ``"INFO"``).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Transport selection
    transport_backend: str = "httpx"

    # Milvus
    milvus_url: str = "http://localhost:19530"
    milvus_api_prefix: str = "v2/vectordb"
    milvus_token: str = ""
    milvus_timeout: float = 30.0
    milvus_max_retries: int = 3

    # Application
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return the cached :class:`Settings` singleton."""
    return Settings()
