"""
core/config.py
----------------

Library configuration module.

Defines settings loaded from the environment using
``pydantic-settings``. The only behavioural setting is the ambient
base URL that :class:`httpwrap.clients.http_client.HTTPClient` falls
back to when it is constructed without one. A process has no "own
origin" the way a browser page does, so the default is an empty
string and deployments that want an implicit origin set
``HTTPWRAP_BASE_URL`` instead.
"""

from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables.

    Variables are prefixed with ``HTTPWRAP_``. For example, to point
    every client without an explicit base URL at a local service you
    can set ``HTTPWRAP_BASE_URL=http://localhost:8000``.
    """

    base_url: str = Field("", description="Origin prepended to endpoints when no base URL is given.")

    # Logging
    log_level: str = Field("INFO", description="Level applied by configure_logging().")
    log_request_headers: bool = Field(False, description="Include sanitised request headers in DEBUG request records.")

    model_config = SettingsConfigDict(env_prefix="HTTPWRAP_", env_file=None, case_sensitive=False)


@lru_cache()
def get_settings() -> Settings:
    """Return a cached instance of the library settings.

    Tests that change the environment must call
    ``get_settings.cache_clear()`` to see the new values.
    """
    return Settings()
