"""Configuration management for the contacts services.

This module centralizes environment-driven configuration for the contacts
search index and its HTTP API. It builds on ``pydantic_settings.BaseSettings``
so configuration can be provided via environment variables, ``.env`` files,
or defaults.

Highlights
- Field names match their environment variables (case-insensitive)
- One place to discover the OpenSearch connection knobs
- Small service-specific subclasses to keep concerns clear

Usage
- ``config = ApiConfig()`` in the API entrypoint
- Or select dynamically: ``config = get_config("api")``
"""

from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base configuration shared by every contacts entrypoint.

    Notes
    - Add new shared settings here so downstream services inherit them.
    - Prefer a typed field over reading ``os.environ`` directly.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    contacts_env: str = Field(default="local")

    # Logging
    contacts_log_level: str = Field(default="INFO")
    contacts_log_format: str = Field(default="json")

    # OpenSearch
    contacts_opensearch_hosts: str = Field(default="http://localhost:9200")
    contacts_opensearch_index: str = Field(default="contacts")
    contacts_opensearch_username: Optional[str] = Field(default=None)
    contacts_opensearch_password: Optional[str] = Field(default=None)
    contacts_opensearch_verify_certs: bool = Field(default=False)
    contacts_opensearch_ssl_assert_hostname: bool = Field(default=False)
    contacts_opensearch_ssl_show_warn: bool = Field(default=False)
    contacts_opensearch_timeout: int = Field(default=10)

    @property
    def opensearch_hosts(self) -> List[str]:
        """Comma-separated ``contacts_opensearch_hosts`` as a list."""
        return [host.strip() for host in self.contacts_opensearch_hosts.split(",") if host.strip()]


class ApiConfig(BaseConfig):
    """Configuration for the contacts HTTP API."""

    contacts_api_host: str = Field(default="0.0.0.0")
    contacts_api_port: int = Field(default=9010)


class BootstrapConfig(BaseConfig):
    """Configuration for the index bootstrap script.

    Keeps cluster readiness and shard settings together.
    """

    contacts_bootstrap_wait_timeout: int = Field(default=60)
    contacts_index_shards: int = Field(default=1)
    contacts_index_replicas: int = Field(default=0)


def get_config(service_name: str) -> BaseConfig:
    """Get configuration for a specific entrypoint.

    Parameters
    - service_name: ``api`` or ``bootstrap``; anything else yields ``BaseConfig``.
    """
    config_map = {
        "api": ApiConfig,
        "bootstrap": BootstrapConfig,
    }

    config_class = config_map.get(service_name, BaseConfig)
    return config_class()
