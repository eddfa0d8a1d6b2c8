"""Common utilities shared across the contacts services.

Includes:
- ``config``: pydantic-settings configuration from environment variables.
- ``logging``: structured logging setup with structlog.
- ``metrics``: Prometheus metrics helpers.

Import pattern:
- from contacts.common.config import BaseConfig
- from contacts.common.logging import configure_logging
"""
