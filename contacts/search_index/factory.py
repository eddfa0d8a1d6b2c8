"""Construction helpers for the contact search index.

Keeps OpenSearch client wiring in one place so the API, the bootstrap
script and tests build it the same way from ``BaseConfig``.
"""

from typing import List, Optional

from opensearchpy import OpenSearch
import structlog

from ..common.config import BaseConfig
from ..common.metrics import MetricsCollector
from .opensearch import ContactSearchIndex

logger = structlog.get_logger("search_index.factory")


def create_opensearch_client(
    hosts: List[str],
    username: Optional[str] = None,
    password: Optional[str] = None,
    verify_certs: bool = False,
    ssl_assert_hostname: bool = False,
    ssl_show_warn: bool = False,
    timeout: int = 10,
) -> OpenSearch:
    """Create an OpenSearch client.

    ``timeout`` applies to every request made through the client.
    """
    if not hosts:
        raise ValueError("OpenSearch requires at least one host")

    return OpenSearch(
        hosts=hosts,
        http_auth=(username, password) if username and password else None,
        verify_certs=verify_certs,
        ssl_assert_hostname=ssl_assert_hostname,
        ssl_show_warn=ssl_show_warn,
        use_ssl=hosts[0].startswith('https'),
        timeout=timeout,
    )


def create_client_from_config(config: BaseConfig) -> OpenSearch:
    """Create an OpenSearch client from the ``contacts_opensearch_*`` settings."""
    return create_opensearch_client(
        hosts=config.opensearch_hosts,
        username=config.contacts_opensearch_username,
        password=config.contacts_opensearch_password,
        verify_certs=config.contacts_opensearch_verify_certs,
        ssl_assert_hostname=config.contacts_opensearch_ssl_assert_hostname,
        ssl_show_warn=config.contacts_opensearch_ssl_show_warn,
        timeout=config.contacts_opensearch_timeout,
    )


def create_contact_index(
    config: BaseConfig,
    client: Optional[OpenSearch] = None,
    metrics: Optional[MetricsCollector] = None,
) -> ContactSearchIndex:
    """Create a ``ContactSearchIndex`` for the configured index.

    Pass ``client`` to reuse an existing connection instead of opening one.
    """
    if client is None:
        client = create_client_from_config(config)

    logger.info(
        "Contact search index configured",
        hosts=config.opensearch_hosts,
        index_name=config.contacts_opensearch_index,
    )
    return ContactSearchIndex(
        client=client,
        index_name=config.contacts_opensearch_index,
        metrics=metrics,
    )
