#!/usr/bin/env python3
"""OpenSearch bootstrap script for the contacts index.

Waits for the cluster, then creates the contacts index with an explicit
mapping so name fields are both searchable and sortable.
"""

import argparse
import sys
import time
from typing import Any, Dict

import structlog
from opensearchpy import OpenSearch

from contacts.common.config import BootstrapConfig
from contacts.common.logging import configure_logging
from contacts.search_index.factory import create_client_from_config

logger = structlog.get_logger("opensearch_bootstrap")


def _name_field() -> Dict[str, Any]:
    return {
        "type": "text",
        "analyzer": "standard",
        "fields": {
            "keyword": {"type": "keyword"}
        }
    }


def contacts_index_body(shards: int = 1, replicas: int = 0) -> Dict[str, Any]:
    """Mapping and settings for the contacts index."""
    return {
        "mappings": {
            "properties": {
                "id": {"type": "keyword"},
                "firstname": _name_field(),
                "surname": _name_field(),
                "married_name": _name_field(),
                "gender": {"type": "keyword"},
                "birthdate": {"type": "date"},
                "mail": {"type": "keyword"},
                "phone": {"type": "keyword"},
                "mobile": {"type": "keyword"},
                "vote": {"type": "keyword"},
                "support": {"type": "keyword"},
                "group_id": {"type": "keyword"},
                "user_id": {"type": "keyword"},
                "address": {
                    "properties": {
                        "id": {"type": "keyword"},
                        "house_number": {"type": "keyword"},
                        "street": {"type": "text"},
                        "postal_code": {"type": "keyword"},
                        "city": _name_field(),
                        "county": {"type": "keyword"},
                        "state": {"type": "keyword"},
                        "country": {"type": "keyword"},
                        "addition": {"type": "text"},
                        "polling_station": {"type": "keyword"},
                        "position": {
                            "properties": {
                                "x": {"type": "double"},
                                "y": {"type": "double"},
                                "latitude": {"type": "double"},
                                "longitude": {"type": "double"}
                            }
                        }
                    }
                },
                "notes": {
                    "type": "nested",
                    "properties": {
                        "id": {"type": "keyword"},
                        "content": {"type": "text"},
                        "date": {"type": "date"}
                    }
                },
                "tags": {
                    "properties": {
                        "id": {"type": "keyword"},
                        "name": {"type": "keyword"}
                    }
                }
            }
        },
        "settings": {
            "index": {
                "number_of_shards": shards,
                "number_of_replicas": replicas,
                "refresh_interval": "1s"
            }
        }
    }


def create_contacts_index(client: OpenSearch, index_name: str, shards: int = 1, replicas: int = 0) -> bool:
    """Create the contacts index unless it exists.

    Returns ``True`` when the index was created.
    """
    try:
        if client.indices.exists(index=index_name):
            logger.info("Index already exists", index_name=index_name)
            return False

        client.indices.create(index=index_name, body=contacts_index_body(shards, replicas))
        logger.info("Created contacts index", index_name=index_name)
        return True

    except Exception as e:
        logger.error("Failed to create contacts index", index_name=index_name, error=str(e))
        raise


def wait_for_cluster(client: OpenSearch, timeout: int = 60, interval: float = 5) -> None:
    """Wait for OpenSearch cluster to be ready."""
    start_time = time.time()

    while time.time() - start_time < timeout:
        try:
            health = client.cluster.health()
            if health['status'] in ['green', 'yellow']:
                logger.info("OpenSearch cluster is ready", status=health['status'])
                return
            logger.info("Waiting for OpenSearch cluster", status=health['status'])
        except Exception as e:
            logger.warning("Failed to check cluster health", error=str(e))
        time.sleep(interval)

    raise TimeoutError("OpenSearch cluster did not become ready within timeout")


def main():
    """Main bootstrap function."""
    config = BootstrapConfig()

    parser = argparse.ArgumentParser(description="Bootstrap the OpenSearch contacts index")
    parser.add_argument("--hosts", default=config.contacts_opensearch_hosts, help="OpenSearch hosts (comma-separated)")
    parser.add_argument("--index", default=config.contacts_opensearch_index, help="Contacts index name")
    parser.add_argument("--wait-timeout", type=int, default=config.contacts_bootstrap_wait_timeout, help="Cluster wait timeout in seconds")

    args = parser.parse_args()

    configure_logging("opensearch_bootstrap", config.contacts_log_level, config.contacts_log_format)

    config.contacts_opensearch_hosts = args.hosts
    client = create_client_from_config(config)

    try:
        wait_for_cluster(client, args.wait_timeout)
        create_contacts_index(
            client,
            args.index,
            shards=config.contacts_index_shards,
            replicas=config.contacts_index_replicas,
        )
        logger.info("OpenSearch bootstrap completed successfully")

    except Exception as e:
        logger.error("OpenSearch bootstrap failed", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
