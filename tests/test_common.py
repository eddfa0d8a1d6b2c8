"""Tests for common utilities."""

import pytest
from prometheus_client import CollectorRegistry

from contacts.common.config import ApiConfig, BaseConfig, BootstrapConfig, get_config
from contacts.common.logging import configure_logging
from contacts.common.metrics import MetricsCollector
from contacts.search_index.factory import create_contact_index, create_opensearch_client


def test_config_loading():
    """Test configuration defaults."""
    config = BaseConfig()
    assert config.contacts_env == "local"
    assert config.contacts_log_level == "INFO"
    assert config.contacts_opensearch_index == "contacts"
    assert config.opensearch_hosts == ["http://localhost:9200"]


def test_config_from_environment(monkeypatch):
    monkeypatch.setenv("CONTACTS_OPENSEARCH_HOSTS", "http://a:9200, http://b:9200")
    monkeypatch.setenv("CONTACTS_OPENSEARCH_INDEX", "contacts_v2")
    monkeypatch.setenv("CONTACTS_OPENSEARCH_VERIFY_CERTS", "true")

    config = BaseConfig()

    assert config.opensearch_hosts == ["http://a:9200", "http://b:9200"]
    assert config.contacts_opensearch_index == "contacts_v2"
    assert config.contacts_opensearch_verify_certs is True


def test_get_config():
    assert isinstance(get_config("api"), ApiConfig)
    assert isinstance(get_config("bootstrap"), BootstrapConfig)
    assert type(get_config("unknown")) is BaseConfig
    assert get_config("api").contacts_api_port == 9010


def test_logging_configuration():
    """This should not raise an exception."""
    configure_logging("test-service", "INFO", "json")
    configure_logging("test-service", "debug", "console", env="test")


def test_metrics_collector():
    collector = MetricsCollector("test-service", registry=CollectorRegistry())
    assert collector.service_name == "test-service"

    collector.record_http_request("POST", "/api/v1/contacts/search", 200, 0.1)
    collector.record_index_operation("index", "success")
    collector.record_search("surname", "success", 0.05, results=3)

    metrics = collector.get_metrics()
    assert isinstance(metrics, str)
    assert "http_requests_total" in metrics
    assert "contacts_index_operations_total" in metrics
    assert collector.registry.get_sample_value("contacts_search_results_count") == 1


def test_create_opensearch_client_requires_hosts():
    with pytest.raises(ValueError):
        create_opensearch_client([])


def test_create_contact_index_uses_configured_index(fake_client):
    config = BaseConfig(contacts_opensearch_index="people")
    contact_index = create_contact_index(config, client=fake_client)
    assert contact_index.index_name == "people"
    assert contact_index.client is fake_client
