import pytest
from pydantic import ValidationError

from collector_storage.config import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("COLLECTOR_STORAGE_ELASTIC_HOST", raising=False)
    monkeypatch.delenv("COLLECTOR_STORAGE_ELASTIC_PASSWORD", raising=False)
    settings = Settings(env_file="/nonexistent/.env")
    assert settings.elastic_host == "http://localhost:9200"
    assert settings.index_shards_number == 2
    assert settings.index_replicas_number == 1
    assert settings.debug is False
    assert settings.allow_degraded_mapping is True


def test_env(monkeypatch):
    monkeypatch.setenv("COLLECTOR_STORAGE_INDEX_SHARDS_NUMBER", "5")
    monkeypatch.setenv("COLLECTOR_STORAGE_INDEX_REPLICAS_NUMBER", "3")
    monkeypatch.setenv("COLLECTOR_STORAGE_ELASTIC_PASSWORD", "secret")
    monkeypatch.delenv("COLLECTOR_STORAGE_ELASTIC_HOST", raising=False)
    settings = get_settings()
    assert settings.index_shards_number == 5
    assert settings.index_replicas_number == 3
    assert settings.elastic_host == "https://localhost:9200"


@pytest.mark.parametrize("name", ["INDEX_SHARDS_NUMBER", "INDEX_REPLICAS_NUMBER"])
def test_positive_counts(monkeypatch, name):
    monkeypatch.setenv(f"COLLECTOR_STORAGE_{name}", "0")
    with pytest.raises(ValidationError):
        Settings()


def test_verify_ssl(monkeypatch):
    monkeypatch.setenv("COLLECTOR_STORAGE_ELASTIC_HOST", "https://elastic.example.com:9200")
    monkeypatch.setenv("COLLECTOR_STORAGE_ELASTIC_PASSWORD", "secret")
    monkeypatch.delenv("COLLECTOR_STORAGE_ELASTIC_VERIFY_SSL", raising=False)
    assert Settings().elastic_verify_ssl is True
    # An explicit false should not be overridden by the host based default
    monkeypatch.setenv("COLLECTOR_STORAGE_ELASTIC_VERIFY_SSL", "false")
    assert Settings().elastic_verify_ssl is False
    monkeypatch.setenv("COLLECTOR_STORAGE_ELASTIC_HOST", "https://localhost:9200")
    monkeypatch.setenv("COLLECTOR_STORAGE_ELASTIC_VERIFY_SSL", "true")
    assert Settings().elastic_verify_ssl is True
