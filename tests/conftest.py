import pytest

from collector_storage.config import get_settings
from collector_storage.define import ElasticColumnType as T, elastic_table, h2_table
from collector_storage.installer import ElasticSearchStorageInstaller
from tests.tools import FakeClient


@pytest.fixture(autouse=True)
def clear_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def client():
    return FakeClient()


@pytest.fixture()
def installer():
    return ElasticSearchStorageInstaller(shards=3, replicas=1)


@pytest.fixture()
def service_table():
    return elastic_table("service_duration", 5, service_name=T.Text, duration=T.Long)


@pytest.fixture()
def mixed_defines():
    return [
        elastic_table("application", application_code=T.Keyword, application_id=T.Integer),
        h2_table("application", application_code="Varchar", application_id="Int"),
        elastic_table("segment", 10, data_binary=T.Binary, time_bucket=T.Long),
        h2_table("segment", data_binary="Blob", time_bucket="Bigint"),
        elastic_table("service_name", service_name=T.Text),
    ]
