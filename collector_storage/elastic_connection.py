"""
Sets up the connection to the Elastic server.
In most cases you should use the ElasticSearchClient from client.py, which wraps this
connection in the create/delete/exists operations the installer needs.
"""
import functools
import logging
from typing import Any
from elasticsearch import Elasticsearch
from collector_storage.config import Settings, get_settings


class CannotConnectElastic(Exception):
    pass


def connection_options(settings: Settings) -> dict[str, Any]:
    """
    Keyword arguments for the Elasticsearch client. Credentials and certificate verification
    only apply when a password is configured (i.e. xpack security is enabled)
    """
    if not settings.elastic_password:
        return {}
    return dict(
        basic_auth=("elastic", settings.elastic_password),
        verify_certs=bool(settings.elastic_verify_ssl),
    )


@functools.lru_cache()
def elastic_connection() -> Elasticsearch:
    """
    Connect to elasticsearch and check that the server responds.
    The connection is cached, so the installer and the CLI share one client
    """
    settings = get_settings()
    logging.debug(
        f"Connecting with elasticsearch at {settings.elastic_host}, "
        f"password? {'yes' if settings.elastic_password else 'no'}, verify ssl? {settings.elastic_verify_ssl}"
    )
    try:
        elastic = Elasticsearch(settings.elastic_host, **connection_options(settings))
        alive = elastic.ping()
    except Exception as e:
        raise CannotConnectElastic(f"Cannot connect to elastic {settings.elastic_host!r}: {e}") from e
    if not alive:
        raise CannotConnectElastic(f"Cannot connect to elasticsearch server {settings.elastic_host}")
    return elastic
