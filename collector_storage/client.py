"""
Storage client used by the installer.

The installer only needs three operations on the storage engine, described by StorageClient.
ElasticSearchClient implements them on top of the (synchronous) elasticsearch client.
Every call is a single blocking round trip; retries and timeouts are left to the transport.
"""
import logging
from typing import Any, Mapping, Optional, Protocol

from elasticsearch import Elasticsearch

from collector_storage.elastic_connection import elastic_connection


class IndexNotFound(ValueError):
    pass


class StorageClient(Protocol):
    def create_index(
        self, name: str, type_name: str, settings: Mapping[str, Any], mapping: Optional[Mapping[str, Any]]
    ) -> bool: ...

    def delete_index(self, name: str) -> bool:
        """Delete the index, raising IndexNotFound if it does not exist"""
        ...

    def exists_index(self, name: str) -> bool: ...


class ElasticSearchClient:
    def __init__(self, elastic: Optional[Elasticsearch] = None):
        self._elastic = elastic

    @property
    def elastic(self) -> Elasticsearch:
        if self._elastic is None:
            self._elastic = elastic_connection()
        return self._elastic

    def create_index(
        self, name: str, type_name: str, settings: Mapping[str, Any], mapping: Optional[Mapping[str, Any]]
    ) -> bool:
        """
        Create the index with the given settings and (optional) mapping.
        Elasticsearch 8 has no mapping types anymore, so the type name is kept in the mapping metadata.
        :return: whether elasticsearch acknowledged the creation
        """
        mappings = None
        if mapping is not None:
            mappings = {**mapping, "_meta": {"type": type_name}}
        logging.debug(f"Creating index {name}, settings={settings}, mappings={mappings}")
        resp = self.elastic.indices.create(index=name, settings=settings, mappings=mappings)
        return bool(resp["acknowledged"])

    def delete_index(self, name: str) -> bool:
        resp = self.elastic.options(ignore_status=404).indices.delete(index=name)
        if resp.meta.status == 404:
            raise IndexNotFound(name)
        return bool(resp["acknowledged"])

    def exists_index(self, name: str) -> bool:
        return bool(self.elastic.indices.exists(index=name))
