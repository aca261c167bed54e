"""
Storage installers: make sure every table the collector writes to exists before ingestion starts

The generic part (StorageInstaller.install) walks over the table definitions, and for each table
that does not exist yet asks the backend specific subclass to create it. When debug is enabled,
existing tables are dropped and recreated instead, which is convenient during development but
obviously destroys all collected data.

ElasticSearchStorageInstaller is the elasticsearch implementation:
- Only definitions tagged with the elasticsearch dialect are installed, others are silently skipped
- Every index gets the configured number of shards and replicas, the table's refresh interval and a
  fixed analyzer (see index_settings.py)
- The field mapping is built from the columns (see mapping.py). If the mapping cannot be built, the
  index is created without mappings (unless allow_degraded is False)
- Installation is sequential and synchronous, one table at a time
"""

import abc
import logging
from typing import Iterable, NamedTuple, Optional, Sequence

from collector_storage.client import IndexNotFound, StorageClient
from collector_storage.define import StorageDialect, TableDefine
from collector_storage.index_settings import build_index_settings
from collector_storage.mapping import try_build_mapping


class StorageInstallError(Exception):
    pass


class DuplicateTableDefine(ValueError):
    pass


class InstallReport(NamedTuple):
    created: list[str]
    existing: list[str]
    recreated: list[str]
    failed: list[str]


class StorageInstaller(abc.ABC):
    def __init__(self, debug: bool = False):
        self.debug = debug

    def install(self, client: StorageClient, defines: Iterable[TableDefine]) -> InstallReport:
        """
        Create all tables from the definitions (relevant for this backend) that do not exist yet.
        Client errors are raised as StorageInstallError, a table that is created but not acknowledged
        is reported as failed.
        """
        report = InstallReport(created=[], existing=[], recreated=[], failed=[])
        tables = self.define_filter(list(defines))
        check_unique_names(tables)
        for table in tables:
            try:
                if not self.is_exists(client, table):
                    target = report.created
                elif self.debug:
                    self.delete_table(client, table)
                    target = report.recreated
                else:
                    report.existing.append(table.name)
                    continue
                acknowledged = self.create_table(client, table)
            except StorageInstallError:
                raise
            except Exception as e:
                raise StorageInstallError(f"Could not install table {table.name!r}: {e}") from e
            (target if acknowledged else report.failed).append(table.name)
        return report

    @abc.abstractmethod
    def define_filter(self, defines: Sequence[TableDefine]) -> list[TableDefine]:
        """Return the definitions this installer can handle, in their original order"""

    @abc.abstractmethod
    def create_table(self, client: StorageClient, table: TableDefine) -> bool:
        pass

    @abc.abstractmethod
    def delete_table(self, client: StorageClient, table: TableDefine) -> bool:
        pass

    @abc.abstractmethod
    def is_exists(self, client: StorageClient, table: TableDefine) -> bool:
        pass


def check_unique_names(tables: Iterable[TableDefine]) -> None:
    seen = set()
    for table in tables:
        if table.name in seen:
            raise DuplicateTableDefine(f"Table {table.name!r} is defined more than once")
        seen.add(table.name)


class ElasticSearchStorageInstaller(StorageInstaller):
    dialect = StorageDialect.elasticsearch

    def __init__(
        self,
        shards: int,
        replicas: int,
        allow_degraded: bool = True,
        debug: bool = False,
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__(debug=debug)
        if shards < 1:
            raise ValueError(f"Number of shards should be a positive integer, not {shards}")
        if replicas < 1:
            raise ValueError(f"Number of replicas should be a positive integer, not {replicas}")
        self.shards = shards
        self.replicas = replicas
        self.allow_degraded = allow_degraded
        self.logger = logger or logging.getLogger(__name__)

    def define_filter(self, defines: Sequence[TableDefine]) -> list[TableDefine]:
        return [table for table in defines if table.dialect == self.dialect]

    def create_table(self, client: StorageClient, table: TableDefine) -> bool:
        settings = build_index_settings(table, self.shards, self.replicas)
        result = try_build_mapping(table)
        if result.ok:
            self.logger.debug(f"Mapping for {table.name}: {result.mapping}")
        else:
            self.logger.error(f"Cannot create mapping for index {table.name}: {result.error}")
            if not self.allow_degraded:
                raise result.error  # type: ignore[misc]

        acknowledged = client.create_index(table.name, table.type_name, settings.to_elastic(), result.mapping)
        self.logger.info(f"Created index {table.name} with type {table.type_name}, acknowledged: {acknowledged}")
        return acknowledged

    def delete_table(self, client: StorageClient, table: TableDefine) -> bool:
        try:
            acknowledged = client.delete_index(table.name)
        except IndexNotFound:
            self.logger.info(f"Index {table.name} not found, nothing to delete")
            return False
        self.logger.info(f"Deleted index {table.name}, acknowledged: {acknowledged}")
        return acknowledged

    def is_exists(self, client: StorageClient, table: TableDefine) -> bool:
        return client.exists_index(table.name)
