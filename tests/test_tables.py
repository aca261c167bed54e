from collector_storage.define import StorageDialect
from collector_storage.mapping import build_mapping
from collector_storage.tables import ELASTIC_TABLES, H2_TABLES, load_table_defines


def test_table_names_unique_per_dialect():
    for dialect in StorageDialect:
        names = [t.name for t in load_table_defines() if t.dialect == dialect]
        assert len(names) == len(set(names))


def test_elastic_tables_can_be_mapped():
    for table in ELASTIC_TABLES:
        assert table.dialect == StorageDialect.elasticsearch
        assert list(build_mapping(table)["properties"]) == table.column_names()


def test_load_table_defines_is_fresh_list():
    defines = load_table_defines()
    defines.clear()
    assert len(load_table_defines()) == len(ELASTIC_TABLES) + len(H2_TABLES)
