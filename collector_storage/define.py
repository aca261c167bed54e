"""
Logical (backend agnostic) table definitions

Every table the collector stores data in is described by a TableDefine: a name, a refresh
interval and an ordered list of columns. A definition is tagged with the storage dialect
it was written for, so an installer only acts on the definitions meant for its backend.
Definitions are created once at startup and are read-only afterwards.
"""

from enum import Enum
from typing import Annotated
from class_doc import extract_docs_from_cls_obj
from pydantic import BaseModel, ConfigDict, Field, field_validator


class StorageDialect(str, Enum):
    #: document store, see installer.ElasticSearchStorageInstaller
    elasticsearch = "elasticsearch"

    #: embedded relational store (not handled by this package)
    h2 = "h2"


class ElasticColumnType(str, Enum):
    """Column types that can be rendered into an elasticsearch mapping"""

    #: base64 encoded binary value, not searchable
    Binary = "Binary"

    #: true / false
    Boolean = "Boolean"

    #: exact value, used for ids, codes and filtering
    Keyword = "Keyword"

    #: 64 bit integer, e.g. timestamps in milliseconds
    Long = "Long"

    #: 32 bit integer
    Integer = "Integer"

    #: double precision floating point
    Double = "Double"

    #: analyzed full text. Text columns get fielddata enabled so they can be sorted and aggregated
    Text = "Text"

    #: date or date-time
    Date = "Date"

    @classmethod
    def parse(cls, value: str) -> "ElasticColumnType":
        """Look up a type tag case-insensitively, raising ValueError if it is unknown"""
        for member in cls:
            if member.value.lower() == value.lower():
                return member
        options = ", ".join(cls.__members__.keys())
        raise ValueError(f"{value!r} is not a valid elasticsearch column type. Choose one of {{{options}}}")


for enum_cls in (StorageDialect, ElasticColumnType):
    for field, doc in extract_docs_from_cls_obj(enum_cls).items():
        enum_cls[field].__doc__ = "\n".join(doc)


class ColumnDefine(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: Annotated[str, Field(min_length=1)]
    # type tags are checked by the mapping builder, not here
    type: Annotated[str, Field(min_length=1)]


class TableDefine(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: Annotated[str, Field(min_length=1)]
    dialect: StorageDialect
    refresh_interval: Annotated[int, Field(ge=0, description="Refresh interval in seconds")] = 2
    type_name: Annotated[str, Field(description="Type identifier passed on index creation")] = "type"
    columns: tuple[ColumnDefine, ...] = ()

    @field_validator("columns")
    @classmethod
    def unique_column_names(cls, columns: tuple[ColumnDefine, ...]) -> tuple[ColumnDefine, ...]:
        seen = set()
        for column in columns:
            if column.name in seen:
                raise ValueError(f"Duplicate column name {column.name!r}")
            seen.add(column.name)
        return columns

    def column_names(self) -> list[str]:
        return [column.name for column in self.columns]


def _columns(columns: dict[str, ElasticColumnType | str]) -> tuple[ColumnDefine, ...]:
    return tuple(
        ColumnDefine(name=name, type=ctype.value if isinstance(ctype, Enum) else ctype) for name, ctype in columns.items()
    )


def elastic_table(name: str, refresh_interval: int = 2, /, **columns: ElasticColumnType | str) -> TableDefine:
    """
    Shorthand for an elasticsearch table definition, columns are given as keyword arguments in order, e.g.
    elastic_table("segment", 10, segment_id=ElasticColumnType.Keyword, data_binary=ElasticColumnType.Binary)
    """
    return TableDefine(
        name=name, dialect=StorageDialect.elasticsearch, refresh_interval=refresh_interval, columns=_columns(columns)
    )


def h2_table(name: str, /, **columns: str) -> TableDefine:
    return TableDefine(name=name, dialect=StorageDialect.h2, columns=_columns(columns))
