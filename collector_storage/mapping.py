from typing import Literal, NamedTuple, NotRequired, Optional, TypedDict

from collector_storage.define import ColumnDefine, ElasticColumnType, TableDefine

ElasticType = Literal[
    "binary",
    "boolean",
    "keyword",
    "long",
    "integer",
    "double",
    "text",
    "date",
]


class MappingBuildError(ValueError):
    pass


class ElasticField(TypedDict):
    """
    Mapping of a single column. Only text fields carry fielddata, which allows
    sorting and aggregating on an analyzed field
    """

    type: ElasticType
    fielddata: NotRequired[Literal[True]]


class MappingDocument(TypedDict):
    properties: dict[str, ElasticField]


class MappingResult(NamedTuple):
    """Either the mapping for a table, or the reason it could not be built"""

    mapping: Optional[MappingDocument]
    error: Optional[MappingBuildError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def column_mapping(column: ColumnDefine) -> ElasticField:
    try:
        column_type = ElasticColumnType.parse(column.type)
    except ValueError as e:
        raise MappingBuildError(f"Cannot map column {column.name!r}: {e}") from e
    field: ElasticField = {"type": column_type.value.lower()}  # type: ignore[typeddict-item]
    if column_type == ElasticColumnType.Text:
        field["fielddata"] = True
    return field


def build_mapping(table: TableDefine) -> MappingDocument:
    """
    Build the field mapping for this table, one property per column in column order:
        {"properties": {"service_name": {"type": "text", "fielddata": True}, "duration": {"type": "long"}}}
    Raises MappingBuildError if any column has a type that cannot be mapped.
    """
    return {"properties": {column.name: column_mapping(column) for column in table.columns}}


def try_build_mapping(table: TableDefine) -> MappingResult:
    try:
        return MappingResult(mapping=build_mapping(table))
    except MappingBuildError as e:
        return MappingResult(mapping=None, error=e)
