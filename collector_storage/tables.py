"""
Table definitions of the collector.

Each logical table has an elasticsearch definition and an h2 definition; the installer for a backend
only picks up the definitions of its own dialect.
"""

from collector_storage.define import ElasticColumnType as T, TableDefine, elastic_table, h2_table

# REGISTER TABLES ----------------------------------------------------

APPLICATION = elastic_table(
    "application",
    application_code=T.Keyword,
    application_id=T.Integer,
    layer=T.Integer,
    address_id=T.Integer,
    is_address=T.Integer,
)

INSTANCE = elastic_table(
    "instance",
    application_id=T.Integer,
    agent_uuid=T.Keyword,
    register_time=T.Long,
    instance_id=T.Integer,
    heartbeat_time=T.Long,
    os_info=T.Keyword,
    address_id=T.Integer,
    is_address=T.Integer,
)

NETWORK_ADDRESS = elastic_table(
    "network_address",
    network_address=T.Keyword,
    address_id=T.Integer,
    span_layer=T.Integer,
    server_type=T.Integer,
)

# service_name is analyzed text, so it can be searched on parts of the name
SERVICE_NAME = elastic_table(
    "service_name",
    service_name=T.Text,
    service_name_keyword=T.Keyword,
    application_id=T.Integer,
    service_id=T.Integer,
)

# SEGMENT TABLES -----------------------------------------------------

SEGMENT = elastic_table(
    "segment",
    10,
    data_binary=T.Binary,
    time_bucket=T.Long,
)

GLOBAL_TRACE = elastic_table(
    "global_trace",
    10,
    segment_id=T.Keyword,
    global_trace_id=T.Keyword,
    time_bucket=T.Long,
)

SEGMENT_DURATION = elastic_table(
    "segment_duration",
    10,
    segment_id=T.Keyword,
    application_id=T.Integer,
    service_name=T.Text,
    duration=T.Long,
    start_time=T.Long,
    end_time=T.Long,
    is_error=T.Boolean,
    time_bucket=T.Long,
)

# METRIC TABLES ------------------------------------------------------

INSTANCE_HEARTBEAT = elastic_table(
    "instance_heartbeat",
    instance_id=T.Integer,
    heartbeat_time=T.Date,
)

MEMORY_METRIC = elastic_table(
    "memory_metric",
    instance_id=T.Integer,
    is_heap=T.Boolean,
    init=T.Long,
    max=T.Long,
    used=T.Long,
    committed=T.Long,
    time_bucket=T.Long,
)

CPU_METRIC = elastic_table(
    "cpu_metric",
    instance_id=T.Integer,
    usage_percent=T.Double,
    time_bucket=T.Long,
)

ELASTIC_TABLES: list[TableDefine] = [
    APPLICATION,
    INSTANCE,
    NETWORK_ADDRESS,
    SERVICE_NAME,
    SEGMENT,
    GLOBAL_TRACE,
    SEGMENT_DURATION,
    INSTANCE_HEARTBEAT,
    MEMORY_METRIC,
    CPU_METRIC,
]

H2_TABLES: list[TableDefine] = [
    h2_table(
        "application",
        application_code="Varchar",
        application_id="Int",
        layer="Int",
        address_id="Int",
        is_address="Int",
    ),
    h2_table(
        "instance",
        application_id="Int",
        agent_uuid="Varchar",
        register_time="Bigint",
        instance_id="Int",
        heartbeat_time="Bigint",
        os_info="Varchar",
        address_id="Int",
        is_address="Int",
    ),
    h2_table("segment", data_binary="Blob", time_bucket="Bigint"),
    h2_table("global_trace", segment_id="Varchar", global_trace_id="Varchar", time_bucket="Bigint"),
]


def load_table_defines() -> list[TableDefine]:
    """All table definitions, for all dialects (definitions are immutable, the list is a fresh copy)"""
    return [*ELASTIC_TABLES, *H2_TABLES]
