"""
Physical index settings derived from a table definition.

Shard and replica counts are process wide (see config.py), the refresh interval comes from
the table, and every collector index gets the same text analysis configuration.
"""

from typing import Any, Literal
from pydantic import BaseModel, ConfigDict

from collector_storage.define import TableDefine

ANALYZER_NAME = "collector_analyzer"
TOKENIZER_NAME = "collector_tokenizer"
TOKENIZER_TYPE = "standard"
TOKENIZER_MAX_TOKEN_LENGTH = 5


class IndexSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    number_of_shards: int
    number_of_replicas: int
    refresh_interval: str
    analyzer: str = ANALYZER_NAME
    tokenizer: str = TOKENIZER_NAME
    tokenizer_type: Literal["standard"] = TOKENIZER_TYPE
    max_token_length: int = TOKENIZER_MAX_TOKEN_LENGTH

    def to_elastic(self) -> dict[str, Any]:
        """
        Render as the settings body for indices.create, see
        https://www.elastic.co/guide/en/elasticsearch/reference/current/indices-create-index.html
        """
        return {
            "index": {
                "number_of_shards": self.number_of_shards,
                "number_of_replicas": self.number_of_replicas,
                "refresh_interval": self.refresh_interval,
            },
            "analysis": {
                "analyzer": {self.analyzer: {"tokenizer": self.tokenizer}},
                "tokenizer": {
                    self.tokenizer: {
                        "type": self.tokenizer_type,
                        "max_token_length": self.max_token_length,
                    }
                },
            },
        }


def build_index_settings(table: TableDefine, shards: int, replicas: int) -> IndexSettings:
    return IndexSettings(
        number_of_shards=shards,
        number_of_replicas=replicas,
        refresh_interval=f"{table.refresh_interval}s",
    )
