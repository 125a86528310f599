"""
Shared pydantic bases.

Collections (one per entity):
- Movie -> "movie"
- Producer -> "producer"
- Rating -> "rating"

Documents are stored with snake_case keys; the API speaks camelCase. Every
model below converts between the two through its alias generator.
"""
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# largest offset BSON can encode (signed 64-bit)
MAX_SKIP = 2**63 - 1


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class CreatedOut(BaseModel):
    id: str = Field(..., description="Identifier of the created document")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
