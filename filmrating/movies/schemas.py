from datetime import datetime
from typing import List, Optional

from pydantic import Field

from filmrating.schemas import CamelModel, utcnow
from filmrating.validation import (
    INTEGER,
    STRING,
    STRING_LIST,
    ArrayNotEmpty,
    FieldSpec,
    Max,
    MaxLength,
    Min,
    MinLength,
    partial,
)

MIN_TITLE_LENGTH = 1
MAX_TITLE_LENGTH = 400
MAX_DESCRIPTION_LENGTH = 300
MIN_RELEASE_YEAR = 1888
MIN_DURATION = 1
MAX_DURATION = 240


def max_release_year() -> int:
    return utcnow().year + 5


MOVIE_CREATE_SCHEMA = (
    FieldSpec("title", STRING, trim=True, constraints=(MinLength(MIN_TITLE_LENGTH), MaxLength(MAX_TITLE_LENGTH))),
    FieldSpec("description", STRING, required=False, constraints=(MaxLength(MAX_DESCRIPTION_LENGTH),)),
    FieldSpec("releaseYear", INTEGER, constraints=(Min(MIN_RELEASE_YEAR), Max(max_release_year))),
    FieldSpec("duration", INTEGER, constraints=(Min(MIN_DURATION), Max(MAX_DURATION))),
    FieldSpec("genre", STRING_LIST, required=False, constraints=(ArrayNotEmpty(),)),
    FieldSpec("producerId", STRING),
)

MOVIE_UPDATE_SCHEMA = partial(MOVIE_CREATE_SCHEMA)


class MovieCreate(CamelModel):
    title: str
    description: Optional[str] = None
    release_year: int
    duration: int
    genre: List[str] = Field(default_factory=list)
    producer_id: str


class MovieUpdate(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    release_year: Optional[int] = None
    duration: Optional[int] = None
    genre: Optional[List[str]] = None
    producer_id: Optional[str] = None


class MovieOut(CamelModel):
    id: str
    title: str
    description: Optional[str] = None
    release_year: int
    duration: int
    genre: List[str] = Field(default_factory=list)
    producer_id: str
    created_at: datetime
    updated_at: datetime
