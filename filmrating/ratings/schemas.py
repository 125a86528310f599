from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from filmrating.schemas import CamelModel
from filmrating.validation import (
    DATE,
    INTEGER,
    STRING,
    STRING_LIST,
    ArrayNotEmpty,
    FieldSpec,
    Max,
    MaxLength,
    Min,
)

MIN_RATING_SCORE = 1
MAX_RATING_SCORE = 10
MAX_COMMENT_LENGTH = 500
MAX_CREATED_BY_LENGTH = 100

RATING_CREATE_SCHEMA = (
    FieldSpec("movieId", STRING),
    FieldSpec("score", INTEGER, constraints=(Min(MIN_RATING_SCORE), Max(MAX_RATING_SCORE))),
    FieldSpec("comment", STRING, required=False, constraints=(MaxLength(MAX_COMMENT_LENGTH),)),
    FieldSpec("ratingDate", DATE, required=False),
    FieldSpec("createdBy", STRING, required=False, constraints=(MaxLength(MAX_CREATED_BY_LENGTH),)),
)

RATING_COUNTS_SCHEMA = (
    FieldSpec("movieIds", STRING_LIST, constraints=(ArrayNotEmpty(),)),
)


class RatingCreate(CamelModel):
    movie_id: str
    score: int
    comment: Optional[str] = None
    rating_date: Optional[datetime] = None
    created_by: Optional[str] = None


class RatingCounts(CamelModel):
    movie_ids: List[str]


class RatingQuery(CamelModel):
    movie_id: str
    skip: int = 0
    limit: int = 10


class RatingOut(CamelModel):
    id: str
    movie_id: str
    score: int
    comment: Optional[str] = None
    rating_date: Optional[datetime] = None
    created_by: Optional[str] = None
    created_at: datetime


class AverageRating(BaseModel):
    average: float
    count: int
