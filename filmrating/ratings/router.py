from typing import Dict, List

from fastapi import APIRouter, Depends, Query
from pymongo.database import Database

from filmrating.database import get_db
from filmrating.ratings import service
from filmrating.ratings.schemas import (
    RATING_COUNTS_SCHEMA,
    RATING_CREATE_SCHEMA,
    AverageRating,
    RatingCounts,
    RatingCreate,
    RatingOut,
    RatingQuery,
)
from filmrating.schemas import MAX_SKIP, CreatedOut
from filmrating.validation import validated_body

router = APIRouter(prefix="/api/ratings", tags=["Ratings"])


@router.post("", status_code=201, response_model=CreatedOut)
def create_rating(
    dto: RatingCreate = Depends(validated_body(RATING_CREATE_SCHEMA, RatingCreate)),
    db: Database = Depends(get_db),
):
    return {"id": service.create(db, dto)}


@router.get("", response_model=List[RatingOut])
def list_ratings(
    movie_id: str = Query(..., alias="movieId"),
    skip: int = Query(0, ge=0, le=MAX_SKIP, alias="from"),
    limit: int = Query(10, ge=1, le=100, alias="size"),
    db: Database = Depends(get_db),
):
    query = RatingQuery(movie_id=movie_id, skip=skip, limit=limit)
    return service.find_by_movie_id(db, query)


@router.post("/_counts", response_model=Dict[str, int])
def get_rating_counts(
    dto: RatingCounts = Depends(validated_body(RATING_COUNTS_SCHEMA, RatingCounts)),
    db: Database = Depends(get_db),
):
    return service.count_by_movie_ids(db, dto.movie_ids)


@router.get("/{movie_id}/average", response_model=AverageRating)
def get_average_rating(movie_id: str, db: Database = Depends(get_db)):
    return service.get_average_rating(db, movie_id)
