from typing import List

from fastapi import APIRouter, Depends, Query, Response
from pymongo.database import Database

from filmrating.database import get_db
from filmrating.movies import service
from filmrating.movies.schemas import (
    MOVIE_CREATE_SCHEMA,
    MOVIE_UPDATE_SCHEMA,
    MovieCreate,
    MovieOut,
    MovieUpdate,
)
from filmrating.schemas import MAX_SKIP, CreatedOut
from filmrating.validation import validated_body

router = APIRouter(prefix="/api/movies", tags=["Movies"])


@router.post("", status_code=201, response_model=CreatedOut)
def create_movie(
    dto: MovieCreate = Depends(validated_body(MOVIE_CREATE_SCHEMA, MovieCreate)),
    db: Database = Depends(get_db),
):
    return {"id": service.create(db, dto)}


@router.get("", response_model=List[MovieOut])
def list_movies(
    skip: int = Query(0, ge=0, le=MAX_SKIP),
    limit: int = Query(10, ge=1, le=100),
    db: Database = Depends(get_db),
):
    return service.get_all(db, skip, limit)


@router.get("/{movie_id}", response_model=MovieOut)
def get_movie(movie_id: str, db: Database = Depends(get_db)):
    return service.get_by_id(db, movie_id)


@router.patch("/{movie_id}")
def update_movie(
    movie_id: str,
    dto: MovieUpdate = Depends(validated_body(MOVIE_UPDATE_SCHEMA, MovieUpdate)),
    db: Database = Depends(get_db),
):
    service.update(db, movie_id, dto)
    return Response(status_code=200)


@router.delete("/{movie_id}", status_code=204)
def delete_movie(movie_id: str, db: Database = Depends(get_db)):
    service.remove(db, movie_id)
    return Response(status_code=204)
