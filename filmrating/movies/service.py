import logging
from typing import List

from pymongo.database import Database

from filmrating.errors import NotFoundException, ValidationException
from filmrating.ids import require_valid_id
from filmrating.movies import repository
from filmrating.movies.schemas import MovieCreate, MovieOut, MovieUpdate
from filmrating.producers import service as producer_service
from filmrating.projection import project, project_all

logger = logging.getLogger(__name__)

ENTITY = "Movie"


def create(db: Database, dto: MovieCreate) -> str:
    validate_producer_id(db, dto.producer_id)
    movie_id = repository.create(db, dto)
    logger.info("Created movie %s", movie_id)
    return movie_id


def get_by_id(db: Database, movie_id: str) -> MovieOut:
    require_valid_id(ENTITY, movie_id)
    doc = repository.get_by_id(db, movie_id)
    if doc is None:
        logger.warning("Movie %s not found", movie_id)
        raise NotFoundException(f"Movie with id {movie_id} not found")
    return project(MovieOut, doc)


def get_all(db: Database, skip: int = 0, limit: int = 10) -> List[MovieOut]:
    return project_all(MovieOut, repository.get_all(db, skip, limit))


def _ensure_exists(db: Database, movie_id: str) -> None:
    require_valid_id(ENTITY, movie_id)
    if not repository.exists(db, movie_id):
        logger.warning("Movie %s not found", movie_id)
        raise NotFoundException(f"Movie with id {movie_id} not found")


def update(db: Database, movie_id: str, dto: MovieUpdate) -> None:
    _ensure_exists(db, movie_id)
    if dto.producer_id is not None:
        validate_producer_id(db, dto.producer_id)
    repository.update(db, movie_id, dto)
    logger.info("Updated movie %s", movie_id)


def remove(db: Database, movie_id: str) -> None:
    _ensure_exists(db, movie_id)
    repository.remove(db, movie_id)
    logger.info("Deleted movie %s", movie_id)


def exists(db: Database, movie_id: str) -> bool:
    require_valid_id(ENTITY, movie_id)
    return repository.exists(db, movie_id)


def validate_producer_id(db: Database, producer_id: str) -> None:
    require_valid_id(producer_service.ENTITY, producer_id)
    if not producer_service.exists(db, producer_id):
        logger.warning("Rejected movie write: producer %s does not exist", producer_id)
        raise ValidationException(f"Producer with id {producer_id} doesn't exists.")
