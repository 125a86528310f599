import logging
from typing import Dict, List

from pymongo.database import Database

from filmrating.errors import ValidationException
from filmrating.ids import is_valid_id, require_valid_id
from filmrating.movies import service as movie_service
from filmrating.projection import project_all
from filmrating.ratings import repository
from filmrating.ratings.schemas import AverageRating, RatingCreate, RatingOut, RatingQuery
from filmrating.schemas import utcnow

logger = logging.getLogger(__name__)


def create(db: Database, dto: RatingCreate) -> str:
    validate_movie_id(db, dto.movie_id)
    if dto.rating_date is None:
        dto = dto.model_copy(update={"rating_date": utcnow()})
    rating_id = repository.create(db, dto)
    logger.info("Created rating %s for movie %s", rating_id, dto.movie_id)
    return rating_id


def find_by_movie_id(db: Database, query: RatingQuery) -> List[RatingOut]:
    require_valid_id(movie_service.ENTITY, query.movie_id)
    return project_all(RatingOut, repository.find_by_movie_id(db, query))


def count_by_movie_ids(db: Database, movie_ids: List[str]) -> Dict[str, int]:
    invalid = [f"{movie_service.ENTITY} id {m} is invalid" for m in movie_ids if not is_valid_id(m)]
    if invalid:
        raise ValidationException(*invalid)
    return repository.count_by_movie_ids(db, movie_ids)


def get_average_rating(db: Database, movie_id: str) -> AverageRating:
    require_valid_id(movie_service.ENTITY, movie_id)
    return AverageRating(**repository.get_average_rating(db, movie_id))


def validate_movie_id(db: Database, movie_id: str) -> None:
    require_valid_id(movie_service.ENTITY, movie_id)
    if not movie_service.exists(db, movie_id):
        logger.warning("Rejected rating: movie %s does not exist", movie_id)
        raise ValidationException(f"Movie with id {movie_id} doesn't exists.")
