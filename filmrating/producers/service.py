import logging
from typing import List

from pymongo.database import Database

from filmrating.errors import NotFoundException, ValidationException
from filmrating.ids import require_valid_id
from filmrating.producers import repository
from filmrating.producers.schemas import ProducerCreate, ProducerInfo, ProducerOut, ProducerUpdate
from filmrating.projection import project, project_all

logger = logging.getLogger(__name__)

ENTITY = "Producer"


def create(db: Database, dto: ProducerCreate) -> str:
    producer_id = repository.create(db, dto)
    logger.info("Created producer %s", producer_id)
    return producer_id


def _get_document(db: Database, producer_id: str) -> dict:
    require_valid_id(ENTITY, producer_id)
    doc = repository.get_by_id(db, producer_id)
    if doc is None:
        logger.warning("Producer %s not found", producer_id)
        raise NotFoundException(f"Producer with id {producer_id} not found")
    return doc


def get_by_id(db: Database, producer_id: str) -> ProducerOut:
    return project(ProducerOut, _get_document(db, producer_id))


def get_info(db: Database, producer_id: str) -> ProducerInfo:
    return project(ProducerInfo, _get_document(db, producer_id))


def get_all(db: Database, skip: int = 0, limit: int = 10) -> List[ProducerOut]:
    return project_all(ProducerOut, repository.get_all(db, skip, limit))


def _ensure_exists(db: Database, producer_id: str) -> None:
    require_valid_id(ENTITY, producer_id)
    if not repository.exists(db, producer_id):
        logger.warning("Producer %s not found", producer_id)
        raise NotFoundException(f"Producer with id {producer_id} not found")


def update(db: Database, producer_id: str, dto: ProducerUpdate) -> None:
    _ensure_exists(db, producer_id)
    repository.update(db, producer_id, dto)
    logger.info("Updated producer %s", producer_id)


def remove(db: Database, producer_id: str) -> None:
    _ensure_exists(db, producer_id)
    if repository.has_movies(db, producer_id):
        logger.warning("Refused to delete producer %s: movies still reference it", producer_id)
        raise ValidationException("Cannot delete producer with existing movies")
    repository.remove(db, producer_id)
    logger.info("Deleted producer %s", producer_id)


def exists(db: Database, producer_id: str) -> bool:
    require_valid_id(ENTITY, producer_id)
    return repository.exists(db, producer_id)
