from typing import List, Optional

from pymongo.database import Database

from filmrating.database import MOVIE_COLLECTION, PRODUCER_COLLECTION
from filmrating.ids import get_objectid
from filmrating.producers.schemas import ProducerCreate, ProducerUpdate
from filmrating.schemas import utcnow


def create(db: Database, dto: ProducerCreate) -> str:
    data = dto.model_dump()
    data["created_at"] = utcnow()
    data["updated_at"] = data["created_at"]
    result = db[PRODUCER_COLLECTION].insert_one(data)
    return str(result.inserted_id)


def get_by_id(db: Database, producer_id: str) -> Optional[dict]:
    return db[PRODUCER_COLLECTION].find_one({"_id": get_objectid(producer_id)})


def get_all(db: Database, skip: int = 0, limit: int = 10) -> List[dict]:
    cursor = db[PRODUCER_COLLECTION].find().sort([("created_at", -1), ("_id", -1)])
    return list(cursor.skip(skip).limit(limit))


def update(db: Database, producer_id: str, dto: ProducerUpdate) -> None:
    data = dto.model_dump(exclude_unset=True)
    data["updated_at"] = utcnow()
    db[PRODUCER_COLLECTION].update_one({"_id": get_objectid(producer_id)}, {"$set": data})


def remove(db: Database, producer_id: str) -> None:
    db[PRODUCER_COLLECTION].delete_one({"_id": get_objectid(producer_id)})


def exists(db: Database, producer_id: str) -> bool:
    return db[PRODUCER_COLLECTION].count_documents({"_id": get_objectid(producer_id)}) > 0


def has_movies(db: Database, producer_id: str) -> bool:
    return db[MOVIE_COLLECTION].count_documents({"producer_id": get_objectid(producer_id)}) > 0
