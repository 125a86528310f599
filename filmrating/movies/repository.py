from typing import List, Optional

from pymongo.database import Database

from filmrating.database import MOVIE_COLLECTION
from filmrating.ids import get_objectid
from filmrating.movies.schemas import MovieCreate, MovieUpdate
from filmrating.schemas import utcnow


def create(db: Database, dto: MovieCreate) -> str:
    data = dto.model_dump()
    # Convert references to ObjectId
    data["producer_id"] = get_objectid(data["producer_id"])
    data["created_at"] = utcnow()
    data["updated_at"] = data["created_at"]
    result = db[MOVIE_COLLECTION].insert_one(data)
    return str(result.inserted_id)


def get_by_id(db: Database, movie_id: str) -> Optional[dict]:
    return db[MOVIE_COLLECTION].find_one({"_id": get_objectid(movie_id)})


def get_all(db: Database, skip: int = 0, limit: int = 10) -> List[dict]:
    cursor = db[MOVIE_COLLECTION].find().sort([("created_at", -1), ("_id", -1)])
    return list(cursor.skip(skip).limit(limit))


def update(db: Database, movie_id: str, dto: MovieUpdate) -> None:
    data = dto.model_dump(exclude_unset=True)
    if data.get("producer_id"):
        data["producer_id"] = get_objectid(data["producer_id"])
    data["updated_at"] = utcnow()
    db[MOVIE_COLLECTION].update_one({"_id": get_objectid(movie_id)}, {"$set": data})


def remove(db: Database, movie_id: str) -> None:
    db[MOVIE_COLLECTION].delete_one({"_id": get_objectid(movie_id)})


def exists(db: Database, movie_id: str) -> bool:
    return db[MOVIE_COLLECTION].count_documents({"_id": get_objectid(movie_id)}) > 0
