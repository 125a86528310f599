from typing import Dict, List

from pymongo.database import Database

from filmrating.database import RATING_COLLECTION
from filmrating.ids import get_objectid
from filmrating.ratings.schemas import RatingCreate, RatingQuery
from filmrating.schemas import utcnow


def create(db: Database, dto: RatingCreate) -> str:
    data = dto.model_dump()
    data["movie_id"] = get_objectid(data["movie_id"])
    data["created_at"] = utcnow()
    data["updated_at"] = data["created_at"]
    result = db[RATING_COLLECTION].insert_one(data)
    return str(result.inserted_id)


def find_by_movie_id(db: Database, query: RatingQuery) -> List[dict]:
    cursor = (
        db[RATING_COLLECTION]
        .find({"movie_id": get_objectid(query.movie_id)})
        .sort([("rating_date", -1), ("_id", -1)])
    )
    return list(cursor.skip(query.skip).limit(query.limit))


def count_by_movie_ids(db: Database, movie_ids: List[str]) -> Dict[str, int]:
    """Number of ratings per movie; movies without ratings map to 0."""
    counts = {movie_id: 0 for movie_id in movie_ids}
    if not movie_ids:
        return counts

    pipeline = [
        {"$match": {"movie_id": {"$in": [get_objectid(m) for m in movie_ids]}}},
        {"$group": {"_id": "$movie_id", "count": {"$sum": 1}}},
    ]
    for item in db[RATING_COLLECTION].aggregate(pipeline):
        counts[str(item["_id"])] = item["count"]
    return counts


def get_average_rating(db: Database, movie_id: str) -> Dict[str, float]:
    pipeline = [
        {"$match": {"movie_id": get_objectid(movie_id)}},
        {"$group": {"_id": "$movie_id", "average": {"$avg": "$score"}, "count": {"$sum": 1}}},
    ]
    result = list(db[RATING_COLLECTION].aggregate(pipeline))
    if not result:
        return {"average": 0, "count": 0}
    return {"average": round(result[0]["average"], 2), "count": result[0]["count"]}
