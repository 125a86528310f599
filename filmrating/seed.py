"""
Populate the database with a small demo catalog.

    python -m filmrating.seed

All three collections are cleared first.
"""
import logging
import sys
import time

from pymongo.database import Database
from pymongo.errors import PyMongoError

from filmrating.database import MOVIE_COLLECTION, PRODUCER_COLLECTION, RATING_COLLECTION, MongoConnection
from filmrating.movies import repository as movie_repository
from filmrating.movies.schemas import MovieCreate
from filmrating.producers import repository as producer_repository
from filmrating.producers.schemas import ProducerCreate
from filmrating.ratings import repository as rating_repository
from filmrating.ratings.schemas import RatingCreate
from filmrating.schemas import utcnow
from filmrating.settings import configure_logging, load_settings

logger = logging.getLogger(__name__)

PRODUCERS = [
    {
        "name": "Warner Bros. Pictures",
        "country": "USA",
        "founded_year": 1923,
        "website": "https://www.warnerbros.com",
        "bio": "American film studio, one of the largest in the world",
    },
    {
        "name": "Paramount Pictures",
        "country": "USA",
        "founded_year": 1912,
        "website": "https://www.paramount.com",
        "bio": "One of the oldest Hollywood studios",
    },
    {
        "name": "Studio Ghibli",
        "country": "Japan",
        "founded_year": 1985,
        "website": "https://www.ghibli.jp",
        "bio": "Japanese animation studio founded by Hayao Miyazaki",
    },
]

# producer index -> movies
MOVIES = [
    (0, {"title": "Interstellar", "release_year": 2014, "duration": 169, "genre": ["sci-fi", "drama"],
         "description": "Explorers travel through a wormhole in search of a new home for humanity"}),
    (0, {"title": "The Dark Knight", "release_year": 2008, "duration": 152, "genre": ["action", "crime"]}),
    (1, {"title": "The Godfather", "release_year": 1972, "duration": 175, "genre": ["crime", "drama"]}),
    (2, {"title": "Spirited Away", "release_year": 2001, "duration": 125, "genre": ["animation", "fantasy"]}),
    (2, {"title": "My Neighbor Totoro", "release_year": 1988, "duration": 86, "genre": ["animation", "family"]}),
]

# movie index -> scores
RATINGS = {
    0: [9, 10, 8],
    1: [10, 9],
    2: [10, 10, 9],
    3: [9, 8],
    4: [8],
}


def wait_for_database(connection: MongoConnection, max_attempts: int = 10, delay: float = 2.0) -> Database:
    for attempt in range(1, max_attempts + 1):
        try:
            db = connection.open()
            db.command("ping")
            logger.info("MongoDB connected")
            return db
        except PyMongoError as e:
            connection.close()
            logger.warning("Waiting for MongoDB... attempt %d of %d (%s)", attempt, max_attempts, e)
            time.sleep(delay)
    raise RuntimeError(f"Failed to connect to MongoDB after {max_attempts} attempts")


def seed_database(db: Database) -> dict:
    for name in (RATING_COLLECTION, MOVIE_COLLECTION, PRODUCER_COLLECTION):
        db[name].delete_many({})
    logger.info("Collections cleared")

    producer_ids = [producer_repository.create(db, ProducerCreate(**p)) for p in PRODUCERS]
    logger.info("Created %d producers", len(producer_ids))

    movie_ids = [
        movie_repository.create(db, MovieCreate(producer_id=producer_ids[index], **movie))
        for index, movie in MOVIES
    ]
    logger.info("Created %d movies", len(movie_ids))

    rating_count = 0
    for index, scores in RATINGS.items():
        for score in scores:
            dto = RatingCreate(movie_id=movie_ids[index], score=score, rating_date=utcnow(), created_by="seed")
            rating_repository.create(db, dto)
            rating_count += 1
    logger.info("Created %d ratings", rating_count)

    return {"producers": len(producer_ids), "movies": len(movie_ids), "ratings": rating_count}


def main() -> int:
    settings = load_settings()
    configure_logging(settings.log_level)
    connection = MongoConnection(settings.database_url, settings.database_name)
    logger.info("Starting seed process...")
    try:
        db = wait_for_database(connection)
        seed_database(db)
    except (RuntimeError, PyMongoError):
        logger.exception("Seed process failed")
        return 1
    finally:
        connection.close()
    logger.info("Seed process completed successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
