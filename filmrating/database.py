"""
MongoDB connection handle.

The handle is built once at process start, opened by the application
lifespan and closed at shutdown. Path operations get the live
``pymongo.database.Database`` through the ``get_db`` dependency.
"""
import logging
from typing import Optional

from fastapi import Request
from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.database import Database

logger = logging.getLogger(__name__)

MOVIE_COLLECTION = "movie"
PRODUCER_COLLECTION = "producer"
RATING_COLLECTION = "rating"


class MongoConnection:
    def __init__(self, url: Optional[str], name: str, client=None):
        self.url = url
        self.name = name
        self.client = client
        self.db: Optional[Database] = None

    def open(self) -> Database:
        if self.client is None:
            self.client = MongoClient(self.url, tz_aware=True)
        self.db = self.client[self.name]
        ensure_indexes(self.db)
        logger.info("Connected to database %s", self.name)
        return self.db

    def close(self) -> None:
        if self.client is not None:
            self.client.close()
            logger.info("Closed connection to database %s", self.name)
        self.client = None
        self.db = None


def ensure_indexes(db: Database) -> None:
    db[MOVIE_COLLECTION].create_index([("producer_id", ASCENDING)])
    db[RATING_COLLECTION].create_index([("movie_id", ASCENDING)])
    db[RATING_COLLECTION].create_index([("movie_id", ASCENDING), ("rating_date", DESCENDING)])


def get_db(request: Request) -> Database:
    connection: MongoConnection = request.app.state.connection
    if connection.db is None:
        raise RuntimeError("Database connection is not open")
    return connection.db
