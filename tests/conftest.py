import mongomock
import pytest
from fastapi.testclient import TestClient

from filmrating.database import MongoConnection, ensure_indexes
from filmrating.main import create_app
from filmrating.movies import repository as movie_repository
from filmrating.movies.schemas import MovieCreate
from filmrating.producers import repository as producer_repository
from filmrating.producers.schemas import ProducerCreate
from filmrating.ratings import repository as rating_repository
from filmrating.ratings.schemas import RatingCreate

DB_NAME = "filmrating_test"


@pytest.fixture
def mongo_client():
    return mongomock.MongoClient(tz_aware=True)


@pytest.fixture
def db(mongo_client):
    database = mongo_client[DB_NAME]
    ensure_indexes(database)
    return database


@pytest.fixture
def app(mongo_client):
    return create_app(connection=MongoConnection(None, DB_NAME, client=mongo_client))


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_producer(db):
    def factory(**overrides):
        data = {"name": "Studio Ghibli", "country": "Japan", "founded_year": 1985}
        data.update(overrides)
        return producer_repository.create(db, ProducerCreate(**data))

    return factory


@pytest.fixture
def make_movie(db, make_producer):
    def factory(producer_id=None, **overrides):
        data = {"title": "Spirited Away", "release_year": 2001, "duration": 125, "genre": ["animation"]}
        data.update(overrides)
        data["producer_id"] = producer_id or make_producer()
        return movie_repository.create(db, MovieCreate(**data))

    return factory


@pytest.fixture
def make_rating(db):
    def factory(movie_id, score=8, **overrides):
        return rating_repository.create(db, RatingCreate(movie_id=movie_id, score=score, **overrides))

    return factory
