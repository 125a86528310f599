from datetime import datetime

from bson import ObjectId

from filmrating.movies.schemas import MovieOut
from filmrating.producers.schemas import ProducerInfo
from filmrating.projection import project, project_all

NOW = datetime(2024, 5, 1, 12, 0)


def movie_document(**overrides):
    doc = {
        "_id": ObjectId(),
        "title": "Interstellar",
        "description": None,
        "release_year": 2014,
        "duration": 169,
        "genre": ["sci-fi"],
        "producer_id": ObjectId(),
        "created_at": NOW,
        "updated_at": NOW,
        "__v": 0,
    }
    doc.update(overrides)
    return doc


def test_movie_projection_stringifies_ids_and_uses_public_names():
    doc = movie_document()
    movie = project(MovieOut, doc)

    assert movie.id == str(doc["_id"])
    assert movie.producer_id == str(doc["producer_id"])
    assert movie.model_dump(by_alias=True) == {
        "id": str(doc["_id"]),
        "title": "Interstellar",
        "description": None,
        "releaseYear": 2014,
        "duration": 169,
        "genre": ["sci-fi"],
        "producerId": str(doc["producer_id"]),
        "createdAt": NOW,
        "updatedAt": NOW,
    }


def test_projection_does_not_mutate_the_document():
    doc = movie_document()
    snapshot = dict(doc)

    project(MovieOut, doc)

    assert doc == snapshot
    assert isinstance(doc["_id"], ObjectId)


def test_producer_display_name_includes_country_when_present():
    with_country = project(ProducerInfo, {"_id": ObjectId(), "name": "Studio Ghibli", "country": "Japan"})
    without_country = project(ProducerInfo, {"_id": ObjectId(), "name": "Pixar", "bio": "hidden"})

    assert with_country.display_name == "Studio Ghibli (Japan)"
    assert without_country.display_name == "Pixar"
    assert set(without_country.model_dump(by_alias=True)) == {"id", "name", "country", "displayName"}


def test_project_all_keeps_order():
    docs = [movie_document(title="A"), movie_document(title="B")]
    assert [m.title for m in project_all(MovieOut, docs)] == ["A", "B"]
