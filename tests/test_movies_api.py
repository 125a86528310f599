from datetime import datetime

from bson import ObjectId


def movie_payload(producer_id, **overrides):
    payload = {
        "title": "Interstellar",
        "description": "Through the wormhole",
        "releaseYear": 2014,
        "duration": 169,
        "genre": ["sci-fi", "drama"],
        "producerId": producer_id,
    }
    payload.update(overrides)
    return payload


def test_create_then_get_round_trip(client, make_producer):
    producer_id = make_producer()
    payload = movie_payload(producer_id)

    created = client.post("/api/movies", json=payload)
    assert created.status_code == 201
    movie_id = created.json()["id"]

    response = client.get(f"/api/movies/{movie_id}")
    assert response.status_code == 200
    body = response.json()
    assert body["id"] == movie_id
    for key, value in payload.items():
        assert body[key] == value
    assert "createdAt" in body and "updatedAt" in body
    assert "_id" not in body


def test_create_with_empty_body_lists_all_violations(client):
    response = client.post("/api/movies", json={})

    assert response.status_code == 400
    errors = response.json()["errors"]
    assert "title should not be empty" in errors
    assert "title must be a string" in errors
    assert "releaseYear must be an integer number" in errors
    assert "duration must not be less than 1" in errors
    assert "producerId should not be empty" in errors


def test_create_with_invalid_json(client):
    response = client.post("/api/movies", content=b"{not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert response.json() == {"errors": ["Request body must be valid JSON"]}


def test_create_with_unknown_producer(client):
    producer_id = str(ObjectId())
    response = client.post("/api/movies", json=movie_payload(producer_id))

    assert response.status_code == 400
    assert response.json() == {"errors": [f"Producer with id {producer_id} doesn't exists."]}


def test_get_with_invalid_and_unknown_id(client):
    invalid = client.get("/api/movies/abc")
    assert invalid.status_code == 400
    assert invalid.json() == {"errors": ["Movie id abc is invalid"]}

    movie_id = str(ObjectId())
    missing = client.get(f"/api/movies/{movie_id}")
    assert missing.status_code == 404
    assert missing.json() == {"errors": [f"Movie with id {movie_id} not found"]}


def test_list_with_pagination(client, make_producer, make_movie):
    producer_id = make_producer()
    for i in range(15):
        make_movie(producer_id, title=f"Movie {i}")

    first = client.get("/api/movies", params={"skip": 0, "limit": 10}).json()
    second = client.get("/api/movies", params={"skip": 10, "limit": 5}).json()

    assert len(first) == 10
    assert len(second) == 5
    assert not {m["id"] for m in first} & {m["id"] for m in second}
    assert len(client.get("/api/movies").json()) == 10


def test_list_rejects_bad_query(client):
    response = client.get("/api/movies", params={"limit": 0})
    assert response.status_code == 400
    assert response.json()["errors"][0].startswith("limit ")


def test_patch_is_partial(client, make_movie):
    movie_id = make_movie(title="Old", duration=95)

    response = client.patch(f"/api/movies/{movie_id}", json={"title": "New"})
    assert response.status_code == 200
    assert response.content == b""

    body = client.get(f"/api/movies/{movie_id}").json()
    assert body["title"] == "New"
    assert body["duration"] == 95


def test_patch_validates_body_before_anything_else(client):
    response = client.patch("/api/movies/not-an-id", json={"duration": 0})
    assert response.status_code == 400
    assert response.json() == {"errors": ["duration must not be less than 1"]}


def test_patch_unknown_movie(client):
    response = client.patch(f"/api/movies/{ObjectId()}", json={"title": "x"})
    assert response.status_code == 404


def test_delete(client, make_movie):
    movie_id = make_movie()

    response = client.delete(f"/api/movies/{movie_id}")
    assert response.status_code == 204

    assert client.get(f"/api/movies/{movie_id}").status_code == 404
    assert client.delete(f"/api/movies/{movie_id}").status_code == 404
    assert client.delete("/api/movies/zzz").json() == {"errors": ["Movie id zzz is invalid"]}


def test_list_rejects_offset_beyond_64_bits(client):
    response = client.get("/api/movies", params={"skip": 10**20})
    assert response.status_code == 400
    assert response.json()["errors"][0].startswith("skip ")


def test_timestamps_carry_an_offset(client, make_movie):
    body = client.get(f"/api/movies/{make_movie()}").json()
    assert datetime.fromisoformat(body["createdAt"]).tzinfo is not None
