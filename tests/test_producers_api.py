from bson import ObjectId


def test_create_and_get(client):
    payload = {
        "name": "Paramount Pictures",
        "country": "USA",
        "foundedYear": 1912,
        "website": "https://www.paramount.com",
        "bio": "One of the oldest Hollywood studios",
    }

    created = client.post("/api/producers", json=payload)
    assert created.status_code == 201
    producer_id = created.json()["id"]

    body = client.get(f"/api/producers/{producer_id}").json()
    assert body["id"] == producer_id
    for key, value in payload.items():
        assert body[key] == value


def test_create_rejects_bad_website(client):
    response = client.post("/api/producers", json={"name": "Pixar", "website": "pixar.com"})
    assert response.status_code == 400
    assert response.json() == {"errors": ["Website must be a valid URL"]}


def test_info_endpoint(client, make_producer):
    producer_id = make_producer(name="Studio Ghibli", country="Japan")

    body = client.get(f"/api/producers/{producer_id}/info").json()

    assert body == {
        "id": producer_id,
        "name": "Studio Ghibli",
        "country": "Japan",
        "displayName": "Studio Ghibli (Japan)",
    }


def test_list(client, make_producer):
    for i in range(3):
        make_producer(name=f"P{i}")
    body = client.get("/api/producers", params={"limit": 2}).json()
    assert [p["name"] for p in body] == ["P2", "P1"]


def test_patch(client, make_producer):
    producer_id = make_producer(name="Ghibli", country="Japan")

    assert client.patch(f"/api/producers/{producer_id}", json={"country": "JP"}).status_code == 200

    body = client.get(f"/api/producers/{producer_id}").json()
    assert body["country"] == "JP"
    assert body["name"] == "Ghibli"


def test_invalid_and_unknown_ids(client):
    assert client.get("/api/producers/123").json() == {"errors": ["Producer id 123 is invalid"]}
    assert client.get(f"/api/producers/{ObjectId()}").status_code == 404
    assert client.patch(f"/api/producers/{ObjectId()}", json={"name": "x"}).status_code == 404


def test_delete_producer_with_movies_is_refused(client, make_producer, make_movie):
    producer_id = make_producer()
    make_movie(producer_id)

    response = client.delete(f"/api/producers/{producer_id}")

    assert response.status_code == 400
    assert response.json() == {"errors": ["Cannot delete producer with existing movies"]}
    assert client.get(f"/api/producers/{producer_id}").status_code == 200


def test_delete_producer_without_movies(client, make_producer):
    producer_id = make_producer()

    assert client.delete(f"/api/producers/{producer_id}").status_code == 204
    assert client.get(f"/api/producers/{producer_id}").status_code == 404


def test_list_rejects_offset_beyond_64_bits(client):
    response = client.get("/api/producers", params={"skip": 10**20})
    assert response.status_code == 400
    assert response.json()["errors"][0].startswith("skip ")
