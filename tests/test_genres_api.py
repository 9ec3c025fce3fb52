import uuid

from tests.conftest import API

URL = f"{API}/genres"


def test_index_hides_soft_deleted(client, make_genre):
    kept = make_genre(name="Action")
    removed = make_genre(name="Horror")
    client.delete(f"{URL}/{removed.id}")

    response = client.get(URL)

    assert response.status_code == 200
    assert [item["id"] for item in response.json()] == [str(kept.id)]


def test_show(client, make_genre):
    genre = make_genre()
    response = client.get(f"{URL}/{genre.id}")

    assert response.status_code == 200
    assert response.json()["name"] == genre.name
    assert client.get(f"{URL}/{uuid.uuid4()}").json() == {"detail": "Genre not found"}


def test_validation(client):
    response = client.post(URL, json={"name": "a" * 256, "is_active": "a"})

    assert response.status_code == 422
    assert response.json()["errors"] == {
        "name": ["The name may not be greater than 255 characters."],
        "is_active": ["The is active field must be true or false."],
    }


def test_store(client):
    response = client.post(URL, json={"name": "Comedy"})

    assert response.status_code == 201
    assert response.json()["name"] == "Comedy"
    assert response.json()["is_active"] is True
    assert "description" not in response.json()


def test_update(client, make_genre):
    genre = make_genre()
    response = client.put(f"{URL}/{genre.id}", json={"name": "Thriller", "is_active": False})

    assert response.status_code == 200
    assert response.json()["name"] == "Thriller"
    assert response.json()["is_active"] is False


def test_update_missing(client):
    response = client.put(f"{URL}/{uuid.uuid4()}", json={"name": "Thriller"})
    assert response.status_code == 404


def test_destroy(client, make_genre):
    genre = make_genre()
    assert client.delete(f"{URL}/{genre.id}").status_code == 204
    assert client.get(f"{URL}/{genre.id}").status_code == 404
