from fastapi.testclient import TestClient

from screamscore.core.config import settings
from screamscore.models.movie import Movie

RATINGS_URL = f"{settings.API_V1_STR}/ratings/"


def test_create_rating(
    client: TestClient,
    movie_factory,
) -> None:
    movie: Movie = movie_factory()
    movie_id = movie.id

    response = client.post(
        RATINGS_URL,
        json={
            "movieId": movie_id,
            "scream": 70,
            "psychological": 92,
            "suspense": 85,
            "review": "  Kept me up all night.  ",
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert body["movie_id"] == movie_id
    assert body["spook_score"] == 82
    assert body["author"] == "Anonymous"
    assert body["review"] == "Kept me up all night."

    detail = client.get(f"{settings.API_V1_STR}/movies/{movie_id}").json()
    assert detail["averages"]["spook_score"] == 82
    assert [r["id"] for r in detail["ratings"]] == [body["id"]]


def test_create_rating_missing_movie_id(client: TestClient) -> None:
    response = client.post(
        RATINGS_URL,
        json={"scream": 70, "psychological": 92, "suspense": 85},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Movie ID is required"}


def test_create_rating_missing_sub_score(
    client: TestClient,
    movie_factory,
) -> None:
    movie_id = movie_factory().id

    response = client.post(
        RATINGS_URL,
        json={"movieId": movie_id, "scream": 70, "suspense": 85},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "All rating values are required"}


def test_create_rating_out_of_range_creates_nothing(
    client: TestClient,
    movie_factory,
) -> None:
    movie_id = movie_factory().id

    response = client.post(
        RATINGS_URL,
        json={"movieId": movie_id, "scream": 0, "psychological": 50, "suspense": 101},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Rating values must be between 1 and 100"}
    ratings = client.get(f"{settings.API_V1_STR}/movies/{movie_id}/ratings").json()
    assert ratings == []


def test_create_rating_unknown_movie(client: TestClient) -> None:
    response = client.post(
        RATINGS_URL,
        json={"movieId": 999999, "scream": 50, "psychological": 50, "suspense": 50},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Movie with ID 999999 not found."}


def test_create_rating_non_integer_score(
    client: TestClient,
    movie_factory,
) -> None:
    movie_id = movie_factory().id

    response = client.post(
        RATINGS_URL,
        json={"movieId": movie_id, "scream": "loud", "psychological": 50, "suspense": 50},
    )

    assert response.status_code == 400
    assert "error" in response.json()
