from pathlib import Path

from pytest_mock import MockerFixture
from sqlmodel import Session

from screamscore.crud import rating as rating_crud
from screamscore.exceptions.movie_exceptions import MovieCreateError
from screamscore.models.movie import Movie
from screamscore.sync import seed
from screamscore.sync.omdb import OmdbRatings

SEED_FILE = Path(__file__).resolve().parents[2] / "data" / "seed_movies.yaml"


def test_load_seed_movies():
    entries = seed.load_seed_movies(SEED_FILE)

    assert entries[0].tmdb_id == 694
    assert entries[0].ratings[0].author == "HorrorFan"
    assert all(1 <= r.scream <= 100 for e in entries for r in e.ratings)


def test_seed_movies(
    *,
    db_transaction: Session,
    mocker: MockerFixture,
    movie_factory,
):
    new: Movie = movie_factory(imdb_id="tt0081505", imdb_rating=None)
    existing: Movie = movie_factory()
    mocker.patch(
        "screamscore.services.movies.import_movie_from_tmdb",
        side_effect=[(new, True), (existing, False), MovieCreateError()],
    )
    mocker.patch(
        "screamscore.sync.omdb.get_ratings_by_imdb_id",
        return_value=OmdbRatings(imdb_rating=8.4, imdb_votes=1100000),
    )
    entries = [
        seed.SeedMovie.model_validate(
            {
                "tmdb_id": 694,
                "ratings": [
                    {"scream": 65, "psychological": 95, "suspense": 88, "author": "HorrorFan"},
                    {"scream": 70, "psychological": 92, "suspense": 85},
                ],
            }
        ),
        seed.SeedMovie(tmdb_id=2),
        seed.SeedMovie(tmdb_id=3),
    ]

    stats = seed.seed_movies(session=db_transaction, seed=entries)

    assert stats == seed.SeedStats(created=1, skipped=1, failed=1)
    assert new.imdb_rating == 8.4
    ratings = rating_crud.get_ratings_for_movie(session=db_transaction, movie_id=new.id)
    assert sorted(r.author for r in ratings) == ["Anonymous", "HorrorFan"]
