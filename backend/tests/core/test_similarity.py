from screamscore.core.similarity import parse_genres, select_similar_movies
from screamscore.models.movie import Movie


def _movie(id: int, genres: str | None, imdb_rating: float | None) -> Movie:
    return Movie(id=id, title=f"Movie {id}", genres=genres, imdb_rating=imdb_rating)


def test_parse_genres_normalizes():
    assert parse_genres(" Horror, thriller ,,Mystery ") == {
        "horror",
        "thriller",
        "mystery",
    }
    assert parse_genres(None) == set()
    assert parse_genres("") == set()


def test_genre_matches_come_first_sorted_by_rating():
    subject = _movie(1, "Horror, Mystery", 8.0)
    catalog = [
        subject,
        _movie(2, "Comedy", 9.9),
        _movie(3, "Horror", 6.0),
        _movie(4, "mystery, Drama", 7.5),
        _movie(5, "Horror", 7.0),
    ]

    result = select_similar_movies(
        catalog, genres=subject.genres, exclude_movie_id=1, limit=3
    )

    assert [m.id for m in result] == [4, 5, 3]


def test_tops_up_with_highest_rated_when_not_enough_matches():
    catalog = [
        _movie(1, "Horror", 8.0),
        _movie(2, "Horror", 5.0),
        _movie(3, "Comedy", 9.0),
        _movie(4, "Drama", None),
        _movie(5, "Western", 6.5),
    ]

    result = select_similar_movies(
        catalog, genres="Horror", exclude_movie_id=1, limit=4
    )

    assert [m.id for m in result] == [2, 3, 5, 4]


def test_subject_without_genres_gets_top_rated():
    catalog = [
        _movie(1, None, 9.0),
        _movie(2, "Horror", 5.0),
        _movie(3, "Comedy", 8.0),
    ]

    result = select_similar_movies(catalog, genres=None, exclude_movie_id=1, limit=5)

    assert [m.id for m in result] == [3, 2]


def test_never_includes_subject_and_respects_limit():
    catalog = [_movie(i, "Horror", float(i)) for i in range(1, 20)]

    result = select_similar_movies(
        catalog, genres="Horror", exclude_movie_id=19, limit=5
    )

    assert len(result) == 5
    assert all(m.id != 19 for m in result)


def test_ties_keep_catalog_order():
    catalog = [_movie(1, "Horror", 7.0), _movie(2, "Horror", 7.0), _movie(3, "Horror", 7.0)]

    result = select_similar_movies(
        catalog, genres="Horror", exclude_movie_id=None, limit=3
    )

    assert [m.id for m in result] == [1, 2, 3]


def test_non_positive_limit_returns_nothing():
    catalog = [_movie(1, "Horror", 7.0)]

    assert select_similar_movies(catalog, genres="Horror", exclude_movie_id=None, limit=0) == []
