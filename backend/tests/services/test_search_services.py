import pytest
from pytest_mock import MockerFixture
from sqlmodel import Session

from screamscore.exceptions.provider_exceptions import TmdbError
from screamscore.exceptions.search_exceptions import SearchError
from screamscore.inputs.movie import HomeFilters
from screamscore.services import search as search_services


def test_search_catalog_blank_query_skips_database(mocker: MockerFixture):
    mock_search = mocker.patch("screamscore.crud.movie.search_movies")

    result = search_services.search_catalog(session=mocker.MagicMock(), query="   ")

    assert result.movies == []
    mock_search.assert_not_called()


def test_search_catalog(
    *,
    db_transaction: Session,
    movie_factory,
):
    movie = movie_factory(title="Hereditary", year=2018, poster_path="/h.jpg")

    result = search_services.search_catalog(session=db_transaction, query="HERED")

    assert [m.id for m in result.movies] == [movie.id]
    assert result.movies[0].poster_url == "https://image.tmdb.org/t/p/w185/h.jpg"


def test_search_tmdb_trims_and_caps_query(mocker: MockerFixture):
    mock_search = mocker.patch(
        "screamscore.sync.tmdb.search_movies",
        return_value=[{"id": i} for i in range(20)],
    )

    result = search_services.search_tmdb(query="  " + "a" * 150 + "  ")

    mock_search.assert_called_once_with("a" * 100)
    assert len(result.results) == 10


def test_search_tmdb_blank_query(mocker: MockerFixture):
    mock_search = mocker.patch("screamscore.sync.tmdb.search_movies")

    assert search_services.search_tmdb(query="").results == []
    mock_search.assert_not_called()


def test_search_tmdb_provider_failure(mocker: MockerFixture):
    mocker.patch(
        "screamscore.sync.tmdb.search_movies",
        side_effect=TmdbError("/search/movie", 401),
    )

    with pytest.raises(SearchError):
        search_services.search_tmdb(query="scream")


def test_search_catalog_underscore_is_not_a_wildcard(
    *,
    db_transaction: Session,
    movie_factory,
):
    movie_factory(title="The Shining")
    movie_factory(title="Alien")

    result = search_services.search_catalog(session=db_transaction, query="_")

    assert result.movies == []


def test_search_results_returns_every_match_uncapped(
    *,
    db_transaction: Session,
    movie_factory,
):
    for i in range(12):
        movie_factory(title=f"Saw {i}")
    movie_factory(title="Psycho")

    result = search_services.search_results(
        session=db_transaction, query=" saw ", filters=HomeFilters()
    )

    assert result.query == "saw"
    assert len(result.movies) == 12
    assert result.has_filters is False


def test_search_results_applies_filters(
    *,
    db_transaction: Session,
    movie_factory,
):
    kept = movie_factory(title="Halloween", year=1978, imdb_rating=7.7)
    movie_factory(title="Halloween Kills", year=2021, imdb_rating=5.5)
    movie_factory(title="Halloween III", year=1982, imdb_rating=None)
    kept_id = kept.id

    result = search_services.search_results(
        session=db_transaction,
        query="halloween",
        filters=HomeFilters(min_imdb=7.0, max_year=1990),
    )

    assert [m.id for m in result.movies] == [kept_id]
    assert result.has_filters is True


def test_search_results_blank_query_skips_database(mocker: MockerFixture):
    mock_search = mocker.patch("screamscore.crud.movie.search_movies")

    result = search_services.search_results(
        session=mocker.MagicMock(), query="  ", filters=HomeFilters(min_year=2000)
    )

    assert result.movies == []
    assert result.has_filters is True
    mock_search.assert_not_called()
