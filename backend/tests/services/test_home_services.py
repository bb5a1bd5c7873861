from datetime import date

from sqlmodel import Session

from screamscore.inputs.movie import HomeFilters
from screamscore.models.movie import Movie
from screamscore.services import home as home_services

TODAY = date(2026, 10, 19)


def _movie(
    id: int,
    *,
    trailer_key: str | None = "yt",
    release_date: date | None = None,
    year: int | None = None,
    imdb_rating: float | None = None,
) -> Movie:
    if year is None and release_date is not None:
        year = release_date.year
    return Movie(
        id=id,
        title=f"Movie {id}",
        trailer_key=trailer_key,
        release_date=release_date,
        year=year,
        imdb_rating=imdb_rating,
    )


def test_movies_without_trailer_are_dropped():
    movies = [_movie(1, trailer_key=None, year=1980, imdb_rating=8.0)]

    selection = home_services.select_home_sections(
        movies, filters=HomeFilters(), today=TODAY
    )

    assert selection.highest_rated == []
    assert selection.classics == []


def test_released_movies_need_imdb_rating_but_upcoming_do_not():
    upcoming = _movie(1, release_date=date(2026, 12, 1))
    released_unrated = _movie(2, release_date=date(2026, 9, 1))

    selection = home_services.select_home_sections(
        [upcoming, released_unrated], filters=HomeFilters(), today=TODAY
    )

    assert selection.upcoming == [upcoming]
    assert selection.recent == []


def test_sections_are_sorted_and_deduplicated():
    soon = _movie(1, release_date=date(2026, 10, 25))
    later = _movie(2, release_date=date(2027, 3, 1))
    recent_old = _movie(3, release_date=date(2026, 5, 1), imdb_rating=6.0)
    recent_new = _movie(4, release_date=date(2026, 10, 1), imdb_rating=5.0)
    great = _movie(5, release_date=date(2015, 1, 1), imdb_rating=8.5)
    classic = _movie(6, year=1978, imdb_rating=7.9)
    better_classic = _movie(7, year=1980, imdb_rating=8.4)

    selection = home_services.select_home_sections(
        [later, soon, recent_old, recent_new, great, classic, better_classic],
        filters=HomeFilters(),
        today=TODAY,
    )

    assert selection.upcoming == [soon, later]
    assert selection.recent == [recent_new, recent_old]
    # classics already appear under highest rated, so that section is empty
    assert selection.highest_rated == [great, better_classic, classic]
    assert selection.classics == []


def test_sections_are_capped():
    movies = [_movie(i, year=1970, imdb_rating=5.0 + i / 100) for i in range(1, 50)]

    selection = home_services.select_home_sections(
        movies, filters=HomeFilters(), today=TODAY, limit=20
    )

    assert len(selection.highest_rated) == 20
    assert len(selection.classics) == 20
    assert not {m.id for m in selection.highest_rated} & {
        m.id for m in selection.classics
    }


def test_filters_drop_movies_without_the_filtered_value():
    rated = _movie(1, year=1985, imdb_rating=7.5)
    low = _movie(2, year=1985, imdb_rating=5.0)
    upcoming_unrated = _movie(3, release_date=date(2027, 1, 1))
    old = _movie(4, year=1960, imdb_rating=8.0)

    selection = home_services.select_home_sections(
        [rated, low, upcoming_unrated, old],
        filters=HomeFilters(min_imdb=7.0, min_year=1980),
        today=TODAY,
    )

    assert selection.upcoming == []
    assert selection.highest_rated == [rated]


def test_get_home_sections_reports_filters(
    *,
    db_transaction: Session,
    movie_factory,
):
    movie_factory(year=1975, imdb_rating=8.1, trailer_key="abc")

    unfiltered = home_services.get_home_sections(
        session=db_transaction, filters=HomeFilters(), today=TODAY
    )
    filtered = home_services.get_home_sections(
        session=db_transaction, filters=HomeFilters(max_year=1970), today=TODAY
    )

    assert unfiltered.has_filters is False
    assert len(unfiltered.highest_rated) == 1
    assert filtered.has_filters is True
    assert filtered.highest_rated == []
