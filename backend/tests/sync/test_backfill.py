from datetime import date

from pytest_mock import MockerFixture
from sqlmodel import Session

from screamscore.exceptions.provider_exceptions import TmdbError
from screamscore.models.movie import Movie
from screamscore.sync import backfill


def test_backfill_release_dates(
    *,
    db_transaction: Session,
    mocker: MockerFixture,
    movie_factory,
):
    dated: Movie = movie_factory(tmdb_id=1, year=2020, release_date=None)
    wrong_year: Movie = movie_factory(tmdb_id=2, year=1999, release_date=None)
    undated: Movie = movie_factory(tmdb_id=3, year=2001, release_date=None)
    failing: Movie = movie_factory(tmdb_id=4, year=2002, release_date=None)
    already: Movie = movie_factory(tmdb_id=5, release_date=date(2010, 1, 1))

    details = {
        1: {"release_date": "2020-10-31"},
        2: {"release_date": "2000-02-01"},
        3: {"release_date": ""},
    }

    def fake_details(tmdb_id: int) -> dict:
        if tmdb_id not in details:
            raise TmdbError(f"/movie/{tmdb_id}", 500)
        return details[tmdb_id]

    mock_details = mocker.patch(
        "screamscore.sync.tmdb.get_movie_details", side_effect=fake_details
    )
    sleep = mocker.MagicMock()

    stats = backfill.backfill_release_dates(
        session=db_transaction, delay=0.2, sleep=sleep
    )

    assert stats == backfill.BackfillStats(updated=2, skipped=1, failed=1)
    assert dated.release_date == date(2020, 10, 31)
    assert dated.year == 2020
    assert wrong_year.release_date == date(2000, 2, 1)
    assert wrong_year.year == 2000
    assert undated.release_date is None
    assert failing.release_date is None
    assert already.release_date == date(2010, 1, 1)
    assert mock_details.call_count == 4
    assert sleep.call_count == 4
