from datetime import date

from screamscore.core.release import is_classic, is_recent, is_upcoming
from screamscore.models.movie import Movie

TODAY = date(2026, 6, 15)


def test_is_upcoming_by_release_date():
    assert is_upcoming(Movie(title="a", release_date=date(2026, 6, 16)), TODAY)
    assert not is_upcoming(Movie(title="b", release_date=TODAY), TODAY)
    assert not is_upcoming(Movie(title="c", release_date=date(2020, 1, 1), year=2030), TODAY)


def test_is_upcoming_falls_back_to_year():
    assert is_upcoming(Movie(title="a", year=2027), TODAY)
    assert not is_upcoming(Movie(title="b", year=2026), TODAY)
    assert not is_upcoming(Movie(title="c"), TODAY)


def test_is_recent_covers_six_months_inclusive():
    assert is_recent(Movie(title="a", release_date=date(2025, 12, 15)), TODAY)
    assert is_recent(Movie(title="b", release_date=TODAY), TODAY)
    assert not is_recent(Movie(title="c", release_date=date(2025, 12, 14)), TODAY)
    assert not is_recent(Movie(title="d", release_date=date(2026, 6, 16)), TODAY)
    assert not is_recent(Movie(title="e", year=2026), TODAY)


def test_is_classic():
    assert is_classic(Movie(title="a", year=1989))
    assert not is_classic(Movie(title="b", year=1990))
    assert not is_classic(Movie(title="c"))
