from datetime import date

from dateutil.relativedelta import relativedelta

from screamscore.models.movie import Movie

RECENT_WINDOW = relativedelta(months=6)
CLASSIC_BEFORE_YEAR = 1990


def is_upcoming(movie: Movie, today: date) -> bool:
    """A movie is upcoming when it releases after today. Without a release
    date the year decides, and without either it is not upcoming."""
    if movie.release_date is None:
        if movie.year is None:
            return False
        return movie.year > today.year
    return movie.release_date > today


def is_recent(movie: Movie, today: date) -> bool:
    if movie.release_date is None:
        return False
    return today - RECENT_WINDOW <= movie.release_date <= today


def is_classic(movie: Movie) -> bool:
    return movie.year is not None and movie.year < CLASSIC_BEFORE_YEAR
