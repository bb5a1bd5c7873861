from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date

from sqlmodel import Session

from screamscore.converters import movie as movie_converters
from screamscore.core.release import is_classic, is_recent, is_upcoming
from screamscore.crud import movie as movies_crud
from screamscore.inputs.movie import HomeFilters
from screamscore.models.movie import Movie
from screamscore.schemas.movie import HomeSections
from screamscore.utils import today_local

SECTION_LIMIT = 20


@dataclass
class HomeSelection:
    upcoming: list[Movie] = field(default_factory=list)
    recent: list[Movie] = field(default_factory=list)
    highest_rated: list[Movie] = field(default_factory=list)
    classics: list[Movie] = field(default_factory=list)


def _imdb(movie: Movie) -> float:
    return movie.imdb_rating or 0.0


def passes_filters(movie: Movie, filters: HomeFilters) -> bool:
    rating = movie.imdb_rating
    if filters.min_imdb is not None and (rating is None or rating < filters.min_imdb):
        return False
    if filters.max_imdb is not None and (rating is None or rating > filters.max_imdb):
        return False
    year = movie.year
    if filters.min_year is not None and (year is None or year < filters.min_year):
        return False
    if filters.max_year is not None and (year is None or year > filters.max_year):
        return False
    return True


def _take(movies: Iterable[Movie], seen: set[int], limit: int) -> list[Movie]:
    section: list[Movie] = []
    for movie in movies:
        if len(section) >= limit:
            break
        if id(movie) in seen:
            continue
        seen.add(id(movie))
        section.append(movie)
    return section


def select_home_sections(
    movies: Sequence[Movie],
    *,
    filters: HomeFilters,
    today: date,
    limit: int = SECTION_LIMIT,
) -> HomeSelection:
    """
    Split the catalog into the homepage sections.

    Only movies with a trailer are shown, and released movies also need an
    IMDb rating. Sections are filled in priority order (upcoming, recent,
    highest rated, classics) and a movie appears in at most one of them.

    Parameters:
        movies (Sequence[Movie]): The catalog.
        filters (HomeFilters): Optional IMDb rating and year bounds.
        today (date): Reference day for upcoming and recent.
        limit (int): Maximum movies per section.
    Returns:
        HomeSelection: The four sections.
    """
    eligible = [
        m
        for m in movies
        if m.trailer_key
        and (m.imdb_rating is not None or is_upcoming(m, today))
        and passes_filters(m, filters)
    ]

    upcoming = sorted(
        (m for m in eligible if m.release_date is not None and m.release_date > today),
        key=lambda m: m.release_date,
    )
    recent = sorted(
        (m for m in eligible if is_recent(m, today)),
        key=lambda m: m.release_date,
        reverse=True,
    )
    highest_rated = sorted(
        (m for m in eligible if m.imdb_rating is not None), key=_imdb, reverse=True
    )
    classics = sorted((m for m in eligible if is_classic(m)), key=_imdb, reverse=True)

    seen: set[int] = set()
    return HomeSelection(
        upcoming=_take(upcoming, seen, limit),
        recent=_take(recent, seen, limit),
        highest_rated=_take(highest_rated, seen, limit),
        classics=_take(classics, seen, limit),
    )


def get_home_sections(
    *,
    session: Session,
    filters: HomeFilters,
    today: date | None = None,
) -> HomeSections:
    """
    Build the homepage sections from the whole catalog.

    Parameters:
        session (Session): Database session.
        filters (HomeFilters): Optional IMDb rating and year bounds.
        today (date | None): Reference day, defaults to today.
    Returns:
        HomeSections: The sections plus whether any filter was applied.
    """
    today = today or today_local()
    selection = select_home_sections(
        movies_crud.get_movies(session=session),
        filters=filters,
        today=today,
    )

    def convert(movies: list[Movie]):
        return [movie_converters.to_public(m, today=today) for m in movies]

    return HomeSections(
        upcoming=convert(selection.upcoming),
        recent=convert(selection.recent),
        highest_rated=convert(selection.highest_rated),
        classics=convert(selection.classics),
        has_filters=filters.any_set,
    )
