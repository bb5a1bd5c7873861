from collections.abc import Sequence

from screamscore.models.movie import Movie

__all__ = [
    "parse_genres",
    "external_rating",
    "select_similar_movies",
]


def parse_genres(genres: str | None) -> set[str]:
    """Split a comma-delimited genre string into a lowercase set."""
    if not genres:
        return set()
    return {g.strip().lower() for g in genres.split(",") if g.strip()}


def external_rating(movie: Movie) -> float:
    return movie.imdb_rating or 0.0


def _by_external_rating(movies: Sequence[Movie]) -> list[Movie]:
    # sorted() is stable, so ties keep catalog order
    return sorted(movies, key=external_rating, reverse=True)


def select_similar_movies(
    movies: Sequence[Movie],
    *,
    genres: str | None,
    exclude_movie_id: int | None,
    limit: int,
) -> list[Movie]:
    """
    Pick up to `limit` movies that share a genre with the subject.

    Genre matches come first, ordered by external rating. When there are fewer
    than `limit` of them the remainder is topped up with the highest rated
    movies that were not picked yet. A subject without genres gets the top
    rated movies only.

    Parameters:
        movies (Sequence[Movie]): The catalog, in catalog order.
        genres (str | None): The subject's comma-delimited genre list.
        exclude_movie_id (int | None): The subject's id, never returned.
        limit (int): Maximum number of movies to return.
    Returns:
        list[Movie]: At most `limit` movies, none of them the subject.
    """
    if limit <= 0:
        return []

    candidates = [
        m for m in movies if exclude_movie_id is None or m.id != exclude_movie_id
    ]
    subject_genres = parse_genres(genres)

    if not subject_genres:
        return _by_external_rating(candidates)[:limit]

    matches = _by_external_rating(
        [m for m in candidates if parse_genres(m.genres) & subject_genres]
    )[:limit]

    if len(matches) < limit:
        picked = {id(m) for m in matches}
        top_up = _by_external_rating(
            [m for m in candidates if id(m) not in picked]
        )[: limit - len(matches)]
        matches.extend(top_up)

    return matches
