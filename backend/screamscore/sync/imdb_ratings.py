import gzip
import os
import tempfile
from collections import defaultdict
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import requests
from loguru import logger
from sqlmodel import Session

from screamscore.api.deps import get_db_context
from screamscore.crud import movie as movies_crud
from screamscore.exceptions.provider_exceptions import ImdbDatasetError
from screamscore.logging_ import setup_logger
from screamscore.models.movie import Movie, MovieUpdate

IMDB_RATINGS_URL = "https://datasets.imdbws.com/title.ratings.tsv.gz"
RATING_TOLERANCE = 0.01
DOWNLOAD_CHUNK_SIZE = 1 << 16
DOWNLOAD_TIMEOUT_SECONDS = 60


@dataclass
class ImdbUpdateStats:
    updated: int = 0
    skipped: int = 0
    not_found: int = 0


def download_dataset(dest: str, url: str = IMDB_RATINGS_URL) -> None:
    """Stream the gzipped ratings dataset to `dest`."""
    logger.info(f"Downloading IMDb ratings dataset from {url}")
    try:
        with requests.get(url, stream=True, timeout=DOWNLOAD_TIMEOUT_SECONDS) as response:
            response.raise_for_status()
            with open(dest, "wb") as file:
                for chunk in response.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                    file.write(chunk)
    except requests.RequestException as e:
        raise ImdbDatasetError(f"Failed to download IMDb dataset: {e}") from e
    logger.info("Download complete")


def iter_ratings(lines: Iterable[str]) -> Iterator[tuple[str, float, int]]:
    """
    Parse `tconst averageRating numVotes` rows, skipping the header and any
    malformed or zero-rated row.
    """
    rows = iter(lines)
    next(rows, None)
    for line in rows:
        parts = line.rstrip("\n").split("\t")
        if len(parts) != 3:
            continue
        imdb_id, rating_raw, votes_raw = parts
        try:
            rating = float(rating_raw)
            votes = int(votes_raw)
        except ValueError:
            continue
        if rating > 0:
            yield imdb_id, rating, votes


def apply_ratings(
    *,
    session: Session,
    ratings: Iterable[tuple[str, float, int]],
) -> ImdbUpdateStats:
    """
    Update the IMDb rating of every catalog movie found in `ratings`.

    A movie is only touched when its stored rating is missing or differs by
    more than 0.01. Commits once at the end.

    Parameters:
        session (Session): Database session.
        ratings (Iterable[tuple[str, float, int]]): (imdb_id, rating, votes) rows.
    Returns:
        ImdbUpdateStats: Counts of updated, skipped and not found movies.
    """
    pending: defaultdict[str, list[Movie]] = defaultdict(list)
    movies = movies_crud.get_movies_with_imdb_id(session=session)
    for movie in movies:
        if movie.imdb_id:
            pending[movie.imdb_id].append(movie)
    logger.info(f"Found {len(movies)} movies with IMDb IDs")

    stats = ImdbUpdateStats()
    for imdb_id, rating, votes in ratings:
        for movie in pending.pop(imdb_id, []):
            if (
                movie.imdb_rating is not None
                and abs(movie.imdb_rating - rating) <= RATING_TOLERANCE
            ):
                stats.skipped += 1
                continue
            movies_crud.update_movie(
                db_movie=movie,
                movie_update=MovieUpdate(imdb_rating=rating, imdb_votes=votes),
            )
            stats.updated += 1
            logger.debug(f"{movie.title}: IMDb {rating} ({votes} votes)")

    stats.not_found = sum(len(unmatched) for unmatched in pending.values())
    session.commit()
    return stats


def update_imdb_ratings(*, session: Session, url: str = IMDB_RATINGS_URL) -> ImdbUpdateStats:
    """
    Refresh IMDb ratings from the official dataset. The downloaded file is
    removed afterwards, also when the update fails.

    Raises:
        ImdbDatasetError: If the dataset cannot be downloaded.
    """
    fd, path = tempfile.mkstemp(suffix=".tsv.gz")
    os.close(fd)
    try:
        download_dataset(path, url)
        with gzip.open(path, "rt", encoding="utf-8") as file:
            stats = apply_ratings(session=session, ratings=iter_ratings(file))
    finally:
        if os.path.exists(path):
            os.remove(path)

    logger.info(
        f"IMDb ratings: {stats.updated} updated, {stats.skipped} unchanged, "
        f"{stats.not_found} not in dataset"
    )
    return stats


def main() -> None:
    setup_logger("imdb_ratings")
    with get_db_context() as session:
        update_imdb_ratings(session=session)


if __name__ == "__main__":
    main()
