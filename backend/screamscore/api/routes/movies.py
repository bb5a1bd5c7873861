from fastapi import APIRouter, Query, status

from screamscore.api.deps import AdminDep, SessionDep
from screamscore.inputs.movie import MovieSubmission
from screamscore.schemas.movie import MovieDetail, MoviePublic
from screamscore.schemas.rating import RatingPublic
from screamscore.services import movies as movies_service

router = APIRouter(prefix="/movies", tags=["movies"])


@router.get("/", response_model=list[MoviePublic])
def read_movies(session: SessionDep) -> list[MoviePublic]:
    return movies_service.list_movies(session=session)


@router.post("/", response_model=MoviePublic, status_code=status.HTTP_201_CREATED)
def create_movie(
    *,
    session: SessionDep,
    submission: MovieSubmission,
) -> MoviePublic:
    """
    Add a movie. With `tmdbId` the movie is imported from TMDB, otherwise a
    title is required.
    """
    return movies_service.add_movie(session=session, submission=submission)


@router.get("/top-rated", response_model=list[MoviePublic])
def read_top_rated_movies(
    *,
    session: SessionDep,
    limit: int = Query(10, ge=1, le=50),
) -> list[MoviePublic]:
    return movies_service.get_top_rated_movies(session=session, limit=limit)


# KEEP AT THE BOTTOM
@router.get("/{id}", response_model=MovieDetail)
def read_movie(*, session: SessionDep, id: int) -> MovieDetail:
    return movies_service.get_movie_detail(session=session, movie_id=id)


@router.get("/{id}/ratings", response_model=list[RatingPublic])
def read_movie_ratings(*, session: SessionDep, id: int) -> list[RatingPublic]:
    return movies_service.get_movie_ratings(session=session, movie_id=id)


@router.get("/{id}/similar", response_model=list[MoviePublic])
def read_similar_movies(
    *,
    session: SessionDep,
    id: int,
    limit: int = Query(10, ge=1, le=50),
) -> list[MoviePublic]:
    return movies_service.get_similar_movies(
        session=session,
        movie_id=id,
        limit=limit,
    )


@router.delete(
    "/{id}",
    dependencies=[AdminDep],
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_movie(*, session: SessionDep, id: int) -> None:
    movies_service.delete_movie(session=session, movie_id=id)
