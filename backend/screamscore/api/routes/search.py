from typing import Annotated

from fastapi import APIRouter, Depends, Query

from screamscore.api.deps import SessionDep
from screamscore.inputs.movie import HomeFilters, get_home_filters
from screamscore.schemas.movie import MovieSearchResponse, MovieSearchResults
from screamscore.services import search as search_service

router = APIRouter(prefix="/search", tags=["search"])


@router.get("/", response_model=MovieSearchResponse)
def search_movies(
    session: SessionDep,
    q: str = Query(""),
) -> MovieSearchResponse:
    return search_service.search_catalog(session=session, query=q)


@router.get("/results", response_model=MovieSearchResults)
def read_search_results(
    session: SessionDep,
    filters: Annotated[HomeFilters, Depends(get_home_filters)],
    q: str = Query(""),
) -> MovieSearchResults:
    """
    All catalog movies whose title contains `q`, filtered by IMDb rating and
    release year.
    """
    return search_service.search_results(session=session, query=q, filters=filters)
