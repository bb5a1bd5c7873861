from fastapi import APIRouter, Query

from screamscore.schemas.movie import TmdbSearchResponse
from screamscore.services import search as search_service

router = APIRouter(prefix="/tmdb", tags=["tmdb"])


@router.get("/search", response_model=TmdbSearchResponse)
def search_tmdb(q: str = Query("")) -> TmdbSearchResponse:
    return search_service.search_tmdb(query=q)
