from fastapi import APIRouter

from screamscore.api.routes import (
    home,
    movies,
    ratings,
    search,
    tmdb,
    utils,
)

api_router = APIRouter()
api_router.include_router(utils.router)
api_router.include_router(movies.router)
api_router.include_router(ratings.router)
api_router.include_router(search.router)
api_router.include_router(tmdb.router)
api_router.include_router(home.router)
