from .movie import (
    CastMember,
    HomeSections,
    MovieDetail,
    MoviePublic,
    MovieSearchResponse,
    MovieSearchResult,
    TmdbSearchResponse,
)
from .rating import RatingPublic

MoviePublic.model_rebuild()
MovieDetail.model_rebuild()
HomeSections.model_rebuild()
