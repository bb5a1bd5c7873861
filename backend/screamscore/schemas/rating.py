import datetime as dt

from screamscore.models.rating import RatingBase

__all__ = [
    "RatingPublic",
]


class RatingPublic(RatingBase):
    id: int
    movie_id: int
    created_at: dt.datetime
    spook_score: int
