from .movie import (
    count_movies,
    create_movie,
    delete_movie,
    get_movie_by_id,
    get_movie_by_tmdb_id,
    get_movies,
    get_movies_with_imdb_id,
    get_movies_without_release_date,
    get_rated_movies,
    search_movies,
    update_movie,
)
from .rating import create_rating, get_ratings_for_movie
