"""
moviekit - Movie record helpers

Create, print, update and validate plain dictionary movie records.
"""

__version__ = "1.0.0"

from .creation import create_movie_object, pretty_print, generate_movie_id
from .manipulation import (
    set_movie_rating,
    add_movie_genre,
    remove_director_property,
    add_cast_member,
    get_allowed_genres,
)
from .validation import (
    has_property_of_type,
    get_movie_title,
    get_movie_year,
    is_movie_classic,
    get_movie_keys,
    get_movie_properties_count,
)

__all__ = [
    "create_movie_object",
    "pretty_print",
    "generate_movie_id",
    "set_movie_rating",
    "add_movie_genre",
    "remove_director_property",
    "add_cast_member",
    "get_allowed_genres",
    "has_property_of_type",
    "get_movie_title",
    "get_movie_year",
    "is_movie_classic",
    "get_movie_keys",
    "get_movie_properties_count",
]
