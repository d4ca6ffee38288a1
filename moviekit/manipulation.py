"""
Movie record manipulation.

Each mutator updates the given record in place and returns it. Invalid
input is never an error: if the record itself is not a dictionary it is
returned as-is (so None passes through), and if the new value is rejected
the record comes back unchanged.
"""

from collections.abc import MutableMapping
from typing import Any, List

from moviekit.config import ALLOWED_GENRES
from moviekit.validation import is_number


def set_movie_rating(movie: Any, rating: Any) -> Any:
    """
    Update the movie rating if rating is a number.

    Args:
        movie: Movie record
        rating: New rating (int or float)

    Returns:
        The same movie record
    """
    if not isinstance(movie, MutableMapping) or not is_number(rating):
        return movie
    movie["rating"] = rating
    return movie


def add_movie_genre(movie: Any, genre: Any) -> Any:
    """
    Update the movie genre if genre is one of the allowed genres.

    Args:
        movie: Movie record
        genre: New genre, matched case-sensitively against ALLOWED_GENRES

    Returns:
        The same movie record
    """
    if not isinstance(movie, MutableMapping):
        return movie
    if not isinstance(genre, str) or genre not in ALLOWED_GENRES:
        return movie
    movie["genre"] = genre
    return movie


def remove_director_property(movie: Any) -> Any:
    """Remove the director key from the movie record, if present."""
    if not isinstance(movie, MutableMapping):
        return movie
    movie.pop("director", None)
    return movie


def add_cast_member(movie: Any, new_member: Any) -> Any:
    """
    Append a cast member to the movie's cast list.

    The cast list is not created if missing; a record without a list
    under "cast" is returned unchanged.

    Args:
        movie: Movie record with a cast list
        new_member: Name of the cast member

    Returns:
        The same movie record
    """
    if not isinstance(movie, MutableMapping):
        return movie
    cast = movie.get("cast")
    if not isinstance(cast, list) or not isinstance(new_member, str):
        return movie
    cast.append(new_member)
    return movie


def get_allowed_genres() -> List[str]:
    """Return a new list of the allowed genres."""
    return list(ALLOWED_GENRES)
