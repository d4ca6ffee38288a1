"""
Movie record creation and display.

A movie record is a plain dictionary with the keys id, title, director,
year, genre, rating and cast. create_movie_object() fills in any missing
field with an empty default and always assigns a fresh id.
"""

import math
import uuid
from typing import Any, Callable, Dict, Mapping, Optional

from moviekit.config import PLACEHOLDER, SEPARATOR

# Field name -> factory for its empty default
MOVIE_DEFAULTS: Dict[str, Callable[[], Any]] = {
    "title": str,
    "director": str,
    "year": int,
    "genre": str,
    "rating": int,
    "cast": list,
}


def generate_movie_id() -> str:
    """
    Generate a unique movie ID.

    Returns:
        UUID string
    """
    return str(uuid.uuid4())


def create_movie_object(
    options: Optional[Mapping[str, Any]] = None,
    id_factory: Optional[Callable[[], str]] = None,
) -> Dict[str, Any]:
    """
    Create a movie record from the given options.

    Values are taken as-is; only missing (or None) fields are replaced by
    their defaults. Any id in options is ignored.

    Args:
        options: Partial movie fields (title, director, year, genre, rating, cast)
        id_factory: Callable returning a new id (defaults to generate_movie_id)

    Returns:
        A new movie dictionary with a unique id
    """
    options = options or {}
    id_factory = id_factory or generate_movie_id

    movie = {"id": id_factory()}
    for key, default in MOVIE_DEFAULTS.items():
        value = options.get(key)
        movie[key] = default() if value is None else value

    return movie


def _display(value: Any) -> str:
    if isinstance(value, float):
        if math.isnan(value):
            return PLACEHOLDER
        if value.is_integer():
            value = int(value)
    return str(value) if value else PLACEHOLDER


def pretty_print(movie: Mapping[str, Any]) -> str:
    """
    Format a movie record as a fixed-layout text block.

    Falsy fields (missing, "", 0) are shown as "N/A". Cast is joined with
    ", " and shown as "N/A" unless it is a non-empty list.

    Args:
        movie: Movie record (fields may be missing)

    Returns:
        Multi-line string framed by dashed separator lines
    """
    cast = movie.get("cast")
    if isinstance(cast, list) and cast:
        cast_text = ", ".join(str(member) for member in cast)
    else:
        cast_text = PLACEHOLDER

    lines = [
        SEPARATOR,
        f"Title   : {_display(movie.get('title'))}",
        f"Year    : {_display(movie.get('year'))}",
        f"Director: {_display(movie.get('director'))}",
        f"Genre   : {_display(movie.get('genre'))}",
        f"Rating  : {_display(movie.get('rating'))}",
        f"Cast    : {cast_text}",
        SEPARATOR,
    ]
    return "\n".join(lines)
