"""
Movie record validation and property access.

These helpers never raise. When a record is invalid or a field is missing
they log a diagnostic message and return a fallback value (empty string,
0, False or an empty list).

The type names accepted by has_property_of_type() are JSON-style:

- "string", "number", "boolean", "array"
- "object" (a dict, a list, or None)
"""

from collections.abc import Mapping
from typing import Any, List

from moviekit.config import CLASSIC_YEAR_CUTOFF
from moviekit.logging_config import get_logger

logger = get_logger(__name__)


def is_number(value: Any) -> bool:
    """Return True for int and float values (bool is not a number)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_record(value: Any) -> bool:
    """Return True if value can be treated as a movie record."""
    return isinstance(value, Mapping)


def _matches_type(value: Any, type_name: str) -> bool:
    if type_name == "string":
        return isinstance(value, str)
    if type_name == "number":
        return is_number(value)
    if type_name == "boolean":
        return isinstance(value, bool)
    if type_name == "array":
        return isinstance(value, list)
    if type_name == "object":
        return value is None or isinstance(value, (Mapping, list))
    return False


def has_property_of_type(obj: Any, key: str, type_name: str) -> bool:
    """
    Check that obj is a record holding key with a value of the given type.

    Args:
        obj: Object to inspect
        key: Property name
        type_name: Expected type name (e.g. "string", "number")

    Returns:
        True if the property exists and has the expected type
    """
    if not is_record(obj) or key not in obj:
        return False
    return _matches_type(obj[key], type_name)


def get_movie_title(movie: Any, log=None) -> str:
    """
    Return the movie title, or "" if it is missing or not a string.

    Args:
        movie: Movie record
        log: Logger for diagnostics (defaults to the module logger)
    """
    if has_property_of_type(movie, "title", "string"):
        return movie["title"]
    (log or logger).info("getMovieTitle: Invalid movie object or title missing.")
    return ""


def get_movie_year(movie: Any, log=None) -> int:
    """
    Return the release year, or 0 if it is missing or not a number.

    Args:
        movie: Movie record
        log: Logger for diagnostics (defaults to the module logger)
    """
    if has_property_of_type(movie, "year", "number"):
        return movie["year"]
    (log or logger).info("getMovieYear: Invalid movie object or year missing.")
    return 0


def is_movie_classic(movie: Any, log=None) -> bool:
    """
    Check whether a movie was released before 2000.

    A missing or non-numeric year logs a diagnostic and counts as not
    classic. A valid year of 2000 or later returns False silently.

    Args:
        movie: Movie record
        log: Logger for diagnostics (defaults to the module logger)

    Returns:
        True if the movie is a classic
    """
    if not has_property_of_type(movie, "year", "number"):
        (log or logger).info("isMovieClassic: Movie object invalid or missing year.")
        return False
    return movie["year"] < CLASSIC_YEAR_CUTOFF


def get_movie_keys(movie: Any, log=None) -> List[str]:
    """Return the record's property names, or [] if it is not a record."""
    if not is_record(movie):
        (log or logger).info("getMovieKeys: Provided input is not a valid object.")
        return []
    return list(movie.keys())


def get_movie_properties_count(movie: Any, log=None) -> int:
    """Return the number of properties in the record, or 0 if it is not a record."""
    if not is_record(movie):
        (log or logger).info("getMoviePropertiesCount: Provided input is not a valid object.")
        return 0
    return len(movie)
