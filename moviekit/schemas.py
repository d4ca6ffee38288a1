"""
Data schema for movie records.

This module defines a Pydantic model for callers that want strict
validation of a movie record. The factory and mutators stay lenient;
validate_movie_record() is opt-in.
"""

from typing import Any, Dict, List, Mapping
from pydantic import BaseModel, Field, field_validator, ConfigDict

from moviekit.config import ALLOWED_GENRES
from moviekit.creation import generate_movie_id


class Movie(BaseModel):
    """
    A fully typed movie record.
    """
    id: str = Field(default_factory=generate_movie_id, description="Unique movie ID", min_length=1)
    title: str = Field("", description="Movie title")
    director: str = Field("", description="Director name")
    year: int = Field(0, description="Release year", ge=0)
    genre: str = Field("", description="Genre (one of the allowed genres, or empty)")
    rating: float = Field(0, description="Rating", ge=0)
    cast: List[str] = Field(default_factory=list, description="Cast member names")

    @field_validator('genre')
    @classmethod
    def validate_genre(cls, v):
        """Allow an empty genre or one of the allowed genres."""
        if v and v not in ALLOWED_GENRES:
            raise ValueError(f"Genre must be one of {', '.join(ALLOWED_GENRES)}")
        return v

    model_config = ConfigDict(
        strict=True,
        json_schema_extra={
            "example": {
                "id": "0b8f6d1e-8c1f-4c39-9a57-3f3d2f5f4c11",
                "title": "Inception",
                "director": "Christopher Nolan",
                "year": 2010,
                "genre": "Sci-Fi",
                "rating": 8.8,
                "cast": ["Leonardo DiCaprio", "Joseph Gordon-Levitt", "Elliot Page"]
            }
        }
    )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain movie record."""
        return self.model_dump()


def validate_movie_record(record: Mapping[str, Any]) -> Movie:
    """
    Validate a movie record against the Movie schema.

    Args:
        record: Movie dictionary

    Returns:
        Movie: Validated movie

    Raises:
        ValueError: If the record is invalid
    """
    if not isinstance(record, Mapping):
        raise ValueError("Invalid movie record: expected a mapping")
    try:
        return Movie(**record)
    except Exception as e:
        raise ValueError(f"Invalid movie record: {str(e)}")
