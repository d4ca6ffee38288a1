import pytest
import structlog

from moviekit.logging_config import configure_structlog


@pytest.fixture(autouse=True)
def clean_logging():
    """Ensure clean logging state for every test."""
    structlog.contextvars.clear_contextvars()

    yield

    structlog.contextvars.clear_contextvars()
    configure_structlog()


@pytest.fixture
def inception_options():
    """Custom movie fields used across tests."""
    return {
        "title": "Inception",
        "director": "Christopher Nolan",
        "year": 2010,
        "genre": "Sci-Fi",
        "rating": 8.8,
        "cast": ["Leonardo DiCaprio", "Joseph Gordon-Levitt", "Elliot Page"]
    }
