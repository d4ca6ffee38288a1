"""
Tests for movie validation and accessor functions.
"""

import pytest
from unittest.mock import MagicMock
from structlog.testing import capture_logs

from moviekit.validation import (
    has_property_of_type,
    get_movie_title,
    get_movie_year,
    is_movie_classic,
    get_movie_keys,
    get_movie_properties_count,
    is_number,
)


def logged_events(cap_logs):
    return [entry["event"] for entry in cap_logs]


class TestHasPropertyOfType:
    """Test runtime type checks."""

    def test_matching_types(self):
        """Test properties with the expected type."""
        obj = {"title": "Toy Story", "year": 1995}
        assert has_property_of_type(obj, "title", "string") is True
        assert has_property_of_type(obj, "year", "number") is True

    def test_wrong_type(self):
        """Test a property with the wrong type."""
        obj = {"title": "Toy Story", "year": "1995"}
        assert has_property_of_type(obj, "year", "number") is False

    def test_missing_property(self):
        """Test a missing property."""
        assert has_property_of_type({}, "title", "string") is False

    @pytest.mark.parametrize("obj", [None, "Toy Story", 42, ["title"]])
    def test_not_a_record(self, obj):
        """Test inputs that are not records."""
        assert has_property_of_type(obj, "title", "string") is False

    def test_other_type_names(self):
        """Test boolean, array and object type names."""
        obj = {"flag": True, "cast": ["Tom Hanks"], "meta": {}, "empty": None}
        assert has_property_of_type(obj, "flag", "boolean") is True
        assert has_property_of_type(obj, "flag", "number") is False
        assert has_property_of_type(obj, "cast", "array") is True
        assert has_property_of_type(obj, "meta", "object") is True
        assert has_property_of_type(obj, "empty", "object") is True
        assert has_property_of_type(obj, "cast", "unknown") is False

    def test_list_is_object(self):
        """Test that lists count as objects, as typeof does for arrays."""
        obj = {"cast": [], "title": "Up"}
        assert has_property_of_type(obj, "cast", "object") is True
        assert has_property_of_type(obj, "title", "object") is False

    def test_is_number(self):
        """Test numeric detection."""
        assert is_number(1)
        assert is_number(8.8)
        assert not is_number(True)
        assert not is_number("1")


class TestGetMovieTitle:
    """Test title access."""

    def test_valid_title(self):
        """Test returning a valid title."""
        assert get_movie_title({"title": "Toy Story"}) == "Toy Story"

    def test_missing_title(self):
        """Test the fallback and diagnostic for a missing title."""
        with capture_logs() as cap_logs:
            assert get_movie_title({}) == ""
        assert "getMovieTitle: Invalid movie object or title missing." in logged_events(cap_logs)
        assert cap_logs[0]["log_level"] == "info"

    def test_non_string_title(self):
        """Test a title that is not a string."""
        with capture_logs() as cap_logs:
            assert get_movie_title({"title": 42}) == ""
        assert len(cap_logs) == 1

    def test_valid_title_no_log(self):
        """Test that valid input is not logged."""
        with capture_logs() as cap_logs:
            get_movie_title({"title": "Toy Story"})
        assert cap_logs == []


class TestGetMovieYear:
    """Test year access."""

    def test_valid_year(self):
        """Test returning a valid year."""
        assert get_movie_year({"year": 1995}) == 1995

    def test_missing_year(self):
        """Test the fallback and diagnostic for a missing year."""
        with capture_logs() as cap_logs:
            assert get_movie_year({}) == 0
        assert "getMovieYear: Invalid movie object or year missing." in logged_events(cap_logs)

    def test_string_year(self):
        """Test a year given as a string."""
        with capture_logs() as cap_logs:
            assert get_movie_year({"year": "1995"}) == 0
        assert len(cap_logs) == 1


class TestIsMovieClassic:
    """Test classic classification."""

    def test_classic(self):
        """Test a movie released before 2000."""
        assert is_movie_classic({"year": 1995}) is True

    def test_not_classic(self):
        """Test a movie released after 2000 is not logged."""
        with capture_logs() as cap_logs:
            assert is_movie_classic({"year": 2005}) is False
        assert cap_logs == []

    def test_boundary(self):
        """Test that 2000 itself is not a classic."""
        assert is_movie_classic({"year": 2000}) is False
        assert is_movie_classic({"year": 1999}) is True

    def test_missing_year(self):
        """Test the diagnostic for a missing year."""
        with capture_logs() as cap_logs:
            assert is_movie_classic({}) is False
        assert "isMovieClassic: Movie object invalid or missing year." in logged_events(cap_logs)

    def test_none_movie(self):
        """Test a None movie."""
        with capture_logs() as cap_logs:
            assert is_movie_classic(None) is False
        assert len(cap_logs) == 1


class TestGetMovieKeys:
    """Test key listing."""

    def test_valid_record(self):
        """Test listing keys of a record."""
        keys = get_movie_keys({"title": "Toy Story", "director": "John Lasseter"})
        assert keys == ["title", "director"]

    def test_empty_record(self):
        """Test that an empty record is valid and not logged."""
        with capture_logs() as cap_logs:
            assert get_movie_keys({}) == []
        assert cap_logs == []

    def test_invalid_input(self):
        """Test the fallback and diagnostic for invalid input."""
        with capture_logs() as cap_logs:
            assert get_movie_keys(None) == []
        assert "getMovieKeys: Provided input is not a valid object." in logged_events(cap_logs)


class TestGetMoviePropertiesCount:
    """Test property counting."""

    def test_valid_record(self):
        """Test counting properties."""
        movie = {"title": "Toy Story", "year": 1995, "director": "John Lasseter"}
        assert get_movie_properties_count(movie) == 3

    def test_invalid_input(self):
        """Test the fallback and diagnostic for invalid input."""
        with capture_logs() as cap_logs:
            assert get_movie_properties_count("not an object") == 0
        assert "getMoviePropertiesCount: Provided input is not a valid object." in logged_events(cap_logs)


class TestInjectedLogger:
    """Test diagnostics sent to an injected logger."""

    def test_messages(self):
        """Test that each helper reports through the given logger."""
        log = MagicMock()

        get_movie_title({}, log=log)
        get_movie_year(None, log=log)
        is_movie_classic({"year": "old"}, log=log)
        get_movie_keys(42, log=log)
        get_movie_properties_count([], log=log)

        messages = [call.args[0] for call in log.info.call_args_list]
        assert messages == [
            "getMovieTitle: Invalid movie object or title missing.",
            "getMovieYear: Invalid movie object or year missing.",
            "isMovieClassic: Movie object invalid or missing year.",
            "getMovieKeys: Provided input is not a valid object.",
            "getMoviePropertiesCount: Provided input is not a valid object.",
        ]

    def test_not_called_on_valid_input(self):
        """Test that valid input sends nothing."""
        log = MagicMock()
        get_movie_title({"title": "Up"}, log=log)
        is_movie_classic({"year": 2009}, log=log)
        log.info.assert_not_called()
