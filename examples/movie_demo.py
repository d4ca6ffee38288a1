"""
Demo script showing how to create, update and inspect movie records.
"""

from pydantic import ValidationError

from moviekit.creation import create_movie_object, pretty_print
from moviekit.manipulation import (
    set_movie_rating,
    add_movie_genre,
    remove_director_property,
    add_cast_member,
    get_allowed_genres,
)
from moviekit.validation import (
    get_movie_title,
    get_movie_year,
    is_movie_classic,
    get_movie_keys,
    get_movie_properties_count,
)
from moviekit.schemas import Movie, validate_movie_record


def demo_creation():
    """Create movies with default and custom values."""
    print("\n" + "="*60)
    print("1. Creating movies")
    print("="*60)

    default_movie = create_movie_object()
    print("Default Movie:")
    print(pretty_print(default_movie))

    custom_movie = create_movie_object({
        "title": "Inception",
        "director": "Christopher Nolan",
        "year": 2010,
        "genre": "Sci-Fi",
        "rating": 8.8,
        "cast": ["Leonardo DiCaprio", "Joseph Gordon-Levitt", "Elliot Page"]
    })
    print("Custom Movie:")
    print(pretty_print(custom_movie))


def demo_manipulation():
    """Update a movie step by step."""
    print("\n" + "="*60)
    print("2. Manipulating a movie")
    print("="*60)

    movie = {
        "id": 1,
        "title": "Toy Story",
        "director": "John Lasseter",
        "year": 1995,
        "genre": "Animation",
        "rating": 8.3,
        "cast": ["Tom Hanks", "Tim Allen", "Don Rickles"]
    }
    print(f"Original Movie: {movie}")

    movie = set_movie_rating(movie, 9.1)
    print(f"After Updating Rating: {movie}")

    movie = add_movie_genre(movie, "Family")
    print(f"After Updating Genre: {movie}")

    movie = remove_director_property(movie)
    print(f"After Removing Director: {movie}")

    movie = add_cast_member(movie, "Joan Cusack")
    print(f"After Adding a Cast Member: {movie}")

    print(f"Allowed Genres: {get_allowed_genres()}")

    # Invalid input leaves records untouched
    print(f"Rating on None: {set_movie_rating(None, 8.5)}")
    print(f"Genre 123 on empty movie: {add_movie_genre({}, 123)}")


def demo_validation():
    """Inspect movies with the accessor helpers."""
    print("\n" + "="*60)
    print("3. Validating movies")
    print("="*60)

    movie = {"title": "Toy Story", "year": 1995, "director": "John Lasseter"}
    print(f"Title: {get_movie_title(movie)}")
    print(f"Year: {get_movie_year(movie)}")
    print(f"Classic: {is_movie_classic(movie)}")
    print(f"Keys: {get_movie_keys(movie)}")
    print(f"Property count: {get_movie_properties_count(movie)}")

    print("\nInvalid input (diagnostics are logged):")
    print(f"Title of empty movie: {get_movie_title({})!r}")
    print(f"Keys of None: {get_movie_keys(None)}")


def demo_schema():
    """Validate records against the strict schema."""
    print("\n" + "="*60)
    print("4. Strict schema validation")
    print("="*60)

    movie = validate_movie_record(create_movie_object({"title": "Up", "genre": "Family"}))
    print(f"Valid: {movie.title} ({movie.genre})")

    try:
        validate_movie_record({"title": "Alien", "genre": "Horror"})
    except ValueError as e:
        print(f"Rejected: {e}")

    try:
        Movie(rating=-1)
    except ValidationError as e:
        print(f"Rejected: {e.errors()[0]['msg']}")


def main():
    """Run all demos."""
    print("\n" + "="*60)
    print("moviekit Demo")
    print("="*60)

    demo_creation()
    demo_manipulation()
    demo_validation()
    demo_schema()

    print("\n" + "="*60)
    print("Demo complete!")
    print("="*60)


if __name__ == "__main__":
    main()
