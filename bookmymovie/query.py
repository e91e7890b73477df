from typing import Iterable, List, Optional

from .schemas import ALL_CATEGORIES, Category, Movie

# shorter terms would match almost everything
MIN_SEARCH_LENGTH = 3


def _contains(text: Optional[str], needle: str) -> bool:
    return bool(text) and needle in text.lower()


def matches_search(movie: Movie, search_term: Optional[str]) -> bool:
    if not search_term or len(search_term) < MIN_SEARCH_LENGTH:
        return True
    needle = search_term.lower()
    return _contains(movie.title, needle) or _contains(movie.description, needle)


def matches_category(movie: Movie, category) -> bool:
    if category is None or category == ALL_CATEGORIES:
        return True
    wanted = category.value if isinstance(category, Category) else category
    return movie.category is not None and movie.category.value == wanted


def filter_movies(movies: Iterable[Movie], search_term: Optional[str] = "",
                  category=ALL_CATEGORIES) -> List[Movie]:
    """Movies matching both the search term and the category, in input order."""
    return [
        m for m in movies
        if matches_category(m, category) and matches_search(m, search_term)
    ]
