import math
from typing import Dict, Iterable, List, Optional

from .schemas import PLACEHOLDER_POSTER, Category, Movie, MovieSummary

STAR = "⭐"
EXCERPT_LENGTH = 100

# rating a movie must beat to be recommended
RECOMMEND_THRESHOLDS: Dict[Category, float] = {
    Category.action: 7,
    Category.comedy: 6,
    Category.drama:  6,
    Category.horror: 6,
    Category.sci_fi: 6,
}


def star_count(rating: Optional[float]) -> int:
    if rating is None or math.isnan(rating):
        return 1
    # clamp first so inf stays in range
    return min(5, max(1, math.ceil(min(max(rating, 0), 10) / 2)))

def format_rating(rating: Optional[float]) -> str:
    return STAR * star_count(rating)


def is_recommended(movie: Movie) -> bool:
    threshold = RECOMMEND_THRESHOLDS.get(movie.category)
    if threshold is None or movie.rating is None:
        return False
    return movie.rating > threshold

def tag_recommended(movies: Iterable[Movie]) -> List[Movie]:
    """Return a new list where every categorised movie carries `recommended`.

    Input movies are left untouched; tagged ones are copies.
    """
    return [
        m.model_copy(update={"recommended": is_recommended(m)}) if m.category else m
        for m in movies
    ]


def poster_for(movie: Movie) -> str:
    return movie.poster or PLACEHOLDER_POSTER

def excerpt(text: Optional[str], length: int = EXCERPT_LENGTH) -> str:
    if not text:
        return ""
    return f"{text[:length]}..."

def average_rating(movies: Iterable[Movie]) -> Optional[float]:
    ratings = [m.rating for m in movies if m.rating is not None]
    if not ratings:
        return None
    return sum(ratings) / len(ratings)

def summarize(movie: Movie) -> MovieSummary:
    return MovieSummary(
        id=movie.id,
        title=movie.title,
        category=movie.category,
        rating=movie.rating,
        stars=format_rating(movie.rating),
        excerpt=excerpt(movie.description),
        poster=poster_for(movie),
        recommended=movie.recommended,
    )
