from bookmymovie.query import filter_movies
from bookmymovie.schemas import Category, Movie

MOVIES = [
    Movie(id=1, title="Inception", category=Category.sci_fi, rating=8.8, description="dream heist"),
    Movie(id=2, title="Superbad", category=Category.comedy, rating=7.6, description="high school party"),
    Movie(id=3, title="The Conjuring", category=Category.horror, rating=7.5, description="a haunted farmhouse"),
    Movie(id=4, title=None, category=Category.drama, description=None),
    Movie(id=5, title="Untitled", category=None, description="Dream sequence"),
]


def test_all_and_short_terms_return_everything():
    assert filter_movies(MOVIES, "", "all") == MOVIES
    assert filter_movies(MOVIES, "ab", "all") == MOVIES
    assert filter_movies(MOVIES, None, "all") == MOVIES

def test_description_match():
    movie = Movie(id=1, title="Inception", description="dream")
    assert filter_movies([movie], "dream", "all") == [movie]

def test_case_insensitive_title_or_description():
    assert [m.id for m in filter_movies(MOVIES, "DREAM", "all")] == [1, 5]
    assert [m.id for m in filter_movies(MOVIES, "superBAD", "all")] == [2]

def test_missing_text_never_matches():
    assert 4 not in [m.id for m in filter_movies(MOVIES, "none", "all")]

def test_category_filter():
    assert [m.id for m in filter_movies(MOVIES, "", "horror")] == [3]
    assert [m.id for m in filter_movies(MOVIES, "", Category.sci_fi)] == [1]
    assert filter_movies(MOVIES, "", "western") == []

def test_constraints_are_conjunctive():
    assert [m.id for m in filter_movies(MOVIES, "dream", "sci-fi")] == [1]
    assert filter_movies(MOVIES, "party", "horror") == []

def test_input_is_untouched():
    movies = list(MOVIES)
    result = filter_movies(movies, "dream", "all")
    assert movies == MOVIES
    assert result is not movies
