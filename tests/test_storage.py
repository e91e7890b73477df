import asyncio

import pytest

from bookmymovie.errors import FetchError, FetchTimeoutError, NotFoundError, ValidationError
from bookmymovie.storage import MOCK_MOVIES, InMemoryCatalog, normalize_movie_id

catalog = InMemoryCatalog(latency=0)


def run(coro):
    return asyncio.run(coro)


def test_list_movies_returns_catalog_in_order():
    movies = run(catalog.list_movies())
    assert [m.id for m in movies] == [1, 2, 3]
    assert movies[0].title == "Avatar: The Way of Water"
    # caller gets its own list
    movies.clear()
    assert len(run(catalog.list_movies())) == 3

def test_get_movie_by_id_int_and_numeric_string():
    assert run(catalog.get_movie_by_id(1)).id == 1
    assert run(catalog.get_movie_by_id("1")).id == 1
    assert run(catalog.get_movie_by_id(" 3 ")).director == "Matt Reeves"
    assert run(catalog.get_movie_by_id(2.0)).id == 2

@pytest.mark.parametrize("bad", [None, "", "1abc", "1.5", "abc", True, 1.5, [1], "1" * 5000])
def test_get_movie_by_id_rejects_malformed_ids(bad):
    with pytest.raises(ValidationError):
        run(catalog.get_movie_by_id(bad))

def test_get_movie_by_id_not_found():
    with pytest.raises(NotFoundError):
        run(catalog.get_movie_by_id(42))

def test_normalize_movie_id():
    assert normalize_movie_id("07") == 7
    assert normalize_movie_id("-1") == -1

def test_fetch_failure_propagates():
    def loader():
        raise ConnectionError("backend down")

    broken = InMemoryCatalog(loader, latency=0)
    with pytest.raises(FetchError) as info:
        run(broken.list_movies())
    assert isinstance(info.value.__cause__, ConnectionError)

    with pytest.raises(FetchError):
        run(broken.get_movie_by_id(1))

def test_fetch_timeout():
    slow = InMemoryCatalog(MOCK_MOVIES, latency=0.5, timeout=0.01)
    with pytest.raises(FetchTimeoutError):
        run(slow.list_movies())

def test_timeout_is_not_a_fetch_error():
    assert not issubclass(FetchTimeoutError, FetchError)

def test_custom_fixture_catalog():
    from bookmymovie.schemas import Movie

    local = InMemoryCatalog([Movie(id=10, title="Heat")], latency=0)
    assert [m.title for m in run(local.list_movies())] == ["Heat"]
    assert run(local.get_movie_by_id("10")).title == "Heat"
