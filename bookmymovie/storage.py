import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Sequence, Union

from .errors import FetchError, FetchTimeoutError, NotFoundError
from .schemas import Category, Movie, normalize_movie_id

logger = logging.getLogger(__name__)

# ---------- demo catalog ----------
MOCK_MOVIES: List[Movie] = [
    Movie(
        id=1,
        title="Avatar: The Way of Water",
        category=Category.action,
        rating=8.2,
        description="Jake Sully and Neytiri have formed a family and are doing everything to stay together.",
        poster="https://example.com/avatar2.jpg",
        duration=192,
        director="James Cameron",
    ),
    Movie(
        id=2,
        title="Top Gun: Maverick",
        category=Category.action,
        rating=8.7,
        description="After thirty years, Maverick is still pushing the envelope as a top naval aviator.",
        poster="https://example.com/topgun.jpg",
        duration=130,
        director="Joseph Kosinski",
    ),
    Movie(
        id=3,
        title="The Batman",
        category=Category.action,
        rating=7.8,
        description="Batman ventures into Gotham City underworld when a sadistic killer leaves clues.",
        poster="https://example.com/batman.jpg",
        duration=176,
        director="Matt Reeves",
    ),
]


class MovieSource(ABC):
    """Where the catalog comes from."""

    @abstractmethod
    async def list_movies(self) -> List[Movie]:
        """Fetch the whole catalog, in catalog order."""
        ...

    @abstractmethod
    async def get_movie_by_id(self, movie_id) -> Movie:
        """Fetch one movie; ValidationError / NotFoundError on bad or unknown ids."""
        ...


MovieLoader = Callable[[], Sequence[Movie]]


class InMemoryCatalog(MovieSource):
    """Read-only catalog held in memory, with simulated network latency."""

    def __init__(
        self,
        movies: Union[Sequence[Movie], MovieLoader, None] = None,
        *,
        latency: float = 1.0,
        timeout: Optional[float] = None,
    ):
        if movies is None:
            movies = MOCK_MOVIES
        if callable(movies):
            self._loader = movies
        else:
            snapshot = tuple(movies)
            self._loader = lambda: snapshot
        self.latency = latency
        self.timeout = timeout

    def _load(self) -> List[Movie]:
        try:
            return list(self._loader())
        except Exception as exc:
            logger.error("Error loading movies: %s", exc)
            raise FetchError("Failed to load movies") from exc

    async def _fetch(self) -> List[Movie]:
        if self.latency > 0:
            await asyncio.sleep(self.latency)
        return self._load()

    async def list_movies(self) -> List[Movie]:
        if self.timeout is None:
            movies = await self._fetch()
        else:
            try:
                movies = await asyncio.wait_for(self._fetch(), self.timeout)
            except asyncio.TimeoutError as exc:
                logger.error("Movie fetch timed out after %.2fs", self.timeout)
                raise FetchTimeoutError(f"Movie fetch timed out after {self.timeout}s") from exc
        logger.debug("Loaded %d movies", len(movies))
        return movies

    async def get_movie_by_id(self, movie_id) -> Movie:
        wanted = normalize_movie_id(movie_id)
        for m in self._load():
            if m.id == wanted:
                return m
        logger.warning("Movie %s not found", wanted)
        raise NotFoundError("Movie not found")
