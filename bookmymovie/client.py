"""Catalog backed by the remote movies HTTP JSON API."""

import logging
from typing import List, Optional

import httpx
import pydantic

from .errors import FetchError, FetchTimeoutError, NotFoundError
from .schemas import Movie, normalize_movie_id
from .storage import MovieSource

logger = logging.getLogger(__name__)

HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


class HttpCatalog(MovieSource):
    def __init__(self, base_url: str, *, timeout: float = 5.0,
                 client: Optional[httpx.AsyncClient] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    def _make_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout, headers=HEADERS)

    async def _get(self, path: str):
        client = self._client or self._make_client()
        try:
            response = await client.get(path)
        except httpx.TimeoutException as exc:
            logger.error("Timeout calling %s%s", self.base_url, path)
            raise FetchTimeoutError(f"Request to {path} timed out") from exc
        except httpx.HTTPError as exc:
            logger.error("Error calling %s%s: %s", self.base_url, path, exc)
            raise FetchError("Failed to load movies") from exc
        finally:
            if self._client is None:
                await client.aclose()
        return response

    @staticmethod
    def _decode(response: httpx.Response):
        if response.is_error:
            logger.error("Movies API answered %s for %s", response.status_code, response.url)
            raise FetchError(f"Movies API error {response.status_code}")
        try:
            return response.json()
        except ValueError as exc:
            raise FetchError("Movies API returned invalid JSON") from exc

    async def list_movies(self) -> List[Movie]:
        payload = self._decode(await self._get("/movies"))
        if isinstance(payload, dict):
            payload = payload.get("data")
        if not isinstance(payload, list):
            raise FetchError("Movies API returned an unexpected payload")
        try:
            return [Movie.model_validate(item) for item in payload]
        except pydantic.ValidationError as exc:
            raise FetchError("Movies API returned malformed movies") from exc

    async def get_movie_by_id(self, movie_id) -> Movie:
        wanted = normalize_movie_id(movie_id)
        response = await self._get(f"/movies/{wanted}")
        if response.status_code == 404:
            raise NotFoundError("Movie not found")
        payload = self._decode(response)
        if isinstance(payload, dict) and "data" in payload:
            payload = payload["data"]
        try:
            movie = Movie.model_validate(payload)
        except pydantic.ValidationError as exc:
            raise FetchError("Movies API returned a malformed movie") from exc
        if movie.id != wanted:
            raise FetchError(f"Movies API returned movie {movie.id} for id {wanted}")
        return movie
