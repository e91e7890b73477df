"""Error types raised by the catalog, query and booking layers."""


class BookMyMovieError(Exception):
    """Base class for every error surfaced to callers."""

    status_code = 500

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ValidationError(BookMyMovieError, ValueError):
    """Malformed caller input. Never retried.

    Also a ValueError so pydantic validators can raise it.
    """

    status_code = 400


class AuthenticationError(BookMyMovieError):
    status_code = 401


class NotFoundError(BookMyMovieError):
    status_code = 404


class FetchError(BookMyMovieError):
    """The movie data source failed."""

    status_code = 502


class FetchTimeoutError(BookMyMovieError):
    """The movie data source did not answer in time."""

    status_code = 504
