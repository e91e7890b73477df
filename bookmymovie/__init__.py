"""BookMyMovie: movie catalog, search and booking backend."""

__version__ = "1.0.0"
