import logging
from functools import lru_cache
from typing import List, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from . import config, crud
from .client import HttpCatalog
from .errors import BookMyMovieError, FetchError
from .query import filter_movies
from .schemas import ALL_CATEGORIES, AuthToken, Booking, BookingRequest, LoginRequest, Movie, MovieSummary
from .storage import InMemoryCatalog, MovieSource
from .utils import summarize, tag_recommended

logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s | %(levelname)-8s | %(message)s',
    datefmt='%H:%M:%S'
)
logger = logging.getLogger(__name__)


app = FastAPI(
    title="BookMyMovie API",
    description="Movie catalog, search and booking (no persistence, no payment).",
    version="1.0.0",
)


# =========================
#      DEPENDENCIES
# =========================

@lru_cache()
def get_catalog() -> MovieSource:
    if config.CATALOG_SOURCE == "http":
        return HttpCatalog(config.API_BASE_URL, timeout=config.API_TIMEOUT)
    return InMemoryCatalog(latency=config.CATALOG_LATENCY, timeout=config.API_TIMEOUT)

@lru_cache()
def get_booking_service() -> crud.BookingService:
    return crud.BookingService()


# =========================
#         ERRORS
# =========================

@app.exception_handler(BookMyMovieError)
async def handle_domain_error(request: Request, exc: BookMyMovieError):
    logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    detail = "Failed to load movies" if isinstance(exc, FetchError) else exc.message
    return JSONResponse(status_code=exc.status_code, content={"detail": detail})


# =========================
#         ROUTES
# =========================

@app.get("/")
def root():
    return {"message": "BookMyMovie API is running"}

@app.get("/movies", response_model=List[MovieSummary], tags=["Movies"])
async def list_movies(search: Optional[str] = "", category: str = ALL_CATEGORIES,
                      catalog: MovieSource = Depends(get_catalog)):
    movies = await catalog.list_movies()
    return [summarize(m) for m in tag_recommended(filter_movies(movies, search, category))]

@app.get("/movies/{movie_id}", response_model=Movie, tags=["Movies"])
async def get_movie(movie_id: str, catalog: MovieSource = Depends(get_catalog)):
    return await catalog.get_movie_by_id(movie_id)

@app.post("/bookings", response_model=Booking, status_code=201, tags=["Bookings"])
async def create_booking(req: BookingRequest,
                         service: crud.BookingService = Depends(get_booking_service)):
    return await service.create_booking(req)

@app.post("/auth/login", response_model=AuthToken, tags=["Auth"])
def login(payload: LoginRequest):
    return crud.authenticate_user(payload.email, payload.password)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
