import asyncio
import logging
import time
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Union

import jwt
import pydantic

from . import config
from .errors import AuthenticationError, ValidationError
from .schemas import AuthToken, Booking, BookingRequest

logger = logging.getLogger(__name__)


# =========================
#        BOOKINGS
# =========================
class BookingService:
    """Validates booking requests and prices them per seat.

    Nothing is persisted; `delay` only mimics the round trip to a real API.
    """

    def __init__(
        self,
        seat_price: float = config.SEAT_PRICE,
        *,
        delay: float = config.BOOKING_DELAY,
        reject_empty_seats: bool = config.REJECT_EMPTY_SEATS,
        clock: Callable[[], float] = time.time,
    ):
        self.seat_price = seat_price
        self.delay = delay
        self.reject_empty_seats = reject_empty_seats
        self._clock = clock
        self._last_id = 0

    def _next_id(self) -> int:
        # creation time in ms, bumped so two bookings in the same ms differ
        self._last_id = max(int(self._clock() * 1000), self._last_id + 1)
        return self._last_id

    def validate(self, request: Union[BookingRequest, Mapping, None]) -> BookingRequest:
        """Check the request shape and return it as a BookingRequest."""
        if request is None:
            raise ValidationError("Booking request is required")
        if isinstance(request, Mapping):
            seats = request.get("seats")
            if seats is not None and not isinstance(seats, (list, tuple)):
                raise ValidationError("Seats must be an ordered list of seat labels")
            try:
                request = BookingRequest.model_validate(dict(request))
            except pydantic.ValidationError as exc:
                raise ValidationError(f"Invalid booking request: {exc.errors()[0]['msg']}") from exc
        elif not isinstance(request, BookingRequest):
            raise ValidationError("Booking request must be an object")

        if request.movie_id is None:
            raise ValidationError("Movie id is required")
        if request.seats is None:
            raise ValidationError("Seats are required")
        if not request.seats:
            if self.reject_empty_seats:
                raise ValidationError("At least one seat is required")
            logger.warning("Booking for movie %s has no seats", request.movie_id)
        return request

    async def create_booking(self, request: Union[BookingRequest, Mapping, None]) -> Booking:
        req = self.validate(request)
        booking = Booking(
            id=self._next_id(),
            movie_id=req.movie_id,
            user_id=req.user_id,
            seats=list(req.seats),
            showtime=req.showtime,
            total_price=len(req.seats) * self.seat_price,
            created_at=datetime.fromtimestamp(self._clock(), tz=timezone.utc),
        )
        if self.delay > 0:
            await asyncio.sleep(self.delay)
        logger.info("Booking %s created: movie=%s seats=%d total=%.2f",
                    booking.id, booking.movie_id, len(booking.seats), booking.total_price)
        return booking


# =========================
#     AUTH (demo stub)
# =========================
def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, config.JWT_SECRET, algorithm=config.JWT_ALGO)

def authenticate_user(email: str, password: str) -> AuthToken:
    """Placeholder login: only a minimum password length is checked.

    No credential store exists behind it; swap for a real identity provider.
    """
    if not password or len(password) < config.MIN_PASSWORD_LENGTH:
        logger.warning("Rejected login for %s: password too short", email)
        raise AuthenticationError("Invalid credentials")
    user_id = 1
    token = create_access_token({"sub": str(user_id), "email": email, "role": "user"})
    return AuthToken(access_token=token, user_id=user_id, email=email)
