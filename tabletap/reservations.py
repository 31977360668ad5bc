"""Reservation confirmation and the in-memory book the owner works from."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta
from typing import Iterable
from uuid import uuid4

from tabletap.config import RESERVATION_TIME_STEP_MINUTES, TABLE_COUNT
from tabletap.models import Reservation, ReservationRequest, ReservationStatus
from tabletap.validation import clamp_party_size, missing_reservation_fields

logger = logging.getLogger(__name__)


def combine_date_time(request: ReservationRequest) -> datetime:
    return datetime.combine(request.date, request.time.replace(second=0, microsecond=0))


def next_slot(moment: datetime, step_minutes: int = RESERVATION_TIME_STEP_MINUTES) -> datetime:
    """Round ``moment`` up to the next ``step_minutes`` boundary within its hour."""
    base = moment.replace(minute=0, second=0, microsecond=0)
    step = timedelta(minutes=step_minutes)
    return base + step * math.ceil((moment - base) / step)


def shift_reservation(
    request: ReservationRequest,
    days: int = 0,
    minutes: int = 0,
    now: datetime | None = None,
) -> None:
    """Move the requested slot, carrying midnight into the date.

    A past day snaps to the earliest open day at the same time of day, and the
    result is never earlier than the first open slot after ``now``.
    """
    earliest = next_slot(now or datetime.now())
    moment = combine_date_time(request) + timedelta(days=days, minutes=minutes)
    if moment.date() < earliest.date():
        moment = datetime.combine(earliest.date(), moment.time())
    moment = max(moment, earliest)
    request.date = moment.date()
    request.time = moment.time()


def confirm_reservation(request: ReservationRequest) -> Reservation:
    """Accept a complete reservation request."""
    missing = missing_reservation_fields(request)
    if missing:
        raise ValueError(f"reservation is missing: {', '.join(missing)}")

    reservation = Reservation(
        id=uuid4().hex,
        name=request.name.strip(),
        email=request.email.strip(),
        phone_number=request.phone_number.strip(),
        starts_at=combine_date_time(request),
        party_size=clamp_party_size(request.party_size),
        special_requests=request.special_requests.strip(),
        status=ReservationStatus.CONFIRMED,
    )
    logger.info(
        "reservation_confirmed id=%s at=%s party=%d",
        reservation.id[:8],
        reservation.starts_at.isoformat(timespec="minutes"),
        reservation.party_size,
    )
    return reservation


@dataclass(frozen=True)
class BookStats:
    on_day: int
    this_week: int
    tables_available: int


class ReservationBook:
    """Bookings for the session, one table per active booking per day.

    Availability is informational only: a booking is still accepted when every
    table is taken, it just goes without a table number.
    """

    def __init__(self, reservations: Iterable[Reservation] = (), table_count: int = TABLE_COUNT) -> None:
        self.table_count = table_count
        self._reservations: list[Reservation] = list(reservations)

    @property
    def reservations(self) -> list[Reservation]:
        return sorted(self._reservations, key=lambda r: r.starts_at)

    def __len__(self) -> int:
        return len(self._reservations)

    def get(self, reservation_id: str) -> Reservation | None:
        for reservation in self._reservations:
            if reservation.id == reservation_id:
                return reservation
        return None

    def add(self, reservation: Reservation) -> Reservation:
        """Store a booking, seating it at the lowest free table for its day."""
        if self.get(reservation.id) is not None:
            raise ValueError(f"reservation {reservation.id} is already booked")
        if reservation.table_number is None and reservation.is_active:
            table = self._first_free_table(reservation.starts_at.date())
            if table is not None:
                reservation = replace(reservation, table_number=table)
        self._reservations.append(reservation)
        logger.info(
            "book_add id=%s day=%s table=%s",
            reservation.id[:8],
            reservation.starts_at.date().isoformat(),
            reservation.table_number,
        )
        return reservation

    def for_day(self, day: date) -> list[Reservation]:
        return [r for r in self.reservations if r.starts_at.date() == day]

    def reserved_tables(self, day: date) -> dict[int, Reservation]:
        return {
            r.table_number: r
            for r in self.for_day(day)
            if r.is_active and r.table_number is not None
        }

    def table_status(self, day: date) -> list[tuple[int, Reservation | None]]:
        reserved = self.reserved_tables(day)
        return [(number, reserved.get(number)) for number in range(1, self.table_count + 1)]

    def cancel(self, reservation_id: str) -> Reservation | None:
        return self._close(reservation_id, ReservationStatus.CANCELLED)

    def complete(self, reservation_id: str) -> Reservation | None:
        """Mark a party as seated and done; its table frees up."""
        return self._close(reservation_id, ReservationStatus.COMPLETED)

    def stats(self, day: date) -> BookStats:
        week_end = day + timedelta(days=7)
        booked = [r for r in self._reservations if r.status is not ReservationStatus.CANCELLED]
        return BookStats(
            on_day=sum(1 for r in booked if r.starts_at.date() == day),
            this_week=sum(1 for r in booked if day <= r.starts_at.date() < week_end),
            tables_available=self.table_count - len(self.reserved_tables(day)),
        )

    def _first_free_table(self, day: date) -> int | None:
        reserved = self.reserved_tables(day)
        for number in range(1, self.table_count + 1):
            if number not in reserved:
                return number
        return None

    def _close(self, reservation_id: str, status: ReservationStatus) -> Reservation | None:
        """Move an active booking to a closed status; closed ones stay as they are."""
        for idx, reservation in enumerate(self._reservations):
            if reservation.id != reservation_id:
                continue
            if not reservation.is_active:
                return reservation
            updated = replace(reservation, status=status)
            self._reservations[idx] = updated
            logger.info("book_%s id=%s", status.value.lower(), reservation_id[:8])
            return updated
        return None
