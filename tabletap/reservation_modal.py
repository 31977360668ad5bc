"""Reservation request modal."""

from __future__ import annotations

from rich.text import Text
from textual.timer import Timer

from tabletap.config import RESERVATION_DELAY_SECONDS, RESERVATION_TIME_STEP_MINUTES
from tabletap.data import hours_for
from tabletap.form_modal import ACTION, STEPPER, TEXT, FormModal, FormRow
from tabletap.models import Reservation, ReservationRequest
from tabletap.reservations import confirm_reservation, shift_reservation
from tabletap.validation import clamp_party_size, missing_reservation_fields

_TEXT_FIELDS = {
    "name": "name",
    "email": "email",
    "phone": "phone_number",
    "requests": "special_requests",
}


class ReservationModal(FormModal[Reservation | None]):
    """Collect a table request and confirm it after a simulated round trip."""

    TITLE_TEXT = "Make a Reservation"

    def __init__(self, delay: float = RESERVATION_DELAY_SECONDS) -> None:
        super().__init__()
        self.request = ReservationRequest()
        # Today at noon may already be past.
        shift_reservation(self.request)
        self.delay = delay
        self._submit_timer: Timer | None = None

    def rows(self) -> list[FormRow]:
        return [
            FormRow("name", "Name", TEXT),
            FormRow("email", "Email", TEXT),
            FormRow("phone", "Phone", TEXT),
            FormRow("date", "Date", STEPPER),
            FormRow("time", "Time", STEPPER),
            FormRow("party_size", "Party size", STEPPER),
            FormRow("requests", "Special requests", TEXT),
            FormRow("submit", "Request Reservation", ACTION),
        ]

    def get_text(self, key: str) -> str:
        return getattr(self.request, _TEXT_FIELDS[key])

    def set_text(self, key: str, value: str) -> None:
        setattr(self.request, _TEXT_FIELDS[key], value)

    def display_value(self, key: str) -> str:
        if key == "date":
            return self.request.date.strftime("%a %b %d, %Y")
        if key == "time":
            return self.request.time.strftime("%I:%M %p")
        if key == "party_size":
            size = self.request.party_size
            return f"{size} {'person' if size == 1 else 'people'}"
        return self.get_text(key)

    def step(self, key: str, delta: int) -> None:
        if key == "date":
            shift_reservation(self.request, days=delta)
        elif key == "time":
            shift_reservation(self.request, minutes=RESERVATION_TIME_STEP_MINUTES * delta)
        elif key == "party_size":
            self.request.party_size = clamp_party_size(self.request.party_size + delta)

    def activate(self, key: str) -> None:
        if key != "submit":
            return
        missing = missing_reservation_fields(self.request)
        if missing:
            self.status = f"Missing: {', '.join(missing)}"
            return
        self.busy = True
        self.status = "Sending request..."
        self._submit_timer = self.set_timer(self.delay, self._complete_submit)

    def summary(self) -> Text:
        return Text(f"Open {hours_for(self.request.date)}", style="dim")

    def action_close(self) -> None:
        self._cancel_pending()
        self.dismiss(None)

    def on_unmount(self) -> None:
        self._cancel_pending()

    def _cancel_pending(self) -> None:
        if self._submit_timer is not None:
            self._submit_timer.stop()
            self._submit_timer = None

    def _complete_submit(self) -> None:
        if self._submit_timer is None:
            return
        self._submit_timer = None
        self.busy = False
        self.dismiss(confirm_reservation(self.request))
