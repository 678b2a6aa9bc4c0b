"""
Reservation ledger: append-only history of every booking made.

Records are never removed. Cancelling a booking flips its status to
Cancelled and leaves the record in place so the guest's history stays
visible for the rest of the session.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class ReservationStatus(str, Enum):
    CONFIRMED = "Confirmed"
    CANCELLED = "Cancelled"


@dataclass
class Reservation:
    """A guest's booking of one room for a number of nights."""

    guest_name: str
    room_number: int
    nights: int
    total_cost: Decimal  # price_per_night * nights at booking time
    status: ReservationStatus = ReservationStatus.CONFIRMED

    @property
    def is_active(self) -> bool:
        return self.status is ReservationStatus.CONFIRMED

    def cancel(self) -> None:
        """Confirmed → Cancelled. There is no way back."""
        self.status = ReservationStatus.CANCELLED


def _same_guest(a: str, b: str) -> bool:
    return a.casefold() == b.casefold()


class ReservationLedger:

    def __init__(self):
        self._records: list[Reservation] = []

    @property
    def reservations(self) -> list[Reservation]:
        return list(self._records)

    def add(self, reservation: Reservation) -> None:
        self._records.append(reservation)

    def find_active_for(self, guest_name: str, room_number: int) -> Reservation | None:
        """First confirmed booking of *room_number* by *guest_name* (case-insensitive)."""
        for r in self._records:
            if r.is_active and r.room_number == room_number and _same_guest(r.guest_name, guest_name):
                return r
        return None

    def list_for(self, guest_name: str) -> list[Reservation]:
        return [r for r in self._records if _same_guest(r.guest_name, guest_name)]
