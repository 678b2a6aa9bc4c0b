"""
Reservation manager: the façade the shell talks to.

Owns the room inventory and the reservation ledger, and writes state
through to storage after every change:

  make_reservation    → charge, mark room taken, record booking, save
  cancel_reservation  → mark booking cancelled, free room, save
  view_booking_details, display_available_rooms → read only

Rooms come from the seed; only their availability is restored from storage.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from src.domain.inventory import InventoryStore, Room, default_rooms
from src.domain.ledger import Reservation, ReservationLedger, ReservationStatus
from src.domain.storage import HotelStorage
from src.payment.ports import PaymentProcessor

log = logging.getLogger(__name__)

UNKNOWN_CATEGORY = "Unknown"


@dataclass
class HotelConfig:
    storage: HotelStorage
    payments: PaymentProcessor
    rooms: list[Room] = field(default_factory=default_rooms)


@dataclass
class BookingDetail:
    """A ledger record as shown to the guest, with the room category resolved."""

    guest_name: str
    room_number: int
    category: str
    nights: int
    total_cost: Decimal
    status: ReservationStatus


class ReservationManager:

    def __init__(self, config: HotelConfig):
        self._cfg = config
        self.inventory = InventoryStore(config.rooms)
        self.ledger = ReservationLedger()
        self._restore()

    def _restore(self) -> None:
        state = self._cfg.storage.load()
        for room_number, available in state.availability.items():
            if self.inventory.find_room(room_number) is None:
                log.warning("Stored availability for unknown room %d ignored", room_number)
                continue
            self.inventory.set_availability(room_number, available)
        for reservation in state.reservations:
            self.ledger.add(reservation)
        log.info(
            "Restored %d room flag(s) and %d reservation(s)",
            len(state.availability), len(state.reservations),
        )

    def _persist(self) -> None:
        self._cfg.storage.save(self.inventory.rooms, self.ledger.reservations)

    # -- queries -------------------------------------------------------------

    def display_available_rooms(self) -> list[Room]:
        return self.inventory.list_available()

    def view_booking_details(self, guest_name: str) -> list[BookingDetail]:
        details = []
        for r in self.ledger.list_for(guest_name):
            room = self.inventory.find_room(r.room_number)
            details.append(
                BookingDetail(
                    guest_name=r.guest_name,
                    room_number=r.room_number,
                    category=room.category.value if room else UNKNOWN_CATEGORY,
                    nights=r.nights,
                    total_cost=r.total_cost,
                    status=r.status,
                )
            )
        return details

    # -- mutations -----------------------------------------------------------

    def make_reservation(self, guest_name: str, room_number: int, nights: int) -> bool:
        """Book *room_number* for *guest_name*. False if the room is unknown or taken."""
        room = self.inventory.find_room(room_number)
        if room is None or not room.available:
            log.info("room=%d guest=%r booking refused: not found or unavailable", room_number, guest_name)
            return False

        if nights <= 0:
            # Accepted as-is; the charge comes out zero or negative.
            log.warning("room=%d guest=%r booking with %d night(s)", room_number, guest_name, nights)

        total_cost = room.price_per_night * nights
        self._cfg.payments.charge(guest_name, room_number, total_cost)

        self.inventory.set_availability(room_number, False)
        self.ledger.add(Reservation(guest_name, room_number, nights, total_cost))
        self._persist()

        log.info("room=%d guest=%r booked for %d night(s), total=%s", room_number, guest_name, nights, total_cost)
        return True

    def cancel_reservation(self, guest_name: str, room_number: int) -> bool:
        """Cancel the guest's active booking of *room_number*. False if there is none."""
        reservation = self.ledger.find_active_for(guest_name, room_number)
        if reservation is None:
            log.info("room=%d guest=%r cancel refused: no active reservation", room_number, guest_name)
            return False

        reservation.cancel()
        self.inventory.set_availability(room_number, True)
        self._persist()

        log.info("room=%d guest=%r reservation cancelled", room_number, guest_name)
        return True
