"""
In-memory HotelStorage for testing, no files, no database.
"""

from dataclasses import replace

from src.domain.inventory import Room
from src.domain.ledger import Reservation
from src.domain.storage import HotelStorage, StoredState


class InMemoryHotelStorage(HotelStorage):
    """
    Keeps copies of whatever was last saved.

    Test helpers:
        save_count  : number of save() calls so far
        seed()      : preload state as if a previous run had saved it
    """

    def __init__(self):
        self._state = StoredState()
        self.save_count = 0

    def seed(self, availability: dict[int, bool], reservations: list[Reservation]) -> None:
        self._state = StoredState(
            availability=dict(availability),
            reservations=[replace(r) for r in reservations if r.is_active],
        )

    def load(self) -> StoredState:
        # Hand out copies so callers cannot mutate what is "on disk".
        return StoredState(
            availability=dict(self._state.availability),
            reservations=[replace(r) for r in self._state.reservations],
        )

    def save(self, rooms: list[Room], reservations: list[Reservation]) -> None:
        self.save_count += 1
        self.seed({r.room_number: r.available for r in rooms}, reservations)
