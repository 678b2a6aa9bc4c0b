"""
HotelStorage port: persists room availability and confirmed bookings.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from src.domain.inventory import Room
from src.domain.ledger import Reservation


@dataclass
class StoredState:
    """What a storage adapter hands back at startup."""

    availability: dict[int, bool] = field(default_factory=dict)  # room_number -> available
    reservations: list[Reservation] = field(default_factory=list)


class HotelStorage(ABC):
    """
    Port: where hotel state lives between runs.

    The reservation manager depends ONLY on this interface.
    It doesn't know whether state goes to flat files, SQLite,
    or nowhere at all.

    Only confirmed reservations are written. Cancelled ones exist for the
    current process run and are gone after a restart.
    """

    @abstractmethod
    def load(self) -> StoredState:
        """Return saved state, or an empty StoredState if nothing is stored."""
        ...

    @abstractmethod
    def save(self, rooms: list[Room], reservations: list[Reservation]) -> None:
        """
        Replace stored state with *rooms* and the confirmed subset of *reservations*.

        Write failures are logged, never raised.
        """
        ...
