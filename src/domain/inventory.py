"""
Inventory store: the fixed set of bookable rooms.

Rooms are seeded once at startup and never added or removed afterwards.
The only thing that changes over a room's lifetime is its availability flag.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class RoomCategory(str, Enum):
    STANDARD = "Standard"
    DELUXE = "Deluxe"
    SUITE = "Suite"


@dataclass
class Room:
    """A bookable unit with a fixed category and nightly price."""

    room_number: int
    category: RoomCategory
    price_per_night: Decimal
    available: bool = True


def default_rooms() -> list[Room]:
    """The hotel's room seed, in display order."""
    return [
        Room(101, RoomCategory.STANDARD, Decimal("100.00")),
        Room(102, RoomCategory.STANDARD, Decimal("100.00")),
        Room(201, RoomCategory.DELUXE, Decimal("200.00")),
        Room(202, RoomCategory.DELUXE, Decimal("200.00")),
        Room(301, RoomCategory.SUITE, Decimal("350.00")),
    ]


class InventoryStore:

    def __init__(self, rooms: list[Room] | None = None):
        self._rooms: list[Room] = rooms if rooms is not None else default_rooms()
        numbers = [r.room_number for r in self._rooms]
        if len(numbers) != len(set(numbers)):
            raise ValueError(f"Duplicate room numbers in seed: {numbers}")

    @property
    def rooms(self) -> list[Room]:
        return list(self._rooms)

    def list_available(self) -> list[Room]:
        return [r for r in self._rooms if r.available]

    def find_room(self, room_number: int) -> Room | None:
        for room in self._rooms:
            if room.room_number == room_number:
                return room
        return None

    def set_availability(self, room_number: int, available: bool) -> None:
        room = self.find_room(room_number)
        if room is not None:
            room.available = available
