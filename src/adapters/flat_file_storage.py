"""
Flat-file adapter for HotelStorage.

Two plain-text files, one record per line, comma-separated, no header:

    rooms.txt         roomNumber,category,available      e.g. 101,Standard,true
    reservations.txt  guestName,roomNumber,nights,total  e.g. Alice,101,2,200.00

Fields are not escaped. Reservation lines are split from the right, so
the three numeric fields are always the last three and any comma before
them belongs to the guest name. Every save rewrites both files in full.
"""

import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path

from src.domain.inventory import Room
from src.domain.ledger import Reservation
from src.domain.storage import HotelStorage, StoredState

log = logging.getLogger(__name__)


class FlatFileHotelStorage(HotelStorage):

    def __init__(
        self,
        rooms_path: str | Path = "data/rooms.txt",
        reservations_path: str | Path = "data/reservations.txt",
    ):
        self.rooms_path = Path(rooms_path)
        self.reservations_path = Path(reservations_path)

    # -- load ----------------------------------------------------------------

    def load(self) -> StoredState:
        return StoredState(
            availability=self._load_availability(),
            reservations=self._load_reservations(),
        )

    def _load_availability(self) -> dict[int, bool]:
        availability: dict[int, bool] = {}
        lines = self._read_lines(self.rooms_path)
        if lines is None:
            log.info("No room data found. Using defaults.")
            return availability

        for lineno, line in enumerate(lines, start=1):
            parts = line.split(",")
            try:
                room_number = int(parts[0])
                # Only the flag is read back; category and price come from the seed.
                availability[room_number] = parts[2].strip().lower() == "true"
            except (IndexError, ValueError):
                log.warning("%s:%d malformed room line skipped: %r", self.rooms_path, lineno, line)
        return availability

    def _load_reservations(self) -> list[Reservation]:
        reservations: list[Reservation] = []
        lines = self._read_lines(self.reservations_path)
        if lines is None:
            log.info("No reservation data found.")
            return reservations

        for lineno, line in enumerate(lines, start=1):
            parts = line.rsplit(",", 3)
            try:
                reservations.append(
                    Reservation(
                        guest_name=parts[0],
                        room_number=int(parts[1]),
                        nights=int(parts[2]),
                        total_cost=Decimal(parts[3].strip()),
                    )
                )
            except (IndexError, ValueError, InvalidOperation):
                log.warning(
                    "%s:%d malformed reservation line skipped: %r",
                    self.reservations_path, lineno, line,
                )
        return reservations

    @staticmethod
    def _read_lines(path: Path) -> list[str] | None:
        """Non-empty lines of *path*, or None if the file is missing or unreadable."""
        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except FileNotFoundError:
            return None
        except OSError as exc:
            log.error("Error reading %s: %s", path, exc)
            return None
        return [line for line in text.splitlines() if line.strip()]

    # -- save ----------------------------------------------------------------

    def save(self, rooms: list[Room], reservations: list[Reservation]) -> None:
        room_lines = [
            f"{r.room_number},{r.category.value},{'true' if r.available else 'false'}"
            for r in rooms
        ]
        self._write_lines(self.rooms_path, room_lines, "room")

        reservation_lines = [
            f"{r.guest_name},{r.room_number},{r.nights},{r.total_cost}"
            for r in reservations
            if r.is_active
        ]
        self._write_lines(self.reservations_path, reservation_lines, "reservation")

    @staticmethod
    def _write_lines(path: Path, lines: list[str], what: str) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        except OSError as exc:
            log.error("Error saving %s data to %s: %s", what, path, exc)
