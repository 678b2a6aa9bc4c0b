"""
SQLite adapter for HotelStorage.

Use ":memory:" for tests, a file path for production.
"""

import logging
import sqlite3
from decimal import Decimal

from src.domain.inventory import Room
from src.domain.ledger import Reservation
from src.domain.storage import HotelStorage, StoredState

log = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS rooms (
    room_number INTEGER PRIMARY KEY,
    category    TEXT NOT NULL,
    available   INTEGER NOT NULL
);

CREATE TABLE IF NOT EXISTS reservations (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    guest_name  TEXT NOT NULL,
    room_number INTEGER NOT NULL,
    nights      INTEGER NOT NULL,
    total_cost  TEXT NOT NULL
);
"""


class SqliteHotelStorage(HotelStorage):

    def __init__(self, db_path: str = "hotel.db"):
        self._conn = sqlite3.connect(db_path)
        self._conn.row_factory = sqlite3.Row
        self._conn.executescript(_SCHEMA)

    def load(self) -> StoredState:
        room_rows = self._conn.execute("SELECT room_number, available FROM rooms").fetchall()
        if not room_rows:
            log.info("No room data found. Using defaults.")

        reservation_rows = self._conn.execute(
            "SELECT * FROM reservations ORDER BY id"
        ).fetchall()
        if not reservation_rows:
            log.info("No reservation data found.")

        return StoredState(
            availability={row["room_number"]: bool(row["available"]) for row in room_rows},
            reservations=[self._row_to_reservation(row) for row in reservation_rows],
        )

    def save(self, rooms: list[Room], reservations: list[Reservation]) -> None:
        try:
            with self._conn:
                self._conn.execute("DELETE FROM rooms")
                self._conn.executemany(
                    "INSERT INTO rooms (room_number, category, available) VALUES (?, ?, ?)",
                    [(r.room_number, r.category.value, int(r.available)) for r in rooms],
                )
                self._conn.execute("DELETE FROM reservations")
                self._conn.executemany(
                    "INSERT INTO reservations (guest_name, room_number, nights, total_cost)"
                    " VALUES (?, ?, ?, ?)",
                    [
                        (r.guest_name, r.room_number, r.nights, str(r.total_cost))
                        for r in reservations
                        if r.is_active
                    ],
                )
        except sqlite3.Error as exc:
            log.error("Error saving hotel data: %s", exc)

    @staticmethod
    def _row_to_reservation(row) -> Reservation:
        return Reservation(
            guest_name=row["guest_name"],
            room_number=row["room_number"],
            nights=row["nights"],
            total_cost=Decimal(row["total_cost"]),
        )
