import os

from src.domain.storage import HotelStorage


def create_storage(backend: str | None = None) -> HotelStorage:
    """
    Factory: create the right storage adapter based on config.

    The backend can be passed explicitly or read from the
    HOTEL_STORAGE env var. Defaults to "file".
    """
    backend = backend or os.environ.get("HOTEL_STORAGE", "file")

    if backend == "file":
        from .flat_file_storage import FlatFileHotelStorage

        return FlatFileHotelStorage(
            rooms_path=os.environ.get("HOTEL_ROOMS_FILE", "data/rooms.txt"),
            reservations_path=os.environ.get("HOTEL_RESERVATIONS_FILE", "data/reservations.txt"),
        )

    if backend == "sqlite":
        from .sqlite_storage import SqliteHotelStorage

        db_path = os.environ.get("HOTEL_DB_PATH", "data/hotel.db")
        if os.path.dirname(db_path):
            os.makedirs(os.path.dirname(db_path), exist_ok=True)
        return SqliteHotelStorage(db_path=db_path)

    if backend == "memory":
        from .simulator_storage import InMemoryHotelStorage

        return InMemoryHotelStorage()

    raise ValueError(f"Unknown storage backend: {backend!r}")
