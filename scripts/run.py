"""
Interactive runner for the hotel reservation system.

Usage:
    python scripts/run.py

Environment variables (all optional):
    HOTEL_STORAGE            - "file", "sqlite" or "memory" (default: file)
    HOTEL_ROOMS_FILE         - rooms flat file (default: data/rooms.txt)
    HOTEL_RESERVATIONS_FILE  - reservations flat file (default: data/reservations.txt)
    HOTEL_DB_PATH            - SQLite database path (default: data/hotel.db)
    LOG_LEVEL                - logging level (default: WARNING)
"""

import logging
import os
import sys

# Make sure project root is on sys.path when run as a script
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.adapters.factory import create_storage
from src.hotel import HotelConfig, ReservationManager
from src.payment.simulated_processor import SimulatedPaymentProcessor
from src.shell import HotelShell

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "WARNING").upper(),
    format="%(asctime)s  %(levelname)-7s  %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
log = logging.getLogger(__name__)


def build_manager() -> ReservationManager:
    config = HotelConfig(
        storage=create_storage(),
        payments=SimulatedPaymentProcessor(),
    )
    return ReservationManager(config)


def main() -> None:
    try:
        manager = build_manager()
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)

    log.info("Hotel shell started, storage=%s", os.environ.get("HOTEL_STORAGE", "file"))
    HotelShell(manager).run()


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        log.info("Hotel shell stopped.")
