"""
Interactive menu loop for the hotel reservation system.

Kept apart from scripts/run.py so it can be driven from tests with
scripted input instead of a terminal.
"""

import logging
from typing import Callable

from src.hotel import ReservationManager

log = logging.getLogger(__name__)

MENU = """
=== Hotel Reservation System ===
1. View Available Rooms
2. Make Reservation
3. Cancel Reservation
4. View Booking Details
5. Exit"""


class HotelShell:
    """
    Menu-driven front end over a ReservationManager.

    ``input_fn`` and ``output`` default to the builtins; tests pass a
    scripted reader and a list-appending writer.
    """

    def __init__(
        self,
        manager: ReservationManager,
        input_fn: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ):
        self.manager = manager
        self._input = input_fn
        self._out = output

    def run(self) -> None:
        while True:
            self._out(MENU)
            try:
                choice = self._input("Choose an option: ").strip()
                if not self.handle(choice):
                    break
            except EOFError:
                self._out("Exiting...")
                break

    def handle(self, choice: str) -> bool:
        """Run one menu option. Returns False when the loop should stop."""
        try:
            if choice == "1":
                self.show_available_rooms()
            elif choice == "2":
                self.make_reservation()
            elif choice == "3":
                self.cancel_reservation()
            elif choice == "4":
                self.show_booking_details()
            elif choice == "5":
                self._out("Exiting...")
                return False
            else:
                self._out("Invalid option. Try again.")
        except ValueError as exc:
            log.debug("bad numeric input: %s", exc)
            self._out("Invalid number.")
        return True

    # -- actions -------------------------------------------------------------

    def show_available_rooms(self) -> None:
        self._out("\n=== Available Rooms ===")
        rooms = self.manager.display_available_rooms()
        if not rooms:
            self._out("No rooms available.")
            return
        for room in rooms:
            self._out(f"Room {room.room_number} ({room.category.value}): ${room.price_per_night:.2f}/night")

    def make_reservation(self) -> None:
        guest_name = self._input("Enter guest name: ")
        room_number = int(self._input("Enter room number: "))
        nights = int(self._input("Enter number of nights: "))
        if self.manager.make_reservation(guest_name, room_number, nights):
            self._out("Reservation successful!")
        else:
            self._out("Room unavailable or invalid.")

    def cancel_reservation(self) -> None:
        guest_name = self._input("Enter guest name: ")
        room_number = int(self._input("Enter room number: "))
        if self.manager.cancel_reservation(guest_name, room_number):
            self._out("Reservation cancelled!")
        else:
            self._out("Reservation not found.")

    def show_booking_details(self) -> None:
        guest_name = self._input("Enter guest name: ")
        self._out("\n=== Booking Details ===")
        details = self.manager.view_booking_details(guest_name)
        if not details:
            self._out(f"No bookings found for {guest_name}")
            return
        for d in details:
            self._out(
                f"Guest: {d.guest_name}, Room: {d.room_number} ({d.category}), "
                f"Nights: {d.nights}, Total: ${d.total_cost:.2f}, Status: {d.status.value}"
            )
