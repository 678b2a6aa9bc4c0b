"""
Reservation manager tests using simulators only.

No files, no database: InMemoryHotelStorage stands in for persistence and
SimulatedPaymentProcessor records charges without printing.
"""

import logging
from decimal import Decimal

import pytest

from src.adapters.simulator_storage import InMemoryHotelStorage
from src.domain.inventory import Room, RoomCategory
from src.domain.ledger import Reservation, ReservationStatus
from src.hotel import HotelConfig, ReservationManager, UNKNOWN_CATEGORY
from src.payment.simulated_processor import SimulatedPaymentProcessor


@pytest.fixture
def storage():
    return InMemoryHotelStorage()


@pytest.fixture
def payments():
    return SimulatedPaymentProcessor(echo=False)


@pytest.fixture
def hotel(storage, payments):
    return ReservationManager(HotelConfig(storage=storage, payments=payments))


def _available(hotel):
    return [r.room_number for r in hotel.display_available_rooms()]


def _assert_availability_matches_ledger(hotel):
    active = {r.room_number for r in hotel.ledger.reservations if r.is_active}
    for room in hotel.inventory.rooms:
        assert room.available == (room.room_number not in active)


def _snapshot(hotel):
    return (
        [(r.room_number, r.available) for r in hotel.inventory.rooms],
        [(r.guest_name, r.room_number, r.nights, r.total_cost, r.status) for r in hotel.ledger.reservations],
    )


# ---------------------------------------------------------------------------
# Booking
# ---------------------------------------------------------------------------


def test_book_room(hotel, storage, payments):
    assert hotel.make_reservation("Alice", 101, 2) is True

    [booking] = hotel.ledger.reservations
    assert booking.total_cost == Decimal("200.00")
    assert booking.status is ReservationStatus.CONFIRMED
    assert 101 not in _available(hotel)
    assert storage.save_count == 1
    assert payments.receipts[0].amount == Decimal("200.00")
    assert payments.receipts[0].succeeded
    _assert_availability_matches_ledger(hotel)


def test_suite_cost(hotel):
    hotel.make_reservation("Carol", 301, 3)
    assert hotel.ledger.reservations[0].total_cost == Decimal("1050.00")


@pytest.mark.parametrize("room_number", [101, 999])
def test_booking_unavailable_or_unknown_room_fails(hotel, storage, payments, room_number):
    hotel.make_reservation("Alice", 101, 2)
    before = _snapshot(hotel)

    assert hotel.make_reservation("Bob", room_number, 1) is False

    assert _snapshot(hotel) == before
    assert storage.save_count == 1
    assert len(payments.receipts) == 1


def test_non_positive_nights_accepted(hotel, caplog):
    with caplog.at_level(logging.WARNING, logger="src.hotel"):
        assert hotel.make_reservation("Zed", 102, 0) is True
        assert hotel.make_reservation("Zed", 201, -2) is True
    assert "room=102 guest='Zed' booking with 0 night(s)" in caplog.text
    assert "room=201 guest='Zed' booking with -2 night(s)" in caplog.text
    totals = [r.total_cost for r in hotel.ledger.reservations]
    assert totals == [Decimal("0.00"), Decimal("-400.00")]


# ---------------------------------------------------------------------------
# Cancellation
# ---------------------------------------------------------------------------


def test_cancel_frees_room_and_keeps_record(hotel, storage):
    hotel.make_reservation("Alice", 101, 2)
    assert hotel.cancel_reservation("alice", 101) is True

    assert 101 in _available(hotel)
    [booking] = hotel.ledger.reservations
    assert booking.status is ReservationStatus.CANCELLED
    assert storage.save_count == 2
    _assert_availability_matches_ledger(hotel)


def test_cancel_unknown_fails(hotel, storage):
    hotel.make_reservation("Alice", 101, 2)
    before = _snapshot(hotel)

    assert hotel.cancel_reservation("Bob", 101) is False
    assert hotel.cancel_reservation("Alice", 102) is False

    assert _snapshot(hotel) == before
    assert storage.save_count == 1


def test_cancel_twice_fails(hotel, storage):
    hotel.make_reservation("Alice", 101, 2)
    hotel.cancel_reservation("Alice", 101)
    before = _snapshot(hotel)

    assert hotel.cancel_reservation("Alice", 101) is False
    assert _snapshot(hotel) == before
    assert storage.save_count == 2


def test_total_cost_not_recomputed(hotel):
    hotel.make_reservation("Alice", 101, 2)
    hotel.inventory.find_room(101).price_per_night = Decimal("999.00")
    hotel.cancel_reservation("Alice", 101)
    assert hotel.ledger.reservations[0].total_cost == Decimal("200.00")


# ---------------------------------------------------------------------------
# Viewing
# ---------------------------------------------------------------------------


def test_full_scenario(hotel):
    assert hotel.make_reservation("Alice", 101, 2)
    assert hotel.cancel_reservation("Alice", 101)
    assert 101 in _available(hotel)
    assert hotel.make_reservation("Bob", 101, 1)

    details = hotel.view_booking_details("alice")
    assert len(details) == 1
    d = details[0]
    assert (d.guest_name, d.room_number, d.category, d.nights) == ("Alice", 101, "Standard", 2)
    assert d.total_cost == Decimal("200.00")
    assert d.status is ReservationStatus.CANCELLED
    _assert_availability_matches_ledger(hotel)


def test_view_no_bookings(hotel):
    assert hotel.view_booking_details("Nobody") == []


def test_view_unresolvable_room_shows_unknown(storage, payments):
    storage.seed({}, [Reservation("Ghost", 999, 1, Decimal("10.00"))])
    hotel = ReservationManager(HotelConfig(storage=storage, payments=payments))
    [detail] = hotel.view_booking_details("ghost")
    assert detail.category == UNKNOWN_CATEGORY


def test_no_rooms_available(hotel):
    for number in (101, 102, 201, 202, 301):
        hotel.make_reservation("Alice", number, 1)
    assert hotel.display_available_rooms() == []


# ---------------------------------------------------------------------------
# Startup restore
# ---------------------------------------------------------------------------


def test_restores_availability_and_reservations(storage, payments):
    storage.seed(
        {101: False, 202: False, 999: False},
        [Reservation("Alice", 101, 2, Decimal("200.00"))],
    )
    hotel = ReservationManager(HotelConfig(storage=storage, payments=payments))

    assert _available(hotel) == [102, 201, 301]
    assert hotel.cancel_reservation("ALICE", 101) is True
    assert 101 in _available(hotel)


def test_restart_drops_cancelled_history(storage, payments):
    hotel = ReservationManager(HotelConfig(storage=storage, payments=payments))
    hotel.make_reservation("Alice", 101, 2)
    hotel.make_reservation("Alice", 201, 1)
    hotel.cancel_reservation("Alice", 101)
    assert len(hotel.view_booking_details("Alice")) == 2

    restarted = ReservationManager(HotelConfig(storage=storage, payments=payments))
    [detail] = restarted.view_booking_details("Alice")
    assert detail.room_number == 201
    assert _available(restarted) == [101, 102, 202, 301]


def test_custom_room_seed(storage, payments):
    rooms = [Room(1, RoomCategory.SUITE, Decimal("50.00"))]
    hotel = ReservationManager(HotelConfig(storage=storage, payments=payments, rooms=rooms))
    assert hotel.make_reservation("Dan", 1, 4)
    assert hotel.ledger.reservations[0].total_cost == Decimal("200.00")
