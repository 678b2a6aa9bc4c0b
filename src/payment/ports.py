from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass
class PaymentReceipt:
    """What a processor hands back after charging a guest."""

    guest_name: str
    room_number: int
    amount: Decimal
    succeeded: bool
    processed_at: datetime


class PaymentProcessor(ABC):
    """
    Port: how a booking gets paid for.

    The reservation manager depends ONLY on this interface.
    Only a simulated processor exists; no real gateway is wired in.
    """

    @abstractmethod
    def charge(self, guest_name: str, room_number: int, amount: Decimal) -> PaymentReceipt:
        """Charge *amount* for a booking and return the receipt."""
        ...
