import logging
from datetime import datetime, timezone
from decimal import Decimal

from .ports import PaymentProcessor, PaymentReceipt

log = logging.getLogger(__name__)


class SimulatedPaymentProcessor(PaymentProcessor):
    """Adapter: print the charge to the console and always succeed."""

    def __init__(self, echo: bool = True):
        self._echo = echo
        self.receipts: list[PaymentReceipt] = []

    def charge(self, guest_name: str, room_number: int, amount: Decimal) -> PaymentReceipt:
        if self._echo:
            print(f"Processing payment of ${amount:.2f}...")
            print("Payment successful!")

        receipt = PaymentReceipt(
            guest_name=guest_name,
            room_number=room_number,
            amount=amount,
            succeeded=True,
            processed_at=datetime.now(timezone.utc),
        )
        self.receipts.append(receipt)
        log.info("room=%d guest=%r charged %s (simulated)", room_number, guest_name, amount)
        return receipt
