"""Root conftest for all tests - shared recording fakes for the capabilities."""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path for test helper imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


class CallLog:
    """Ordered record of capability calls shared by the recording fakes."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple]] = []

    def record(self, step: str, *args: object) -> None:
        self.calls.append((step, args))

    @property
    def steps(self) -> list[str]:
        return [step for step, _ in self.calls]


class RecordingOrder:
    def __init__(self, log: CallLog) -> None:
        self.log = log

    def calculate_total(self, price: float, quantity: int) -> float:
        self.log.record("calculate_total", price, quantity)
        return price * quantity

    def place_order(self, customer_name: str, address: str) -> None:
        self.log.record("place_order", customer_name, address)


class RecordingInvoiceGenerator:
    def __init__(self, log: CallLog) -> None:
        self.log = log

    def generate_invoice(self, target_name: str) -> None:
        self.log.record("generate_invoice", target_name)


class RecordingNotifier:
    def __init__(self, log: CallLog) -> None:
        self.log = log

    def send_notification(self, destination: str) -> None:
        self.log.record("send_notification", destination)


@pytest.fixture
def call_log() -> CallLog:
    return CallLog()


@pytest.fixture
def recording_components(call_log):
    """Order, invoice generator and notifier that record into one shared log."""
    return RecordingOrder(call_log), RecordingInvoiceGenerator(call_log), RecordingNotifier(call_log)
