"""Email notifier interface (Protocol)."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class IEmailNotifier(Protocol):
    """Notification capability: tell the customer their order went through.

    Single-argument contract. Variants may deliver over a different channel
    (SMS, chat, ...) as long as they accept one destination string.

    No delivery confirmation, no retry, no validation of the destination.
    """

    def send_notification(self, destination: str) -> None:
        """Deliver the order notification.

        Args:
            destination: Free-text address for the channel (email address, phone number, ...)
        """
        ...
