"""Notifier implementations."""

from orderflow.services.reporting import report
from orderflow.system import LoggerFactory

logger = LoggerFactory.get_logger()


class EmailService:
    """Notifies by email."""

    channel = "email"
    label = "Email"

    def send_notification(self, destination: str) -> None:
        logger.debug("notification.sent", channel=self.channel, destination=destination)
        report(f"{self.label} notification sent to: {destination}")


class SmsService(EmailService):
    """Notifies by text message instead of email."""

    channel = "sms"
    label = "SMS"
