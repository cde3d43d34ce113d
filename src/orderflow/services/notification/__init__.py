"""Notification capability.

Public API:
    - IEmailNotifier: Protocol defining the notification capability
    - EmailService: Default implementation (email channel)
    - SmsService: Variant delivering over SMS
"""

from orderflow.services.notification.interface import IEmailNotifier
from orderflow.services.notification.service import EmailService, SmsService

__all__ = [
    "EmailService",
    "IEmailNotifier",
    "SmsService",
]
