"""
Notifications module
Message formatting and delivery for streak alerts
"""
from .service import (
    NotificationService,
    format_streak_alert,
    format_alert_digest
)

__all__ = [
    'NotificationService',
    'format_streak_alert',
    'format_alert_digest'
]
