"""
Notifications Service - Streak alert formatting and delivery
Centralizes alert message templates and sending logic
"""
import logging
from typing import Callable, List, Optional

from app.models.insight import RiskAssessment

logger = logging.getLogger(__name__)

RISK_ICONS = {
    "high": "🔥",
    "medium": "⚠️",
    "low": "✅",
}


# ============================================================================
# MESSAGE FORMATTING
# ============================================================================

def format_streak_alert(assessment: RiskAssessment) -> str:
    """
    Format an alert message for an at-risk streak

    Args:
        assessment: Risk assessment from the prediction engine

    Returns:
        Formatted alert message
    """
    level = str(assessment.risk_level)
    icon = RISK_ICONS.get(level, "")
    message = f"{icon} {level.upper()} RISK: {assessment.habit_name}"

    if assessment.factors:
        message += f"\n\n{assessment.factors[0]}"
    if assessment.suggestions:
        message += f"\n{assessment.suggestions[0]}"

    message += f"\n\nChance of keeping it going: {round(assessment.continuation_probability * 100)}%"
    return message


def format_alert_digest(assessments: List[RiskAssessment]) -> str:
    """
    Format a one-message digest of every alert

    Returns:
        Digest text, or an all-clear line when there are no alerts
    """
    if not assessments:
        return "All streaks are safe today."
    lines = [f"{len(assessments)} streak(s) need attention today:"]
    for a in assessments:
        lines.append(f"- {a.habit_name}: {a.current_streak}-day streak ({a.risk_level} risk)")
    return "\n".join(lines)


# ============================================================================
# NOTIFICATION SENDING
# ============================================================================

class NotificationService:
    """
    Service for sending notifications via a pluggable channel
    """

    def __init__(self, send_callback: Optional[Callable[[str], bool]] = None):
        """
        Initialize notification service

        Args:
            send_callback: Optional callback function for sending messages
                          Should have signature: callback(message: str) -> bool
        """
        self.send_callback = send_callback

    def send_notification(self, message: str) -> bool:
        """
        Send a notification message

        Args:
            message: The message to send

        Returns:
            True if sent successfully, False otherwise
        """
        if not self.send_callback:
            logger.info(f"[NOTIFY] No channel configured, alert logged only:\n{message}")
            return False

        try:
            result = bool(self.send_callback(message))
            if result:
                logger.info("[NOTIFY] Notification sent successfully")
            else:
                logger.warning("[NOTIFY] Notification send callback returned False")
            return result
        except Exception as e:
            logger.error(f"[NOTIFY] Failed to send notification: {e}")
            return False

    def send_streak_alert(self, assessment: RiskAssessment) -> bool:
        """
        Send one streak alert

        Returns:
            True if sent successfully, False otherwise
        """
        return self.send_notification(format_streak_alert(assessment))
