"""
Scheduler Job Definitions
Contains the periodic streak alert check
"""
import logging
from typing import Callable, List, Optional

from app.models.insight import RiskAssessment
from app.services.analytics.predictions import streak_alerts
from app.services.habits import repository
from app.services.notifications.service import NotificationService
from app.utils.dates import today as get_today

logger = logging.getLogger(__name__)

# Habit ids already alerted, per date, so each streak is announced once a day
_alerted: dict = {}


def check_streak_alerts(
    send_callback: Optional[Callable[[str], bool]] = None,
    today: Optional[str] = None
) -> List[RiskAssessment]:
    """
    Evaluate streak alerts over the stored habits and notify new ones

    Args:
        send_callback: Optional delivery channel for the notification service
        today: Optional injected reference date

    Returns:
        Alerts that were newly announced on this run; alerts whose delivery
        failed are left out and retried on the next run of the same day
    """
    target = today or get_today()
    try:
        logger.info("[SCHEDULER] Checking for streaks at risk...")
        alerts = streak_alerts(repository.get_all_habits(), target)

        seen = _alerted.setdefault(target, set())
        for stale in [d for d in _alerted if d != target]:
            del _alerted[stale]

        fresh = [a for a in alerts if a.habit_id not in seen]
        if not fresh:
            logger.info("[SCHEDULER] No new streak alerts")
            return []

        notification_service = NotificationService(send_callback)
        announced = []
        for alert in fresh:
            sent = notification_service.send_streak_alert(alert)
            # A failed delivery is retried on the next run of the same day
            if sent or send_callback is None:
                seen.add(alert.habit_id)
                announced.append(alert)

        logger.info(f"[SCHEDULER] Announced {len(announced)} of {len(fresh)} streak alert(s)")
        return announced

    except Exception as e:
        logger.error(f"[SCHEDULER] Error in check_streak_alerts: {e}", exc_info=True)
        return []


def reset_alert_history() -> None:
    _alerted.clear()
