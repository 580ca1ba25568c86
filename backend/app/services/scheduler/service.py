"""
Scheduler Service - Background scheduler lifecycle management
Handles starting, stopping, and configuring the APScheduler instance
"""
import logging
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from app.core.config import settings
from .jobs import check_streak_alerts

logger = logging.getLogger(__name__)

# Global scheduler instance
scheduler = None


def start_scheduler() -> bool:
    """
    Start the background scheduler
    Runs the streak alert check every ALERT_CHECK_INTERVAL_MINUTES

    Returns:
        True if the scheduler was started, False if disabled or already running
    """
    global scheduler

    if not settings.ALERTS_ENABLED:
        logger.info("Streak alerts disabled (ALERTS_ENABLED is off)")
        return False

    if scheduler is not None:
        logger.warning("Scheduler already running")
        return False

    scheduler = BackgroundScheduler()

    scheduler.add_job(
        func=check_streak_alerts,
        trigger=IntervalTrigger(minutes=settings.ALERT_CHECK_INTERVAL_MINUTES),
        id='streak_alert_check',
        name='Check streaks at risk',
        replace_existing=True
    )

    scheduler.start()
    logger.info(f"Scheduler started - checking streaks every {settings.ALERT_CHECK_INTERVAL_MINUTES} minutes")
    return True


def stop_scheduler():
    """Stop the background scheduler"""
    global scheduler

    if scheduler is not None:
        scheduler.shutdown()
        scheduler = None
        logger.info("Scheduler stopped")
