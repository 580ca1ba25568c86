"""Tests for app/services/notifications and app/services/scheduler

Streak alert formatting, delivery through a callback, the periodic check
job and the scheduler lifecycle.
"""
from unittest.mock import MagicMock, patch

from app.core.config import settings
from app.models.insight import RiskAssessment
from app.services.habits import service as habit_service
from app.services.notifications import NotificationService, format_alert_digest, format_streak_alert
from app.services.scheduler import jobs, start_scheduler, stop_scheduler
from tests.conftest import TODAY, date_range


def _assessment(**overrides):
    values = dict(
        habit_id="habit_1",
        habit_name="Run",
        current_streak=8,
        risk_level="medium",
        confidence=0.85,
        continuation_probability=0.72,
        factors=["Your 8-day streak needs attention"],
        suggestions=["Get back on track today"],
    )
    values.update(overrides)
    return RiskAssessment(**values)


def _seed_slipping_habit(name="Run"):
    habit = habit_service.add_habit(name, today="2024-03-01")
    for day in date_range("2024-03-07", "2024-03-14"):
        habit_service.toggle_completion(habit.id, day)
    return habit


class TestFormatting:
    """Tests for alert message templates."""

    def test_streak_alert(self):
        message = format_streak_alert(_assessment())

        assert message.startswith("⚠️ MEDIUM RISK: Run")
        assert "Your 8-day streak needs attention" in message
        assert "Get back on track today" in message
        assert message.endswith("Chance of keeping it going: 72%")

    def test_digest(self):
        digest = format_alert_digest([_assessment(), _assessment(habit_name="Read", current_streak=15, risk_level="high")])

        assert digest.splitlines() == [
            "2 streak(s) need attention today:",
            "- Run: 8-day streak (medium risk)",
            "- Read: 15-day streak (high risk)",
        ]

    def test_empty_digest(self):
        assert format_alert_digest([]) == "All streaks are safe today."


class TestNotificationService:
    """Tests for delivery through the callback."""

    def test_without_channel_only_logs(self):
        assert NotificationService().send_notification("hello") is False

    def test_callback_receives_message(self):
        callback = MagicMock(return_value=True)

        assert NotificationService(callback).send_streak_alert(_assessment()) is True
        callback.assert_called_once()
        assert "Run" in callback.call_args.args[0]

    def test_failing_callback(self):
        callback = MagicMock(side_effect=RuntimeError("channel down"))

        assert NotificationService(callback).send_notification("hello") is False


class TestCheckStreakAlerts:
    """Tests for the periodic job."""

    def test_announces_at_risk_streaks(self):
        habit = _seed_slipping_habit()
        habit_service.add_habit("Fresh", today="2024-03-01")
        callback = MagicMock(return_value=True)

        alerts = jobs.check_streak_alerts(callback, today=TODAY)

        assert [a.habit_id for a in alerts] == [habit.id]
        callback.assert_called_once()

    def test_each_habit_announced_once_per_day(self):
        _seed_slipping_habit()
        callback = MagicMock(return_value=True)

        jobs.check_streak_alerts(callback, today=TODAY)
        second = jobs.check_streak_alerts(callback, today=TODAY)

        assert second == []
        assert callback.call_count == 1

    def test_failed_delivery_retried_same_day(self):
        habit = _seed_slipping_habit()
        callback = MagicMock(side_effect=[False, True, True])

        first = jobs.check_streak_alerts(callback, today=TODAY)
        second = jobs.check_streak_alerts(callback, today=TODAY)
        third = jobs.check_streak_alerts(callback, today=TODAY)

        assert first == []
        assert [a.habit_id for a in second] == [habit.id]
        assert third == []
        assert callback.call_count == 2

    def test_new_day_announces_again(self):
        habit = _seed_slipping_habit()
        jobs.check_streak_alerts(today=TODAY)
        habit_service.toggle_completion(habit.id, TODAY)

        alerts = jobs.check_streak_alerts(today="2024-03-16")

        assert [a.current_streak for a in alerts] == [9]

    def test_storage_error_is_swallowed(self):
        with patch("app.services.scheduler.jobs.repository.get_all_habits", side_effect=RuntimeError("disk")):
            assert jobs.check_streak_alerts(today=TODAY) == []


class TestSchedulerLifecycle:
    """Tests for starting and stopping the background scheduler."""

    def test_disabled_by_default(self):
        assert start_scheduler() is False

    def test_start_and_stop(self, monkeypatch):
        monkeypatch.setattr(settings, "ALERTS_ENABLED", True)
        try:
            assert start_scheduler() is True
            assert start_scheduler() is False
        finally:
            stop_scheduler()
