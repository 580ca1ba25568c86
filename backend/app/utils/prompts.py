"""
Prompts and canned replies for the habit coach
"""
from typing import Any, Dict, List

COACH_SYSTEM_PROMPT = """You are a helpful habit tracking coach. Give personalized advice based on the user's habit and mood data.

Tone:
1. Be encouraging, practical and concise.
2. Missing a day is not failure - focus on getting back on track, not on perfection.
3. Refer to the user's actual streaks and mood when they are given.

Keep replies under 300 words."""

# Keyword fallback table, checked in order against the lowercased message
FALLBACK_RESPONSES: List[tuple] = [
    (
        ("streak", "连续"),
        "Streaks are a great measure of consistency! The key to keeping one alive is not being too hard "
        "on yourself when you miss a day. Focus on getting back on track rather than on being perfect. "
        "Which habit's streak would you like to improve?"
    ),
    (
        ("habit", "习惯"),
        "Building habits is about starting small and staying consistent. I suggest:\n\n"
        "1. Focus on just 1-2 habits to begin with\n"
        "2. Make them so small you can't fail\n"
        "3. Stack them onto habits you already have\n"
        "4. Celebrate the small wins\n\n"
        "Which habits are you working on?"
    ),
    (
        ("mood", "情绪", "心情"),
        "Tracking your mood alongside your habits helps you see patterns. Notice which activities lift "
        "your mood and which drain you. That awareness helps you make better choices through the day."
    ),
    (
        ("tip", "help", "建议", "帮助"),
        "Here are some proven habit techniques:\n\n"
        "• The 2-minute rule: make a habit take less than two minutes to start\n"
        "• Implementation intentions: 'When [situation], I will [habit]'\n"
        "• Environment design: make good habits easy and bad habits hard\n"
        "• Visual tracking: mark completed days on a calendar\n\n"
        "Want me to go into more detail on any of these?"
    ),
    (
        ("thank", "谢谢", "感谢"),
        "You're welcome! Remember, building better habits is a journey, not a destination. "
        "Every day you try is a win. Keep going!"
    ),
]

DEFAULT_FALLBACK_RESPONSE = (
    "That's a great question! To give you personalized insights, keep logging your habits and mood "
    "in the app. Over time I can help spot patterns and offer tailored suggestions. Which part of "
    "habit building would you like to know more about?"
)


def get_fallback_response(message: str) -> str:
    """
    Canned reply chosen by keyword substring

    Args:
        message: The user's message

    Returns:
        Non-empty reply text
    """
    lower_msg = (message or "").lower()
    for keywords, response in FALLBACK_RESPONSES:
        if any(keyword in lower_msg for keyword in keywords):
            return response
    return DEFAULT_FALLBACK_RESPONSE


def format_coaching_context(context: Dict[str, Any]) -> str:
    """
    Format habit/mood context as a system message for the LLM.

    Args:
        context: Dict with date, habits (name/current_streak/completed_today),
                 average_mood and mood_trend

    Returns:
        Formatted context summary
    """
    habits = context.get("habits", [])
    context_summary = f"""
USER CONTEXT (auto-gathered):

Current Date: {context.get('date', 'N/A')}

Active Habits ({len(habits)} total):
"""
    for habit in habits:
        status = "✓ COMPLETED TODAY" if habit.get("completed_today") else "○ NOT YET TODAY"
        context_summary += (
            f"\n- {habit.get('name')} | Streak: {habit.get('current_streak', 0)} days"
            f" | Risk: {habit.get('risk_level', 'low')} | Status: {status}"
        )

    if context.get("average_mood"):
        context_summary += (
            f"\n\nMood (last 30 days): average {context['average_mood']}/5, "
            f"trend {context.get('mood_trend', 'stable')}"
        )

    return context_summary
