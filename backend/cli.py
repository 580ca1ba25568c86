#!/usr/bin/env python3
"""
Habit Tracker CLI - Chat with the habit coach and check streaks from the terminal
"""
import os
import requests
from typing import Any, Dict, Optional
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Backend API base URL
API_BASE = os.getenv("API_BASE_URL", "http://localhost:8000")

MOOD_CHOICES = ("terrible", "bad", "neutral", "good", "excellent")
RISK_MARKERS = {"high": "!!", "medium": "! ", "low": "  "}


def send_chat_message(message: str) -> str:
    """Send free text to the coach and return the reply"""
    response = requests.post(f"{API_BASE}/chat/message", json={"message": message})
    response.raise_for_status()
    data = response.json()
    reply = data.get("response", "")
    if data.get("fallback"):
        reply += "\n(offline coach)"
    return reply


def format_prediction(prediction: Dict[str, Any]) -> str:
    """One status line per habit"""
    marker = RISK_MARKERS.get(prediction.get("risk_level"), "  ")
    line = (
        f"{marker} {prediction.get('habit_name') or prediction['habit_id']}: "
        f"{prediction.get('current_streak', 0)}-day streak, "
        f"{prediction.get('risk_level')} risk, "
        f"{round(prediction.get('continuation_probability', 0) * 100)}% to continue"
    )
    for suggestion in prediction.get("suggestions", []):
        line += f"\n     -> {suggestion}"
    return line


def show_status() -> str:
    """Ranked streak risk assessments for every active habit"""
    response = requests.get(f"{API_BASE}/insights/predict")
    response.raise_for_status()
    predictions = response.json().get("predictions", [])

    if not predictions:
        return "No active habits yet. Add one to start a streak!"
    return "\n".join(format_prediction(p) for p in predictions)


def log_mood(mood: str, note: Optional[str] = None) -> str:
    """Log a mood for today"""
    if mood not in MOOD_CHOICES:
        return f"Unknown mood '{mood}'. Choose one of: {', '.join(MOOD_CHOICES)}"

    payload = {"mood": mood}
    if note:
        payload["note"] = note

    response = requests.post(f"{API_BASE}/moods", json=payload)
    response.raise_for_status()
    entry = response.json().get("mood", {})
    return f"Logged '{entry.get('mood', mood)}' for {entry.get('date', 'today')}"


def handle_command(user_input: str) -> str:
    """Route one line of input to a command or to the coach"""
    command, _, rest = user_input.partition(" ")
    command = command.lower()

    if command == "status":
        return show_status()
    if command == "mood":
        mood, _, note = rest.strip().partition(" ")
        if not mood:
            return f"Usage: mood <{'|'.join(MOOD_CHOICES)}> [note]"
        return log_mood(mood.lower(), note.strip() or None)
    return send_chat_message(user_input)


def main():
    """Main CLI loop"""
    print("Habit Tracker CLI")
    print(f"Connected to: {API_BASE}")
    print("Commands: status, mood <type> [note]; anything else goes to the coach")
    print("Type 'quit' or 'exit' to leave\n")

    while True:
        try:
            user_input = input("> ").strip()

            if not user_input:
                continue

            if user_input.lower() in ("quit", "exit", "q"):
                print("Keep the streak alive!")
                break

            print(handle_command(user_input))
            print()

        except KeyboardInterrupt:
            print("\nKeep the streak alive!")
            break
        except EOFError:
            print("\nKeep the streak alive!")
            break
        except requests.RequestException as e:
            print(f"Could not reach the backend: {str(e)}\n")


if __name__ == "__main__":
    main()
