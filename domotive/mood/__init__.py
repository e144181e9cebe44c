"""Mood - self-reported mood log and journal

Components:
    manager.py: Log mood values (1-10) with tags; mood words and emoji
    journal.py: Free-text journal entries

The latest mood logged today is what the suggestion engine is usually fed.
"""

MIN_MOOD = 1
MAX_MOOD = 10

# value -> (word, emoji)
DEFAULT_MOOD_LABELS = {
    1: ("Terrible", "😭"),
    2: ("Very Bad", "😢"),
    3: ("Bad", "😔"),
    4: ("Poor", "😞"),
    5: ("Okay", "😐"),
    6: ("Good", "🙂"),
    7: ("Great", "😊"),
    8: ("Excellent", "😃"),
    9: ("Amazing", "😄"),
    10: ("Euphoric", "🤩"),
}

UNKNOWN_LABEL = "Unknown"
UNKNOWN_EMOJI = "❓"

__all__ = ["MIN_MOOD", "MAX_MOOD", "DEFAULT_MOOD_LABELS", "UNKNOWN_LABEL", "UNKNOWN_EMOJI"]
