"""Suggestion Engine - mood-aware task suggestions

Philosophy:
    Meet the user where they are. A low-mood evening is not the time
    to suggest a deep clean; a great-mood morning might be.

Components:
    engine.py: Filter templates by mood range, score, rank, truncate
        - Mood compatibility: how centred the mood is in the template's range
        - Time-of-day fit: category vs. morning/afternoon/evening/night
        - User history: how often this template was accepted at similar moods
        - Energy fit: template difficulty vs. energy tier derived from mood

Flow:
    offer_suggestions() ranks templates and records one history row per
    surfaced template. accept_suggestion() turns the chosen one into a task
    and marks the *same* history row accepted, so the history score learns
    from real outcomes.

Usage:
    from domotive.app import build_services

    services = build_services()
    for suggestion in services.engine.offer_suggestions(mood_value=7):
        print(suggestion.template.title, round(suggestion.score.total, 3))
"""

# Energy fit table: (tier, inclusive difficulty range) -> score, first match wins
ENERGY_FIT = (
    ("low", (1, 2), 1.0),
    ("medium", (2, 4), 1.0),
    ("high", (3, 5), 1.0),
    ("low", (3, 5), 0.3),
    ("high", (1, 2), 0.6),
)
ENERGY_FIT_DEFAULT = 0.5

__all__ = ["ENERGY_FIT", "ENERGY_FIT_DEFAULT"]
