"""
Tool: Task Engine
Purpose: Suggest task templates that suit the user's current mood and time of day

Scoring (each sub-score in [0, 1], weights from args/domotive.yaml):
    0.40  mood compatibility  - 1 at the centre of the matching mood range, 0 at its edges
    0.20  time-of-day fit     - category/time lookup table, 0.7 when unlisted
    0.25  user history        - accepted / offered at moods within +/-1, 0.5 with no history
    0.15  energy fit          - template difficulty vs. energy tier of the mood

Templates whose mood range does not contain the mood are dropped before
scoring. A template with no usable mood range matches every mood and gets a
neutral mood score. Ranking is a stable sort, so equal scores keep catalog
(title) order.

Usage:
    engine = TaskEngine(store, store, store)
    templates = engine.get_suggested_tasks(mood_value=6, time_of_day=TimeOfDay.EVENING)

Dependencies:
    - domotive.storage (repositories)
    - domotive.tasks.factory (template -> task)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Iterable, Optional

from domotive.config_models import SuggestionsConfig, TasksConfig
from domotive.exceptions import (
    StorageError,
    SuggestionAlreadyAcceptedError,
    SuggestionNotFoundError,
    TemplateNotFoundError,
)
from domotive.labels.manager import LabelManager
from domotive.logging_config import get_logger
from domotive.models import EnergyTier, SuggestionRecord, Task, TaskTemplate, TimeOfDay
from domotive.storage.base import SuggestionRepository, TaskRepository, TemplateRepository
from domotive.suggestions import ENERGY_FIT, ENERGY_FIT_DEFAULT
from domotive.tasks.factory import create_task

logger = get_logger(__name__)


# =============================================================================
# Mood ranges
# =============================================================================

@dataclass(frozen=True)
class MoodSubRange:
    low: int
    high: int

    def contains(self, mood_value: int) -> bool:
        return self.low <= mood_value <= self.high

    def compatibility(self, mood_value: int) -> float:
        """1.0 at the centre, falling linearly to 0.0 at either bound."""
        if not self.contains(mood_value):
            return 0.0
        half_width = (self.high - self.low) / 2
        if half_width == 0:
            return 1.0
        center = (self.low + self.high) / 2
        return 1.0 - abs(mood_value - center) / half_width


def _parse_token(token: str) -> Optional[MoodSubRange]:
    token = token.strip()
    if "-" in token:
        parts = token.split("-")
        if len(parts) != 2:
            return None
        try:
            low, high = int(parts[0].strip()), int(parts[1].strip())
        except ValueError:
            return None
    else:
        try:
            low = high = int(token)
        except ValueError:
            return None
    if low > high:
        return None
    return MoodSubRange(low, high)


def parse_mood_range(mood_range: Optional[str]) -> list[MoodSubRange]:
    """
    Parse "1-4", "5" or "1-3, 7-10" into sub-ranges.

    Unparsable tokens are skipped. An empty result means the template
    matches any mood.
    """
    if not mood_range:
        return []
    parsed = (_parse_token(token) for token in mood_range.split(","))
    return [r for r in parsed if r is not None]


def normalize_category(category: Optional[str]) -> str:
    """
    'Self Care', 'self-care' and 'SelfCare' all become 'selfcare'.

    The built-in "Self Care" templates therefore get the evening bonus of the
    `selfcare` row. The earlier app compared lowercased names exactly and
    scored them 0.7, so their ranking differs from it on purpose.
    """
    if not category:
        return ""
    return "".join(ch for ch in category.lower() if ch not in " -_")


# =============================================================================
# Sub-scores
# =============================================================================

def matches_mood(template: TaskTemplate, mood_value: int) -> bool:
    ranges = parse_mood_range(template.mood_range)
    if not ranges:
        return True
    return any(r.contains(mood_value) for r in ranges)


def mood_compatibility_score(
    template: TaskTemplate, mood_value: int, neutral: float = 0.5
) -> float:
    ranges = parse_mood_range(template.mood_range)
    if not ranges:
        return neutral
    for r in ranges:
        if r.contains(mood_value):
            return r.compatibility(mood_value)
    return 0.0


def time_of_day_score(
    template: TaskTemplate,
    time_of_day: TimeOfDay,
    table: dict[str, dict[str, float]],
    default: float = 0.7,
) -> float:
    category = normalize_category(template.category)
    if not category:
        return default
    for key, by_time in table.items():
        if normalize_category(key) == category:
            return by_time.get(time_of_day.value, default)
    return default


def history_score(
    template: TaskTemplate,
    mood_value: int,
    history: Iterable[SuggestionRecord],
    band: int = 1,
    neutral: float = 0.5,
) -> float:
    relevant = [
        r for r in history
        if r.template_id == template.id and abs(r.mood_value - mood_value) <= band
    ]
    if not relevant:
        return neutral
    accepted = sum(1 for r in relevant if r.accepted)
    return accepted / len(relevant)


def energy_score(template: TaskTemplate, mood_value: int) -> float:
    tier = EnergyTier.for_mood(mood_value).value
    for fit_tier, (low, high), score in ENERGY_FIT:
        if tier == fit_tier and low <= template.difficulty <= high:
            return score
    return ENERGY_FIT_DEFAULT


# =============================================================================
# Scoring and ranking
# =============================================================================

@dataclass
class ScoreBreakdown:
    mood: float
    time_of_day: float
    history: float
    energy: float
    total: float

    def to_dict(self) -> dict[str, float]:
        return {
            "mood": round(self.mood, 4),
            "time_of_day": round(self.time_of_day, 4),
            "history": round(self.history, 4),
            "energy": round(self.energy, 4),
            "total": round(self.total, 4),
        }


def score_template(
    template: TaskTemplate,
    mood_value: int,
    time_of_day: TimeOfDay,
    history: Iterable[SuggestionRecord] = (),
    config: Optional[SuggestionsConfig] = None,
) -> ScoreBreakdown:
    config = config or SuggestionsConfig()
    weights = config.weights

    mood = mood_compatibility_score(template, mood_value, config.neutral_mood_score)
    tod = time_of_day_score(
        template, time_of_day, config.time_of_day_fit, config.time_of_day_default
    )
    hist = history_score(
        template, mood_value, history, config.history_mood_band, config.neutral_history_score
    )
    energy = energy_score(template, mood_value)

    total = (
        mood * weights.mood
        + tod * weights.time_of_day
        + hist * weights.history
        + energy * weights.energy
    )
    return ScoreBreakdown(mood=mood, time_of_day=tod, history=hist, energy=energy, total=total)


def rank_templates(
    mood_value: int,
    time_of_day: TimeOfDay,
    max_suggestions: int,
    catalog: Iterable[TaskTemplate],
    history: Iterable[SuggestionRecord] = (),
    config: Optional[SuggestionsConfig] = None,
) -> list[tuple[TaskTemplate, ScoreBreakdown]]:
    """Filter, score and rank; returns (template, score) pairs best first."""
    history = list(history)
    candidates = [t for t in catalog if matches_mood(t, mood_value)]
    scored = [
        (t, score_template(t, mood_value, time_of_day, history, config)) for t in candidates
    ]
    # sorted() is stable: ties keep catalog order
    scored = sorted(scored, key=lambda pair: pair[1].total, reverse=True)
    return scored[:max(max_suggestions, 0)]


def get_suggested_tasks(
    mood_value: int,
    time_of_day: TimeOfDay,
    max_suggestions: int,
    catalog: Iterable[TaskTemplate],
    history: Iterable[SuggestionRecord] = (),
    config: Optional[SuggestionsConfig] = None,
) -> list[TaskTemplate]:
    """Templates suited to the mood and time of day, best first. No side effects."""
    ranked = rank_templates(mood_value, time_of_day, max_suggestions, catalog, history, config)
    return [template for template, _ in ranked]


# =============================================================================
# Service object
# =============================================================================

@dataclass
class Suggestion:
    """A surfaced template together with the history row that tracks it."""

    template: TaskTemplate
    score: ScoreBreakdown
    record: Optional[SuggestionRecord] = None

    @property
    def suggestion_id(self) -> Optional[str]:
        return self.record.id if self.record else None

    def to_dict(self) -> dict[str, Any]:
        return {
            "suggestion_id": self.suggestion_id,
            "template": self.template.to_dict(),
            "score": self.score.to_dict(),
        }


class TaskEngine:
    """
    Repository-backed suggestion service.

    Construct once (see domotive.app.build_services) and pass it to whatever
    needs suggestions.
    """

    def __init__(
        self,
        templates: TemplateRepository,
        suggestions: SuggestionRepository,
        tasks: TaskRepository,
        config: Optional[SuggestionsConfig] = None,
        tasks_config: Optional[TasksConfig] = None,
        clock: Callable[[], datetime] = datetime.now,
        labels: Optional[LabelManager] = None,
    ):
        self.templates = templates
        self.suggestions = suggestions
        self.tasks = tasks
        self.config = config or SuggestionsConfig()
        self.tasks_config = tasks_config or TasksConfig()
        self.clock = clock
        self.labels = labels

    def current_time_of_day(self) -> TimeOfDay:
        return TimeOfDay.at(self.clock())

    def _history_for(self, catalog: list[TaskTemplate], mood_value: int) -> list[SuggestionRecord]:
        band = self.config.history_mood_band
        history: list[SuggestionRecord] = []
        for template in catalog:
            history.extend(
                self.suggestions.find_by_mood_band(template.id, mood_value - band, mood_value + band)
            )
        return history

    def rank(
        self,
        mood_value: int,
        time_of_day: Optional[TimeOfDay] = None,
        max_suggestions: Optional[int] = None,
    ) -> list[tuple[TaskTemplate, ScoreBreakdown]]:
        time_of_day = time_of_day or self.current_time_of_day()
        if max_suggestions is None:
            max_suggestions = self.config.max_suggestions

        catalog = self.templates.all_templates()
        if not catalog:
            logger.info("No task templates available - nothing to suggest")
            return []

        candidates = [t for t in catalog if matches_mood(t, mood_value)]
        history = self._history_for(candidates, mood_value)
        ranked = rank_templates(
            mood_value, time_of_day, max_suggestions, candidates, history, self.config
        )
        logger.debug(
            f"Ranked {len(candidates)} of {len(catalog)} templates",
            mood_value=mood_value,
            time_of_day=time_of_day.value,
            returned=len(ranked),
        )
        return ranked

    def get_suggested_tasks(
        self,
        mood_value: int,
        time_of_day: Optional[TimeOfDay] = None,
        max_suggestions: Optional[int] = None,
    ) -> list[TaskTemplate]:
        return [t for t, _ in self.rank(mood_value, time_of_day, max_suggestions)]

    def score(
        self, template: TaskTemplate, mood_value: int, time_of_day: Optional[TimeOfDay] = None
    ) -> ScoreBreakdown:
        time_of_day = time_of_day or self.current_time_of_day()
        history = self._history_for([template], mood_value)
        return score_template(template, mood_value, time_of_day, history, self.config)

    # -------------------------------------------------------------------------
    # History tracking
    # -------------------------------------------------------------------------

    def record_suggestion(
        self,
        template: TaskTemplate,
        mood_value: int,
        time_of_day: Optional[TimeOfDay] = None,
    ) -> SuggestionRecord:
        """Append a not-yet-accepted history row. Best effort: storage errors are logged."""
        record = SuggestionRecord(
            template_id=template.id,
            mood_value=mood_value,
            time_of_day=time_of_day or self.current_time_of_day(),
            suggested_at=self.clock(),
        )
        try:
            self.suggestions.add_suggestion(record)
        except StorageError as e:
            logger.warning(f"Suggestion for {template.id} not recorded: {e.message}")
        return record

    def record_acceptance(self, suggestion_id: str) -> bool:
        """Mark a suggestion accepted. Unknown ids are ignored."""
        record = self.suggestions.find_suggestion(suggestion_id)
        if record is None:
            logger.debug(f"No suggestion {suggestion_id} to mark accepted")
            return False

        record.accepted = True
        record.responded_at = self.clock()
        try:
            self.suggestions.update_suggestion(record)
        except StorageError as e:
            logger.warning(f"Acceptance of {suggestion_id} not recorded: {e.message}")
            return False
        return True

    # -------------------------------------------------------------------------
    # Suggestion cycle
    # -------------------------------------------------------------------------

    def create_task(self, template: TaskTemplate) -> Task:
        return create_task(template, now=self.clock(), due_offset_days=self.tasks_config.due_offset_days)

    def offer_suggestions(
        self,
        mood_value: int,
        time_of_day: Optional[TimeOfDay] = None,
        max_suggestions: Optional[int] = None,
        record: Optional[bool] = None,
    ) -> list[Suggestion]:
        """Rank templates and record one history row per surfaced template."""
        time_of_day = time_of_day or self.current_time_of_day()
        if record is None:
            record = self.config.record_suggestions

        offered = []
        for template, score in self.rank(mood_value, time_of_day, max_suggestions):
            row = self.record_suggestion(template, mood_value, time_of_day) if record else None
            offered.append(Suggestion(template=template, score=score, record=row))
        return offered

    def accept_suggestion(self, suggestion_id: str) -> Task:
        """
        Turn a previously offered suggestion into a stored task.

        Raises:
            SuggestionNotFoundError: no history row with this id
            SuggestionAlreadyAcceptedError: the suggestion already became a task
            TemplateNotFoundError: the template was deleted after being suggested
            StorageError: the task could not be saved
        """
        record = self.suggestions.find_suggestion(suggestion_id)
        if record is None:
            raise SuggestionNotFoundError(suggestion_id)
        # a history row is answered once
        if record.accepted:
            raise SuggestionAlreadyAcceptedError(suggestion_id)

        template = self.templates.find_template(record.template_id)
        if template is None:
            raise TemplateNotFoundError(record.template_id)

        task = self.create_task(template)
        self.tasks.add_task(task)
        if self.labels is not None and task.labels:
            self.labels.record_usage(task.labels)
        self.record_acceptance(suggestion_id)
        logger.info(f"Accepted suggestion {suggestion_id} as task {task.id}")
        return task
