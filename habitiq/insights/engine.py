"""Insights Engine - frequency statistics over the note collection."""
from __future__ import annotations

import logging
from collections import Counter
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

import numpy as np
from numpy.typing import NDArray

from habitiq.constants import (
    ACTIVITY_DAYS,
    LATE_HOURS,
    OVERVIEW_TAGS,
    PATTERN_MAX_CONFIDENCE,
    PATTERN_MIN_FREQUENCY,
    PEAK_HOUR_COUNT,
    REMINDER_HINT_WORDS,
)
from habitiq.models import (
    Insights,
    Note,
    NoteType,
    Overview,
    Pattern,
    Suggestion,
    SuggestionType,
)

logger = logging.getLogger(__name__)


def parse_timestamp(value: str) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp; ``None`` when malformed."""
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (ValueError, TypeError, AttributeError):
        return None


def hour_histogram(timestamps: Iterable[datetime]) -> NDArray[np.int64]:
    """Note counts per hour of day (length 24)."""
    hours = [ts.hour for ts in timestamps]
    return np.bincount(np.array(hours, dtype=np.int64), minlength=24)


def peak_hours(histogram: NDArray[np.int64], top: int = PEAK_HOUR_COUNT) -> list[int]:
    """Busiest hours, most notes first; ties go to the earlier hour."""
    order = np.argsort(-histogram, kind="stable")
    return [int(h) for h in order[:top] if histogram[h] > 0]


def weekly_activity(
    timestamps: Iterable[datetime],
    now: datetime,
    days: int = ACTIVITY_DAYS,
) -> NDArray[np.int64]:
    """Notes per calendar day for the last ``days`` days, oldest first."""
    window = [(now - timedelta(days=i)).date() for i in range(days - 1, -1, -1)]
    index = {day: i for i, day in enumerate(window)}
    counts = np.zeros(days, dtype=np.int64)

    for ts in timestamps:
        if ts.tzinfo is not None and now.tzinfo is not None:
            ts = ts.astimezone(now.tzinfo)
        if (i := index.get(ts.date())) is not None:
            counts[i] += 1
    return counts


def tag_frequencies(notes: list[Note]) -> Counter:
    """How many notes carry each tag, in first-seen order."""
    freq: Counter = Counter()
    for note in notes:
        freq.update(note.tags)
    return freq


def find_patterns(notes: list[Note], freq: Counter) -> list[Pattern]:
    """Tags that recur often enough to count as a habit pattern."""
    patterns = [
        Pattern(
            type=tag,
            frequency=count,
            trend="stable",
            last_seen=next((n.timestamp for n in notes if tag in n.tags), ""),
            confidence=min(count / len(notes) * 100, PATTERN_MAX_CONFIDENCE),
        )
        for tag, count in freq.items()
        if count >= PATTERN_MIN_FREQUENCY
    ]
    return sorted(patterns, key=lambda p: -p.confidence)


def build_suggestions(notes: list[Note], freq: Counter, peaks: list[int]) -> list[Suggestion]:
    suggestions = []

    if freq["fitness"] >= 2:
        suggestions.append(Suggestion(
            id="fitness-consistency",
            type=SuggestionType.HABIT,
            title="Build a consistent fitness routine",
            description=(
                f"You've mentioned fitness {freq['fitness']} times. Consider setting a "
                "specific time for workouts to build consistency."
            ),
            confidence=85,
            based_on=["fitness pattern detected"],
        ))

    if freq["hydration"] >= 1:
        suggestions.append(Suggestion(
            id="hydration-reminder",
            type=SuggestionType.REMINDER,
            title="Stay hydrated throughout the day",
            description="Set up regular water breaks every 2 hours to maintain optimal hydration.",
            confidence=75,
            based_on=["hydration mentions"],
        ))

    if any(hour in peaks for hour in LATE_HOURS):
        suggestions.append(Suggestion(
            id="evening-routine",
            type=SuggestionType.OPTIMIZATION,
            title="Optimize your evening routine",
            description=(
                "You seem most active in the evening. Consider winding down earlier "
                "for better sleep."
            ),
            confidence=70,
            based_on=["late night activity pattern"],
        ))

    if len(notes) >= 5 and freq["sleep"]:
        suggestions.append(Suggestion(
            id="sleep-tracking",
            type=SuggestionType.HABIT,
            title="Track your sleep patterns",
            description=(
                "You're thinking about sleep quality. Consider keeping a sleep journal "
                "for better insights."
            ),
            confidence=80,
            based_on=["sleep-related notes"],
        ))

    suggestions.append(Suggestion(
        id="progress-celebration",
        type=SuggestionType.MOTIVATION,
        title="Celebrate your progress!",
        description=(
            f"You've captured {len(notes)} thoughts and habits. "
            "You're building great self-awareness!"
        ),
        confidence=90,
        based_on=["overall activity"],
        actionable=False,
    ))

    return sorted(suggestions, key=lambda s: -s.confidence)


def analyze_notes(notes: Iterable[Note], now: Optional[datetime] = None) -> Optional[Insights]:
    """
    Compute habit insights for a note collection.

    Returns None when there are no notes. Notes with malformed timestamps
    still count towards tag statistics but not towards time statistics.
    """
    notes = list(notes)
    if not notes:
        return None

    now = now or datetime.now(timezone.utc)
    timestamps = [ts for ts in (parse_timestamp(n.timestamp) for n in notes) if ts]
    if len(timestamps) < len(notes):
        logger.debug(f"{len(notes) - len(timestamps)} notes have unparseable timestamps")

    freq = tag_frequencies(notes)
    patterns = find_patterns(notes, freq)
    peaks = peak_hours(hour_histogram(timestamps))
    activity = weekly_activity(timestamps, now)

    habit_score = min(len(notes) * 10 + len(freq) * 15 + len(patterns) * 20, 100)
    consistency = float(np.count_nonzero(activity)) / ACTIVITY_DAYS * 100

    return Insights(
        patterns=patterns,
        suggestions=build_suggestions(notes, freq, peaks),
        habit_score=habit_score,
        consistency=consistency,
        weekly_activity=[int(c) for c in activity],
        peak_hours=peaks,
    )


def overview(notes: Iterable[Note]) -> Overview:
    """Headline counts for the dashboard."""
    notes = list(notes)
    freq = tag_frequencies(notes)
    return Overview(
        total_notes=len(notes),
        voice_notes=sum(1 for n in notes if n.type == NoteType.VOICE),
        text_notes=sum(1 for n in notes if n.type == NoteType.TEXT),
        reminder_notes=sum(
            1 for n in notes
            if any(
                word in n.content.lower() or word in (n.transcript or "").lower()
                for word in REMINDER_HINT_WORDS
            )
        ),
        top_categories={tag: freq[tag] for tag in OVERVIEW_TAGS if freq[tag] > 0},
    )
