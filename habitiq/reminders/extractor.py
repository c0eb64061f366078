"""
Reminder Extraction.

Derives reminders from note text using pattern matching. Phrases like
"remind me to...", "need to...", "todo: ..." and habit topics (fitness,
hydration, sleep, mindfulness, learning) are captured, scored by keyword,
deduplicated by edit similarity and ordered by priority.
"""
from __future__ import annotations

import logging
import re
import uuid
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Iterator, Optional

from habitiq.constants import (
    CATEGORY_PATTERNS,
    CONTEXT_WINDOW,
    DEFAULT_CATEGORY,
    HIGH_PRIORITY_WORDS,
    LOW_PRIORITY_WORDS,
    MIN_REMINDER_LENGTH,
    PRIORITY_WEIGHTS,
    REMINDER_PATTERNS,
    SIMILARITY_THRESHOLD,
    TIME_HINTS,
)
from habitiq.models import Note, Priority, Reminder
from habitiq.reminders.similarity import similarity

logger = logging.getLogger(__name__)

_REMINDER_NAMESPACE = uuid.UUID("6f1c8a52-3b7e-4d0a-9c44-1e2f5a7b9d30")


@dataclass(frozen=True, slots=True)
class ReminderPattern:
    """Compiled regex pattern for reminder detection."""
    regex: re.Pattern
    name: str
    first_only: bool


@lru_cache(maxsize=1)
def _get_compiled_patterns() -> tuple[ReminderPattern, ...]:
    """Get pre-compiled patterns (cached for performance)."""
    return tuple(
        ReminderPattern(re.compile(p, re.IGNORECASE), name, kind == "topic")
        for name, p, kind in REMINDER_PATTERNS
    )


@lru_cache(maxsize=1)
def _get_category_patterns() -> tuple[tuple[str, re.Pattern], ...]:
    return tuple((category, re.compile(p)) for category, p in CATEGORY_PATTERNS)


def determine_priority(text: str) -> Priority:
    """High-priority words win over low-priority ones."""
    lower = text.lower()
    if any(word in lower for word in HIGH_PRIORITY_WORDS):
        return Priority.HIGH
    if any(word in lower for word in LOW_PRIORITY_WORDS):
        return Priority.LOW
    return Priority.MEDIUM


def categorize(text: str) -> str:
    """Return the first keyword group that matches, else the default category."""
    lower = text.lower()
    for category, regex in _get_category_patterns():
        if regex.search(lower):
            return category
    return DEFAULT_CATEGORY


def extract_time_hint(text: str) -> Optional[str]:
    """First time phrase mentioned anywhere in the text."""
    lower = text.lower()
    for hint in TIME_HINTS:
        if hint in lower:
            return hint
    return None


def reminder_id(note_id: str, text: str) -> str:
    """Stable id so recomputing an unchanged note set yields the same ids."""
    return str(uuid.uuid5(_REMINDER_NAMESPACE, f"{note_id}\x00{text}"))


def _overlapping(start: int, end: int, claimed: list[tuple[int, int, str]]) -> list[str]:
    """Categories of the claimed spans that intersect ``[start, end)``."""
    return [category for c_start, c_end, category in claimed if start < c_end and c_start < end]


def detect_reminders(note: Note) -> Iterator[Reminder]:
    """
    Yield candidate reminders for a single note, in pattern order.

    A phrase match that overlaps text already claimed by an earlier
    candidate of the same note is skipped. A topic match is skipped only
    when the phrase covering it already has that topic's category, so
    "drink water and sleep early" still surfaces sleep. Topic patterns
    yield at most one candidate.
    """
    body = note.body
    if not body.strip():
        return

    patterns = _get_compiled_patterns()
    time_hint = extract_time_hint(body)
    claimed: list[tuple[int, int, str]] = []

    for pattern in patterns:
        for match in pattern.regex.finditer(body):
            start, end = match.span()
            covering = _overlapping(start, end, claimed)
            if covering and (not pattern.first_only or pattern.name in covering):
                continue

            text = (match.group(1) or match.group(0)).strip()
            if len(text) <= MIN_REMINDER_LENGTH:
                continue

            category = categorize(text)
            claimed.append((start, end, category))
            yield Reminder(
                id=reminder_id(note.id, text),
                note_id=note.id,
                text=text,
                extracted_from=body[max(0, start - CONTEXT_WINDOW):end + CONTEXT_WINDOW],
                priority=determine_priority(text),
                category=category,
                suggested_time=time_hint,
                created_at=note.timestamp,
            )

            if pattern.first_only:
                break


def deduplicate(candidates: Iterable[Reminder]) -> list[Reminder]:
    """Greedy near-duplicate removal; the first occurrence wins."""
    kept: list[Reminder] = []
    for candidate in candidates:
        if any(similarity(k.text, candidate.text) > SIMILARITY_THRESHOLD for k in kept):
            continue
        kept.append(candidate)
    return kept


def sort_by_priority(reminders: Iterable[Reminder]) -> list[Reminder]:
    """Stable sort, high priority first."""
    return sorted(reminders, key=lambda r: -PRIORITY_WEIGHTS[r.priority.value])


def merge_status(reminders: list[Reminder], previous: Iterable[Reminder]) -> list[Reminder]:
    """Carry completion and dismissal flags over from a previous reminder set."""
    existing = {r.key: r for r in previous}
    merged = []
    for reminder in reminders:
        if old := existing.get(reminder.key):
            reminder = reminder.model_copy(
                update={"is_completed": old.is_completed, "is_dismissed": old.is_dismissed}
            )
        merged.append(reminder)
    return merged


def extract_reminders(
    notes: Iterable[Note],
    previous: Optional[Iterable[Reminder]] = None,
) -> list[Reminder]:
    """
    Derive the full reminder list from a note collection.

    Deterministic for a given input; ``previous`` only contributes the
    completed/dismissed flags of reminders that are found again.
    """
    notes = list(notes)
    candidates = [c for note in notes for c in detect_reminders(note)]
    reminders = sort_by_priority(deduplicate(candidates))

    if previous is not None:
        reminders = merge_status(reminders, previous)

    logger.debug(
        f"Extracted {len(reminders)} reminders from {len(notes)} notes "
        f"({len(candidates)} candidates)"
    )
    return reminders
