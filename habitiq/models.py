"""Pydantic models for notes, reminders and insights."""
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys (the stored note format)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Note Models ---

class NoteType(str, Enum):
    """How a note was captured."""
    TEXT = "text"
    VOICE = "voice"


class Note(CamelModel):
    """User-authored text or transcribed voice entry."""
    id: str
    content: str = ""
    transcript: Optional[str] = None
    timestamp: str  # ISO-8601, kept verbatim
    type: NoteType = NoteType.TEXT
    tags: list[str] = Field(default_factory=list)

    @field_validator("tags")
    @classmethod
    def _unique_tags(cls, tags: list[str]) -> list[str]:
        return list(dict.fromkeys(tags))

    @property
    def body(self) -> str:
        """Text used for analysis: the transcript when present, else content."""
        return self.transcript or self.content or ""


class NoteCreateRequest(BaseModel):
    """Request to add a typed note."""
    content: str


class VoiceNoteCreateRequest(BaseModel):
    """Request to add a transcribed voice note."""
    transcript: str


class NoteUpdateRequest(BaseModel):
    """Partial note edit."""
    content: Optional[str] = None
    tags: Optional[list[str]] = None


# --- Reminder Models ---

class Priority(str, Enum):
    """Coarse urgency bucket."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Reminder(CamelModel):
    """Actionable item derived from note text."""
    id: str
    note_id: str
    text: str
    extracted_from: str
    priority: Priority = Priority.MEDIUM
    category: str = "general"
    suggested_time: Optional[str] = None
    is_completed: bool = False
    is_dismissed: bool = False
    created_at: str

    @property
    def key(self) -> tuple[str, str]:
        """Identity used to carry user flags across recomputation."""
        return self.note_id, self.text.strip()


# --- Insight Models ---

class Pattern(CamelModel):
    """Recurring tag across the note collection."""
    type: str
    frequency: int
    trend: str = "stable"
    last_seen: str = ""
    confidence: float


class SuggestionType(str, Enum):
    HABIT = "habit"
    OPTIMIZATION = "optimization"
    MOTIVATION = "motivation"
    REMINDER = "reminder"


class Suggestion(CamelModel):
    """Rule-based advice derived from note statistics."""
    id: str
    type: SuggestionType
    title: str
    description: str
    confidence: float
    based_on: list[str] = Field(default_factory=list)
    actionable: bool = True


class Insights(CamelModel):
    """Aggregate statistics over the note collection."""
    patterns: list[Pattern] = Field(default_factory=list)
    suggestions: list[Suggestion] = Field(default_factory=list)
    habit_score: int = 0
    consistency: float = 0.0
    weekly_activity: list[int] = Field(default_factory=lambda: [0] * 7)
    peak_hours: list[int] = Field(default_factory=list)


class Overview(CamelModel):
    """Headline counts for the dashboard."""
    total_notes: int = 0
    voice_notes: int = 0
    text_notes: int = 0
    reminder_notes: int = 0
    top_categories: dict[str, int] = Field(default_factory=dict)
