"""Application constants.

The keyword lists and thresholds below are hand-tuned heuristics.
"""

APP_NAME = "HabitIQ"

# --- Reminder extraction ---

# Two reminder texts with a normalized edit similarity above this are duplicates
SIMILARITY_THRESHOLD = 0.7

# Candidates this short (or shorter) are dropped
MIN_REMINDER_LENGTH = 3

# Characters of surrounding text kept on each side of a match
CONTEXT_WINDOW = 20

# (name, regex, kind). "trigger" patterns yield every match in a note,
# "topic" patterns only the first one. Topic names double as categories.
# Only the labelled pattern is word-bounded; the rest match inside words
# ("already" hits read).
REMINDER_PATTERNS = (
    (
        "trigger",
        r"(?:remind me to|remember to|need to|have to|should|must|don'?t forget to)\s+(.+?)(?:\.|$|\n)",
        "trigger",
    ),
    (
        "labelled",
        r"\b((?:urgent|important|asap|todo|to-do|action item)\s*:\s*.+?)(?:\.|$|\n)",
        "trigger",
    ),
    (
        "scheduled",
        r"(?:tomorrow|today|later|this week|next week|this month).*?(exercise|workout|drink|water|call|meeting|appointment|task)",
        "trigger",
    ),
    ("fitness", r"(exercise|workout|gym|run|walk|jog|stretch|yoga)(?:\s+(?:tomorrow|today|later|this week))?", "topic"),
    ("hydration", r"(drink|water|hydrate)(?:\s+(?:more|enough|regularly))?", "topic"),
    ("sleep", r"(sleep|bed|rest)(?:\s+(?:early|earlier|better|enough))?", "topic"),
    ("mindfulness", r"(meditat|mindfulness|breathe)(?:\s+(?:daily|regularly))?", "topic"),
    ("learning", r"(read|study|learn)(?:\s+(?:more|daily|tonight))?", "topic"),
)

HIGH_PRIORITY_WORDS = ("urgent", "important", "asap", "immediately", "critical", "deadline")
LOW_PRIORITY_WORDS = ("maybe", "eventually", "someday", "if possible")

PRIORITY_WEIGHTS = {"high": 3, "medium": 2, "low": 1}

# Checked in order; the first group with a hit wins
CATEGORY_PATTERNS = (
    ("fitness", r"(exercise|workout|gym|run|walk|jog|stretch|yoga|fitness)"),
    ("hydration", r"(drink|water|hydrate)"),
    ("sleep", r"(sleep|bed|rest)"),
    ("mindfulness", r"(meditat|mindfulness|breathe)"),
    ("learning", r"(read|study|learn)"),
    ("work", r"(call|meeting|appointment|work)"),
    ("nutrition", r"(eat|meal|food|cook)"),
)
DEFAULT_CATEGORY = "general"

TIME_HINTS = (
    "tomorrow",
    "today",
    "tonight",
    "this morning",
    "this afternoon",
    "this evening",
    "this week",
    "next week",
    "this month",
)

# --- Note tagging ---

TAG_KEYWORDS = (
    ("fitness", ("exercise", "workout")),
    ("hydration", ("water", "drink")),
    ("sleep", ("sleep", "bed")),
    ("learning", ("read", "book")),
    ("mindfulness", ("meditat",)),
)

# Tags shown on the overview, in display order
OVERVIEW_TAGS = ("fitness", "hydration", "sleep", "learning", "mindfulness")

# Words that mark a note as reminder-worthy on the overview
REMINDER_HINT_WORDS = ("tomorrow", "remind")

# --- Insights ---

PATTERN_MIN_FREQUENCY = 2
PATTERN_MAX_CONFIDENCE = 95.0
PEAK_HOUR_COUNT = 3
LATE_HOURS = (22, 23, 0)
ACTIVITY_DAYS = 7
