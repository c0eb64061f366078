"""Keyword tagging for new notes."""
from habitiq.constants import TAG_KEYWORDS


def extract_tags(text: str) -> list[str]:
    """Tags whose keywords appear in the text, in a fixed order."""
    lower = (text or "").lower()
    return [
        tag for tag, keywords in TAG_KEYWORDS
        if any(keyword in lower for keyword in keywords)
    ]
