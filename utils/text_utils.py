"""
Text utilities for wireframe labels.

Handles class-string tokenizing and label clean-up.
"""
import re
from typing import List, Optional


def split_class_tokens(class_name: Optional[str]) -> List[str]:
    """
    Split a raw class attribute into tokens.

    Args:
        class_name: Class attribute string (may be None)

    Returns:
        Non-empty class tokens in order
    """
    if not class_name:
        return []
    return [token for token in re.split(r'\s+', class_name) if token]


def humanize_identifier(identifier: str) -> str:
    """
    Turn an element id into a display label.

    "main-content" -> "Main content", "pricingTable" -> "Pricing table"
    """
    cleaned = re.sub(r'[-_]', ' ', identifier)
    cleaned = re.sub(r'([a-z])([A-Z])', r'\1 \2', cleaned)
    cleaned = cleaned.lower()
    return cleaned[:1].upper() + cleaned[1:]


def capitalize_tag(tag_name: str) -> str:
    """Capitalize a tag name for use as a fallback label."""
    return tag_name[:1].upper() + tag_name[1:]


def truncate_label(text: str, max_length: int, suffix: str = '...') -> str:
    """
    Cut text to max_length characters, appending suffix when shortened.
    """
    label = text[:max_length]
    return f"{label}{suffix}" if len(label) < len(text) else label
