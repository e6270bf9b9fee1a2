from __future__ import annotations

MAX_NOTEBOOK_TITLE_LENGTH = 44


def is_valid_notebook_title(title: str) -> bool:
    trimmed = (title or "").strip()
    return 0 < len(trimmed) < MAX_NOTEBOOK_TITLE_LENGTH


def clamp_title_input(raw: str) -> str:
    """Cap raw input the same way the title field's maxLength does."""
    return (raw or "")[:MAX_NOTEBOOK_TITLE_LENGTH]
