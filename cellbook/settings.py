from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from PySide6.QtCore import QSettings

from cellbook.core.languages import CodeLanguage

APP_NAME = "cellbook"
LOG_DIR = Path(os.environ.get("CELLBOOK_LOG_DIR") or Path.home() / f".{APP_NAME}" / "logs")
LOG_PATH = LOG_DIR / f"{APP_NAME}.log"

AUTOSAVE_DEBOUNCE_MS = 600
PREVIEW_DEBOUNCE_MS_DEFAULT = 350
# Preview debounce is adaptive: 300..800ms depending on file size
PREVIEW_DEBOUNCE_MS_MIN = 300
PREVIEW_DEBOUNCE_MS_MAX_ADD = 500
PREVIEW_DEBOUNCE_MS_CHARS_PER_STEP = 400


@dataclass(frozen=True)
class SettingsKeys:
    UI_THEME: str = "ui/theme"
    UI_GEOMETRY: str = "ui/geometry"
    WORKSPACE_DIR: str = "workspace/dir"
    LAST_FILE: str = "workspace/last_file"
    DEFAULT_LANGUAGE: str = "notebooks/default_language"


def get_str(settings: QSettings, key: str, default: str) -> str:
    val = settings.value(key, default)
    return str(val) if val is not None else default


def normalize_theme(name: str) -> str:
    name = (name or "").strip().lower()
    return name if name in ("dark", "light") else "dark"


def normalize_language(value: str | None) -> CodeLanguage:
    try:
        return CodeLanguage.parse((value or "").strip().lower())
    except ValueError:
        return CodeLanguage.TYPESCRIPT
