"""Configuration defaults and the highlight list loader."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

SCORES_URL = "https://nhl-score-api.herokuapp.com/api/scores/latest"
REQUEST_TIMEOUT = 20
USER_AGENT = "nhl235 (+https://hamatti.github.io/nhl-235/)"

HIGHLIGHT_FILENAME = ".235.config"
LOG_LEVEL_ENV = "NHL235_LOG_LEVEL"


def default_highlight_path() -> Path:
    return Path.home() / HIGHLIGHT_FILENAME


def parse_highlights(text: str) -> List[str]:
    """Return trimmed, non-empty lines of *text* in file order."""

    return [line.strip() for line in text.splitlines() if line.strip()]


def read_highlights(path: Optional[Path] = None) -> List[str]:
    """Read highlighted last names, one per line.

    A missing or unreadable file means no highlights.
    """

    path = path or default_highlight_path()
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("No highlight list read from %s: %s", path, exc)
        return []
    highlights = parse_highlights(text)
    logger.debug("Loaded %d highlighted players from %s", len(highlights), path)
    return highlights
