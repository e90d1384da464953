from __future__ import annotations
import logging
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)

# Used when the start word resource is missing so the game can still run.
FALLBACK_START_WORDS = [
    'silkworm', 'absolute', 'baseline', 'dinosaur', 'elephant',
    'mountain', 'notebook', 'question', 'sandwich', 'umbrella',
]


def parse_start_words(text: str) -> List[str]:
    return [line.strip().lower() for line in text.splitlines() if line.strip()]


def load_start_words(path) -> List[str]:
    """Load candidate root words, one per line.

    A missing file falls back to ``FALLBACK_START_WORDS``; an empty file gives
    an empty list and leaves the engine's default root word in charge.
    """
    path = Path(path)
    if not path.exists():
        logger.warning("Start word list %s not found, using %d built-in words", path, len(FALLBACK_START_WORDS))
        return list(FALLBACK_START_WORDS)
    words = parse_start_words(path.read_text(encoding='utf-8'))
    logger.info("Loaded %s start words from %s", len(words), path)
    return words
