from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, Optional, Set

from wordfreq import top_n_list

from .config import Config

logger = logging.getLogger(__name__)


def load_wordfreq_words(n_top: int, lang: str = 'en') -> Set[str]:
    """The ``n_top`` most frequent ``lang`` words known to wordfreq, alphabetic entries only."""
    words = {w.lower() for w in top_n_list(lang, n_top) if w.isalpha()}
    logger.info("Loaded %s dictionary words from wordfreq (top %s %s)", len(words), n_top, lang)
    return words


def load_word_file(path: Path) -> Set[str]:
    """Read a newline-delimited word file, keeping lowercase alphabetic entries."""
    if not path.exists():
        raise FileNotFoundError(f"Dictionary file not found: {path}")
    words: Set[str] = set()
    with path.open('r', encoding='utf-8', errors='ignore') as f:
        for line in f:
            w = line.strip().lower()
            if w and w.isalpha():
                words.add(w)
    logger.info("Loaded %s dictionary words from %s", len(words), path)
    return words


class DictionaryService:
    def __init__(self, words: Iterable[str]):
        # Store lowercase words
        self._words: Set[str] = {w.lower() for w in words}

    @classmethod
    def from_file(cls, path) -> 'DictionaryService':
        return cls(load_word_file(Path(path)))

    @classmethod
    def from_wordfreq(cls, n_top: int = Config.WORDFREQ_TOP_N, lang: str = 'en') -> 'DictionaryService':
        return cls(load_wordfreq_words(n_top, lang))

    def __len__(self) -> int:
        return len(self._words)

    def is_recognized_word(self, word: str) -> bool:
        if not word:
            return False
        return word.lower() in self._words

    def is_valid(self, word: str) -> bool:
        return self.is_recognized_word(word)

    def definition(self, word: str) -> Optional[str]:
        # Demo placeholder; a real implementation would query a dictionary API
        w = word.lower()
        if w in self._words:
            return f"Demo definition for {w}."
        return None


def build_service(path: Optional[str] = None, n_top: int = Config.WORDFREQ_TOP_N) -> DictionaryService:
    if path:
        return DictionaryService.from_file(path)
    return DictionaryService.from_wordfreq(n_top)


# Singleton instance
service = build_service(Config.DICTIONARY_PATH)
