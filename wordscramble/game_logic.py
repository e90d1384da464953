from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

logger = logging.getLogger(__name__)

DEFAULT_ROOT_WORD = 'silkworm'

ALREADY_USED = 'already_used'
NOT_POSSIBLE = 'not_possible'
NOT_REAL = 'not_real'

# Titles for not_possible / not_real are crossed over; clients rely on these exact strings.
REJECTION_TEXT = {
    ALREADY_USED: ('Word used already', 'Be more original'),
    NOT_POSSIBLE: ('Word not recognize', "You can't just make them up, you know!"),
    NOT_REAL: ('Word not possible', "That isn't a real word"),
}


class WordChecker(Protocol):
    def is_recognized_word(self, word: str) -> bool: ...


@dataclass(frozen=True)
class Rejection:
    reason: str
    title: str
    message: str

    @classmethod
    def for_reason(cls, reason: str) -> 'Rejection':
        title, message = REJECTION_TEXT[reason]
        return cls(reason=reason, title=title, message=message)


@dataclass(frozen=True)
class SubmitOutcome:
    status: str  # 'accepted' | 'rejected' | 'ignored'
    word: str
    rejection: Optional[Rejection] = None

    @property
    def accepted(self) -> bool:
        return self.status == 'accepted'


@dataclass(frozen=True)
class Snapshot:
    root_word: str
    used_words: tuple
    score: int
    pending_input: str


def normalize(candidate: str) -> str:
    return (candidate or '').strip().lower()


def can_form(word: str, letters: str) -> bool:
    """True if every letter of ``word`` can be taken from ``letters``, one use each."""
    pool = list(letters.lower())
    for letter in word:
        if letter in pool:
            pool.remove(letter)
        else:
            return False
    return True


class WordGameEngine:
    """Single-player round state: a root word, the accepted words and a running score.

    The game never ends; it is only restarted (``start_round``) or reshuffled
    (``reset_root_word``). A restart zeroes the score, a reshuffle keeps it.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.root_word: str = ''
        self.used_words: list[str] = []
        self.score: int = 0
        self.pending_input: str = ''
        self.word_list: Sequence[str] = ()

    def _pick_root_word(self, word_list: Sequence[str]) -> str:
        # Blank entries (e.g. a trailing newline in the list file) are never picked
        candidates = [w.strip().lower() for w in word_list or () if w and w.strip()]
        if not candidates:
            return DEFAULT_ROOT_WORD
        return self.rng.choice(candidates)

    def start_round(self, word_list: Sequence[str]) -> None:
        self.word_list = word_list
        self.root_word = self._pick_root_word(word_list)
        self.used_words.clear()
        self.pending_input = ''
        self.score = 0
        logger.debug("New game with root word %s", self.root_word)

    def reset_root_word(self, word_list: Optional[Sequence[str]] = None) -> None:
        if word_list is not None:
            self.word_list = word_list
        self.root_word = self._pick_root_word(self.word_list)
        self.used_words.clear()
        self.pending_input = ''
        logger.debug("Reshuffled root word to %s (score kept at %d)", self.root_word, self.score)

    def set_pending_input(self, text: str) -> None:
        self.pending_input = text or ''

    # Word checks

    def is_original(self, word: str) -> bool:
        return word not in self.used_words

    def is_possible(self, word: str) -> bool:
        return can_form(word, self.root_word)

    def is_real(self, word: str, checker: WordChecker) -> bool:
        return bool(checker.is_recognized_word(word))

    def submit_word(self, candidate: str, checker: WordChecker) -> SubmitOutcome:
        word = normalize(candidate)
        if not word:
            return SubmitOutcome(status='ignored', word=word)

        reason = None
        if not self.is_original(word):
            reason = ALREADY_USED
        elif not self.is_possible(word):
            reason = NOT_POSSIBLE
        elif not self.is_real(word, checker):
            reason = NOT_REAL
        if reason:
            logger.debug("Rejected %r against %s: %s", word, self.root_word, reason)
            return SubmitOutcome(status='rejected', word=word, rejection=Rejection.for_reason(reason))

        self.used_words.insert(0, word)
        self.score += len(word)
        self.pending_input = ''
        logger.debug("Accepted %r against %s, score %d", word, self.root_word, self.score)
        return SubmitOutcome(status='accepted', word=word)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            root_word=self.root_word,
            used_words=tuple(self.used_words),
            score=self.score,
            pending_input=self.pending_input,
        )
