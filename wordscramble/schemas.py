from __future__ import annotations
from pydantic import BaseModel
from typing import List, Literal, Optional

from .game_logic import Snapshot, SubmitOutcome

RejectionReason = Literal['already_used', 'not_possible', 'not_real']
SubmitStatus = Literal['accepted', 'rejected', 'ignored']


class GameSnapshot(BaseModel):
    gameId: str
    rootWord: str
    usedWords: List[str] = []
    score: int = 0
    pendingInput: str = ''

    @classmethod
    def from_engine(cls, game_id: str, snap: Snapshot) -> 'GameSnapshot':
        return cls(
            gameId=game_id,
            rootWord=snap.root_word,
            usedWords=list(snap.used_words),
            score=snap.score,
            pendingInput=snap.pending_input,
        )


class SubmitWord(BaseModel):
    word: str


class DraftUpdate(BaseModel):
    text: str = ''


class Rejection(BaseModel):
    reason: RejectionReason
    title: str
    message: str


class SubmitResult(BaseModel):
    status: SubmitStatus
    word: str
    rejection: Optional[Rejection] = None
    game: GameSnapshot

    @classmethod
    def from_outcome(cls, outcome: SubmitOutcome, game: GameSnapshot) -> 'SubmitResult':
        rejection = None
        if outcome.rejection:
            r = outcome.rejection
            rejection = Rejection(reason=r.reason, title=r.title, message=r.message)
        return cls(status=outcome.status, word=outcome.word, rejection=rejection, game=game)


class WordCheck(BaseModel):
    word: str
    valid: bool
    definition: Optional[str] = None
