from __future__ import annotations
import logging
from typing import Awaitable, Callable, Dict, List, Optional, Sequence

from ..game_logic import WordChecker, WordGameEngine, SubmitOutcome
from ..schemas import GameSnapshot, SubmitResult

logger = logging.getLogger(__name__)

StateListener = Callable[[dict], Awaitable[None]]


class Game:
    def __init__(self, game_id: str, sio, word_list: Sequence[str], checker: WordChecker):
        self.id = game_id
        self.sio = sio
        self.word_list = word_list
        self.checker = checker
        self.engine = WordGameEngine()
        self.engine.start_round(word_list)
        # Extra push targets besides the Socket.IO room (plain WebSocket clients)
        self.listeners: List[StateListener] = []

    def to_state(self) -> GameSnapshot:
        return GameSnapshot.from_engine(self.id, self.engine.snapshot())

    def add_listener(self, listener: StateListener):
        self.listeners.append(listener)

    def remove_listener(self, listener: StateListener):
        if listener in self.listeners:
            self.listeners.remove(listener)

    async def broadcast(self):
        state = self.to_state().model_dump(by_alias=True)
        if self.sio is not None:
            await self.sio.emit('game:state', state, room=self.id)
        for listener in list(self.listeners):
            try:
                await listener(state)
            except Exception as exc:
                logger.warning("Dropping listener for game %s after failed push: %s", self.id, exc)
                self.remove_listener(listener)

    async def new_game(self):
        self.engine.start_round(self.word_list)
        await self.broadcast()

    async def reshuffle(self):
        self.engine.reset_root_word(self.word_list)
        await self.broadcast()

    async def update_draft(self, text: str):
        self.engine.set_pending_input(text)
        await self.broadcast()

    async def submit_word(self, word: str, sid: Optional[str] = None) -> SubmitResult:
        outcome: SubmitOutcome = self.engine.submit_word(word, self.checker)
        result = SubmitResult.from_outcome(outcome, self.to_state())
        if outcome.accepted:
            await self.broadcast()
        elif result.rejection and sid and self.sio is not None:
            # Rejections go to the submitter only
            await self.sio.emit('word:rejected', result.rejection.model_dump(), to=sid)
        return result


class GameManager:
    def __init__(self, sio, word_list: Sequence[str], checker: WordChecker):
        self.sio = sio
        self.word_list = word_list
        self.checker = checker
        self.games: Dict[str, Game] = {}

    def get_or_create(self, game_id: str) -> Game:
        if game_id not in self.games:
            logger.info("Creating game %s", game_id)
            self.games[game_id] = Game(game_id, self.sio, self.word_list, self.checker)
        return self.games[game_id]

    def snapshot(self, game_id: str) -> GameSnapshot:
        return self.get_or_create(game_id).to_state()

    async def new_game(self, game_id: str) -> GameSnapshot:
        game = self.get_or_create(game_id)
        await game.new_game()
        return game.to_state()

    async def reshuffle(self, game_id: str) -> GameSnapshot:
        game = self.get_or_create(game_id)
        await game.reshuffle()
        return game.to_state()

    async def update_draft(self, game_id: str, text: str) -> GameSnapshot:
        game = self.get_or_create(game_id)
        await game.update_draft(text)
        return game.to_state()

    async def submit_word(self, game_id: str, word: str, sid: Optional[str] = None) -> SubmitResult:
        game = self.get_or_create(game_id)
        return await game.submit_word(word, sid=sid)

    def drop(self, game_id: str) -> bool:
        return self.games.pop(game_id, None) is not None
