from __future__ import annotations
import logging

import socketio
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from .config import Config
from .schemas import DraftUpdate, GameSnapshot, SubmitResult, SubmitWord, WordCheck
from .managers.game import GameManager
from .dictionary import service as dict_service
from .routers import ws
from .wordlist import load_start_words

logging.basicConfig(level=Config.LOG_LEVEL, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
logger = logging.getLogger(__name__)

# Socket.IO server (ASGI)
sio_origins = '*' if Config.CORS_ORIGINS == ['*'] else Config.CORS_ORIGINS
sio = socketio.AsyncServer(async_mode='asgi', cors_allowed_origins=sio_origins)
app = FastAPI(title="WordScramble Server", version="0.1.0")

# Mount Socket.IO ASGI application
asgi_app = socketio.ASGIApp(sio, other_asgi_app=app)

# CORS for REST
app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

start_words = load_start_words(Config.START_WORDS_PATH)
games = GameManager(sio, start_words, dict_service)
app.state.games = games

app.include_router(ws.router, prefix='/ws')

# REST Endpoints
@app.get('/health')
async def health():
    return { 'ok': True }

@app.get('/games/{game_id}')
async def get_game(game_id: str) -> GameSnapshot:
    return games.snapshot(game_id)

@app.post('/games/{game_id}/new')
async def new_game(game_id: str) -> GameSnapshot:
    return await games.new_game(game_id)

@app.post('/games/{game_id}/reshuffle')
async def reshuffle(game_id: str) -> GameSnapshot:
    return await games.reshuffle(game_id)

@app.post('/games/{game_id}/words')
async def submit_word(game_id: str, body: SubmitWord) -> SubmitResult:
    return await games.submit_word(game_id, body.word)

# Dictionary validation REST endpoint
@app.get('/dict/validate')
async def validate_word(word: str) -> WordCheck:
    valid = dict_service.is_valid(word)
    definition = dict_service.definition(word) if valid else None
    return WordCheck(word=word.lower(), valid=valid, definition=definition)

# Socket.IO Events
@sio.event
async def connect(sid, environ, auth=None):
    await sio.save_session(sid, {})
    await sio.emit('pong', to=sid)

@sio.event
async def disconnect(sid, *args):
    sess = await sio.get_session(sid) or {}
    if sess.get('game_id'):
        logger.debug("Client %s left game %s", sid, sess['game_id'])

@sio.on('ping')
async def on_ping(sid):
    await sio.emit('pong', to=sid)

async def _game_id(sid):
    sess = await sio.get_session(sid)
    return sess.get('game_id') if sess else None

@sio.on('game:join')
async def join_game(sid, game_id: str):
    if not isinstance(game_id, str) or not game_id.strip():
        await sio.emit('error', { 'message': 'game id is required' }, to=sid)
        return
    await sio.enter_room(sid, game_id)
    sess = await sio.get_session(sid) or {}
    await sio.save_session(sid, { **sess, 'game_id': game_id })
    await sio.emit('game:state', games.snapshot(game_id).model_dump(by_alias=True), to=sid)

@sio.on('game:new')
async def on_new_game(sid):
    game_id = await _game_id(sid)
    if not game_id:
        return
    await games.new_game(game_id)

@sio.on('game:reshuffle')
async def on_reshuffle(sid):
    game_id = await _game_id(sid)
    if not game_id:
        return
    await games.reshuffle(game_id)

@sio.on('word:draft')
async def on_draft(sid, payload):
    game_id = await _game_id(sid)
    if not game_id:
        return
    try:
        draft = DraftUpdate.model_validate(payload or {})
    except ValidationError:
        await sio.emit('error', { 'message': 'text must be a string' }, to=sid)
        return
    await games.update_draft(game_id, draft.text)

@sio.on('word:submit')
async def on_submit(sid, payload):
    game_id = await _game_id(sid)
    if not game_id:
        return
    try:
        body = SubmitWord.model_validate(payload or {})
    except ValidationError:
        await sio.emit('error', { 'message': 'word is required' }, to=sid)
        return
    result = await games.submit_word(game_id, body.word, sid=sid)
    return result.model_dump(by_alias=True)

# Export ASGI app for uvicorn
application = asgi_app

# For local running: uvicorn wordscramble.main:application --reload --host 0.0.0.0 --port 8000
