import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from ..schemas import SubmitWord

logger = logging.getLogger(__name__)

router = APIRouter()
connections = {}  # {game_id: [WebSocket, ...]}


def _bad_request(message: str) -> dict:
    return {"type": "error", "title": "Bad request", "message": message}


@router.websocket("/{game_id}")
async def websocket_endpoint(websocket: WebSocket, game_id: str):
    await websocket.accept()
    games = websocket.app.state.games
    game = games.get_or_create(game_id)

    async def push(state: dict):
        await websocket.send_json({"type": "update", **state})

    connections.setdefault(game_id, []).append(websocket)
    game.add_listener(push)

    try:
        # Send initial state to player
        await websocket.send_json({"type": "init", **game.to_state().model_dump(by_alias=True)})
        while True:
            text = await websocket.receive_text()
            try:
                data = json.loads(text)
            except ValueError:
                await websocket.send_json(_bad_request("Message must be JSON"))
                continue
            kind = data.get("type") if isinstance(data, dict) else None
            if kind == "submit":
                try:
                    payload = SubmitWord.model_validate(data)
                except ValidationError:
                    await websocket.send_json(_bad_request("word is required"))
                    continue
                # Accepted words reach every client through the game's broadcast
                result = await game.submit_word(payload.word)
                if result.rejection:
                    await websocket.send_json({"type": "error", **result.rejection.model_dump()})
            elif kind == "reshuffle":
                await game.reshuffle()
            elif kind == "new":
                await game.new_game()
            else:
                await websocket.send_json(_bad_request(f"Unknown message type: {kind}"))
    except WebSocketDisconnect:
        logger.debug("WebSocket client left game %s", game_id)
    finally:
        game.remove_listener(push)
        conns = connections.get(game_id, [])
        if websocket in conns:
            conns.remove(websocket)
        if not conns:
            connections.pop(game_id, None)
