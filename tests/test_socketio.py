import asyncio

import pytest

from wordscramble import main
from wordscramble.dictionary import DictionaryService


class RecordingServer:
    """Stands in for the AsyncServer: keeps sessions and rooms, records emits."""

    def __init__(self):
        self.sessions = {}
        self.rooms = {}
        self.events = []

    async def save_session(self, sid, session):
        self.sessions[sid] = session

    async def get_session(self, sid):
        return self.sessions.get(sid)

    async def enter_room(self, sid, room):
        self.rooms.setdefault(room, set()).add(sid)

    async def emit(self, event, data=None, room=None, to=None, **kwargs):
        self.events.append({'name': event, 'data': data, 'room': room, 'to': to})

    def received(self, name):
        return [e for e in self.events if e['name'] == name]


def run(coro):
    return asyncio.run(coro)


@pytest.fixture()
def sio_server(monkeypatch):
    server = RecordingServer()
    monkeypatch.setattr(main, 'sio', server)
    monkeypatch.setattr(main.games, 'sio', server)
    monkeypatch.setattr(main.games, 'word_list', ['silkworm'])
    monkeypatch.setattr(main.games, 'checker', DictionaryService({'silk', 'worm', 'milk'}))
    main.games.games.clear()
    yield server
    main.games.games.clear()


def join(server, sid='s1', game_id='room-1'):
    run(main.connect(sid, {}, None))
    run(main.join_game(sid, game_id))
    server.events.clear()


def test_connect_and_ping(sio_server):
    run(main.connect('s1', {}, None))
    assert sio_server.sessions['s1'] == {}
    run(main.on_ping('s1'))
    assert [e['to'] for e in sio_server.received('pong')] == ['s1', 's1']


def test_join_sends_state(sio_server):
    run(main.connect('s1', {}, None))
    run(main.join_game('s1', 'room-1'))
    assert sio_server.rooms['room-1'] == {'s1'}
    assert sio_server.sessions['s1']['game_id'] == 'room-1'
    state = sio_server.received('game:state')[-1]
    assert state['to'] == 's1'
    assert state['data']['rootWord'] == 'silkworm'
    assert state['data']['usedWords'] == []


def test_join_requires_game_id(sio_server):
    run(main.connect('s1', {}, None))
    run(main.join_game('s1', '  '))
    assert sio_server.received('error')[0]['data'] == {'message': 'game id is required'}
    assert 'game_id' not in sio_server.sessions['s1']


def test_submit_accept_ack_and_broadcast(sio_server):
    join(sio_server)
    ack = run(main.on_submit('s1', {'word': 'Silk'}))
    assert ack['status'] == 'accepted'
    assert ack['game']['usedWords'] == ['silk']
    assert ack['game']['score'] == 4
    state = sio_server.received('game:state')[-1]
    assert state['room'] == 'room-1'
    assert state['data']['usedWords'] == ['silk']


def test_submit_reject_goes_to_sender(sio_server):
    join(sio_server)
    run(main.on_submit('s1', {'word': 'silk'}))
    sio_server.events.clear()
    ack = run(main.on_submit('s1', {'word': 'silk'}))
    assert ack['rejection']['reason'] == 'already_used'
    assert sio_server.events == [{
        'name': 'word:rejected',
        'data': {'reason': 'already_used', 'title': 'Word used already', 'message': 'Be more original'},
        'room': None,
        'to': 's1',
    }]


def test_bad_payloads_answered_with_error(sio_server):
    join(sio_server)
    assert run(main.on_submit('s1', {})) is None
    run(main.on_draft('s1', {'text': ['not', 'text']}))
    messages = [e['data']['message'] for e in sio_server.received('error')]
    assert messages == ['word is required', 'text must be a string']
    assert main.games.snapshot('room-1').usedWords == []


def test_events_before_join_are_ignored(sio_server):
    run(main.connect('s1', {}, None))
    sio_server.events.clear()
    assert run(main.on_submit('s1', {'word': 'silk'})) is None
    run(main.on_reshuffle('s1'))
    run(main.on_new_game('s1'))
    assert sio_server.events == []


def test_draft_reshuffle_and_new_game(sio_server):
    join(sio_server)
    run(main.on_draft('s1', {'text': 'wor'}))
    assert sio_server.received('game:state')[-1]['data']['pendingInput'] == 'wor'
    run(main.on_submit('s1', {'word': 'worm'}))
    run(main.on_reshuffle('s1'))
    state = sio_server.received('game:state')[-1]['data']
    assert state['score'] == 4 and state['usedWords'] == [] and state['pendingInput'] == ''
    run(main.on_new_game('s1'))
    assert sio_server.received('game:state')[-1]['data']['score'] == 0
    run(main.disconnect('s1'))
