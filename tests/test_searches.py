import io

import pytest

from bilheteria.events import Event, write_event
from bilheteria.searches import (
    binary_search_event,
    binary_search_user,
    sequential_search_event,
    sequential_search_user,
)
from bilheteria.users import User, UserType, write_user


def _events(ids):
    stream = io.BytesIO()
    for event_id in ids:
        write_event(Event(event_id, f"Evento {event_id}", "d", 1, 2.0), stream)
    return stream


def _users(ids):
    stream = io.BytesIO()
    for user_id in ids:
        write_user(
            User(user_id, f"U{user_id}", f"u{user_id}@example.com", "password", "1", "2",
                 UserType.PRODUCER),
            stream,
        )
    return stream


def test_sequential_event_found_logs_position():
    log = io.StringIO()
    event = sequential_search_event(_events([5, 2, 9]), 9, log)
    assert event.name == "Evento 9"
    assert "Comparacoes Sequencial: 3 " in log.getvalue()


def test_sequential_user_found():
    log = io.StringIO()
    user = sequential_search_user(_users([4, 8, 1]), 8, log)
    assert user.email == "u8@example.com"
    assert "Comparacoes Sequencial: 2 " in log.getvalue()


def test_sequential_not_found(capsys):
    log = io.StringIO()
    assert sequential_search_user(_users([1, 2]), 7, log) is None
    assert "Usuario nao encontrado" in capsys.readouterr().out
    assert "Tempo Sequencial: " in log.getvalue()


def test_sequential_event_not_found(capsys):
    assert sequential_search_event(_events([1]), 3) is None
    assert "nao encontrado" in capsys.readouterr().out


@pytest.mark.parametrize("key", range(1, 12))
def test_binary_event_finds_every_id(key):
    ids = list(range(1, 12))
    event = binary_search_event(_events(ids), key, 0, len(ids) - 1, io.StringIO())
    assert event.id == key


@pytest.mark.parametrize("key", [1, 6, 10])
def test_binary_user_finds(key):
    ids = list(range(1, 11))
    log = io.StringIO()
    user = binary_search_user(_users(ids), key, 0, len(ids) - 1, log)
    assert user.id == key
    assert "Comparacoes Binaria: " in log.getvalue()


def test_binary_not_found_leaves_log_empty():
    log = io.StringIO()
    assert binary_search_event(_events([1, 3, 5]), 4, 0, 2, log) is None
    assert binary_search_user(_users([1, 3, 5]), 0, 0, 2, log) is None
    assert log.getvalue() == ""


def test_binary_range_past_end():
    assert binary_search_event(_events([1, 2]), 9, 0, 10) is None


def test_binary_empty_range():
    assert binary_search_user(_users([1]), 1, 0, -1) is None