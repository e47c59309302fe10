import io
import random

import pytest

from bilheteria.users import (
    User,
    UserType,
    create_user_base,
    format_user,
    iter_users,
    login,
    print_user_base,
    read_user,
    register_user,
    write_user,
)
from bilheteria.utilities import RecordType, record_count, record_size

password = "password"


def _user(user_id=1, name="Ana", email="ana@example.com", user_type=UserType.CLIENT):
    return User(user_id, name, email, password, "0000", "0000", user_type)


def test_pack_has_record_size():
    assert len(_user().pack()) == record_size(RecordType.USER)


def test_round_trip():
    user = _user(42, user_type=UserType.PRODUCER)
    assert User.unpack(user.pack()) == user


def test_unpack_wrong_size_raises():
    with pytest.raises(ValueError):
        User.unpack(b"\0" * 10)


def test_long_fields_are_cut():
    long_name = "n" * 300
    user = _user(name=long_name)
    assert long_name.startswith(user.name)
    assert len(user.name) < len(long_name)
    assert User.unpack(user.pack()) == user


def test_read_user_empty_stream():
    assert read_user(io.BytesIO()) is None


def test_iter_users_keeps_order():
    stream = io.BytesIO()
    for user_id in (5, 1, 3):
        write_user(_user(user_id), stream)
    assert [u.id for u in iter_users(stream)] == [5, 1, 3]


def test_create_user_base_ids_are_permutation():
    stream = io.BytesIO()
    create_user_base(stream, 10, random.Random(1))
    users = list(iter_users(stream))
    assert sorted(u.id for u in users) == list(range(1, 11))
    assert record_count(stream, RecordType.USER) == 10


def test_create_user_base_fields():
    stream = io.BytesIO()
    create_user_base(stream, 10, random.Random(2))
    users = list(iter_users(stream))
    assert users[0].name == "Usuario A"
    for user in users:
        expected = UserType.PRODUCER if user.id % 5 == 0 else UserType.CLIENT
        assert user.user_type == expected
        assert user.email.endswith("@example.com")


def test_create_user_base_deterministic():
    first, second = io.BytesIO(), io.BytesIO()
    create_user_base(first, 8, random.Random(4))
    create_user_base(second, 8, random.Random(4))
    assert first.getvalue() == second.getvalue()


def test_format_user_shows_type():
    text = format_user(_user(7, user_type=UserType.PRODUCER))
    assert "ID do Usuario: 7" in text
    assert "Tipo do Usuario: 0 - Produtor" in text
    assert text.endswith("*\n")


def test_print_user_base(capsys):
    stream = io.BytesIO()
    write_user(_user(1, name="Ana"), stream)
    write_user(_user(2, name="Bia"), stream)
    print_user_base(stream)
    out = capsys.readouterr().out
    assert "Nome: Ana" in out
    assert "Nome: Bia" in out


def test_register_user_appends_next_id(capsys):
    stream = io.BytesIO()
    create_user_base(stream, 5, random.Random(0))
    created = register_user(
        stream, "Davi", "davi@example.com", password, "0000", "0000", UserType.PRODUCER
    )
    assert created.id == 6
    users = list(iter_users(stream))
    assert users[-1] == created
    assert f"cadastrado com sucesso com o ID: {created.id}" in capsys.readouterr().out


def test_login_finds_generated_user():
    stream = io.BytesIO()
    create_user_base(stream, 6, random.Random(5))
    target = list(iter_users(stream))[3]
    assert login(stream, target.email, target.password) == target


def test_login_rejects_wrong_password():
    stream = io.BytesIO()
    write_user(_user(1), stream)
    assert login(stream, "ana@example.com", "secret") is None
    assert login(stream, "ana@example.com", password).id == 1