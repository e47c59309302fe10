"""User records and the user data file."""

from __future__ import annotations

import enum
import io
import random
import struct
from dataclasses import dataclass
from typing import BinaryIO, Iterator, Optional

from .utilities import USER_FORMAT, next_name, next_unique_id, shuffle

_STRUCT = struct.Struct(USER_FORMAT)


class UserType(enum.IntEnum):
    """Role of a user."""

    PRODUCER = 0
    CLIENT = 1

    @property
    def label(self) -> str:
        return "Produtor" if self is UserType.PRODUCER else "Cliente"


def _fit(text: str, capacity: int) -> str:
    """Cut ``text`` so that it fits a NUL-terminated field of ``capacity`` bytes."""
    return text.encode("utf-8")[: capacity - 1].decode("utf-8", "ignore")


def _field(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", "replace")


@dataclass
class User:
    """A registered user; text fields are cut to their stored width."""

    id: int
    name: str
    email: str
    password: str
    phone: str
    cpf: str
    user_type: UserType = UserType.CLIENT

    def __post_init__(self) -> None:
        self.name = _fit(self.name, 100)
        self.email = _fit(self.email, 100)
        self.password = _fit(self.password, 50)
        self.phone = _fit(self.phone, 11)
        self.cpf = _fit(self.cpf, 11)
        self.user_type = UserType(self.user_type)

    def pack(self) -> bytes:
        """Encode as one fixed-size record."""
        return _STRUCT.pack(
            self.id,
            self.name.encode("utf-8"),
            self.email.encode("utf-8"),
            self.password.encode("utf-8"),
            self.phone.encode("utf-8"),
            self.cpf.encode("utf-8"),
            int(self.user_type),
        )

    @classmethod
    def unpack(cls, data: bytes) -> "User":
        """Decode one fixed-size record."""
        if len(data) != _STRUCT.size:
            raise ValueError(
                f"user record must be {_STRUCT.size} bytes, got {len(data)}"
            )
        user_id, name, email, password, phone, cpf, user_type = _STRUCT.unpack(data)
        return cls(
            user_id,
            _field(name),
            _field(email),
            _field(password),
            _field(phone),
            _field(cpf),
            UserType(user_type),
        )


def read_user(stream: BinaryIO) -> Optional[User]:
    """Read the next user, or None at the end of the stream."""
    data = stream.read(_STRUCT.size)
    if len(data) < _STRUCT.size:
        return None
    return User.unpack(data)


def write_user(user: User, stream: BinaryIO) -> None:
    """Write ``user`` at the current position."""
    stream.write(user.pack())


def iter_users(stream: BinaryIO) -> Iterator[User]:
    """Yield every user from the start of the stream."""
    stream.seek(0)
    while (user := read_user(stream)) is not None:
        yield user


def create_user_base(stream: BinaryIO, count: int, rng=None) -> None:
    """Write ``count`` generated users with shuffled ids 1..count."""
    ids = list(range(1, count + 1))
    shuffle(ids, rng or random)
    print("Gerando a base de Usuarios...")
    stream.seek(0)
    letter = "A"
    for index, user_id in enumerate(ids):
        user = User(
            user_id,
            f"Usuario {letter}",
            f"usuario{index}@example.com",
            f"user{index}",
            f"(00) 99988-766{user_id % 10}{(user_id + 1) % 10}",
            f"000.000.000-{user_id % 100:02d}",
            UserType.PRODUCER if user_id % 5 == 0 else UserType.CLIENT,
        )
        write_user(user, stream)
        letter = next_name(letter)
    print("Base de Usuários gerada com sucesso!")


def format_user(user: User) -> str:
    """Text block describing ``user``."""
    rule = "*" * 46
    return (
        f"{rule}"
        f"\nID do Usuario: {user.id}"
        f"\nNome: {user.name}"
        f"\nEmail: {user.email}"
        f"\nTelefone: {user.phone}"
        f"\nCPF: {user.cpf}"
        f"\nTipo do Usuario: {int(user.user_type)} - {user.user_type.label}"
        f"\n{rule}\n"
    )


def print_user_base(stream: BinaryIO) -> None:
    """Print every user in the stream."""
    for user in iter_users(stream):
        print(format_user(user), end="")


def register_user(
    stream: BinaryIO,
    name: str,
    email: str,
    password: str,
    phone: str,
    cpf: str,
    user_type: UserType,
) -> User:
    """Append a new user with the next free id and return it."""
    user = User(
        next_unique_id(stream, _STRUCT.size), name, email, password, phone, cpf, user_type
    )
    stream.seek(0, io.SEEK_END)
    write_user(user, stream)
    print(f"\nUsuario '{user.name}' cadastrado com sucesso com o ID: {user.id}")
    return user


def login(stream: BinaryIO, email: str, password: str) -> Optional[User]:
    """Return the first user with this e-mail and password, or None."""
    for user in iter_users(stream):
        if user.email == email and user.password == password:
            return user
    return None