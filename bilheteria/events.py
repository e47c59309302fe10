"""Event records and the event data file."""

from __future__ import annotations

import io
import random
import struct
from dataclasses import dataclass
from typing import BinaryIO, Iterator, Optional

from .utilities import EVENT_FORMAT, next_name, next_unique_id, shuffle

_STRUCT = struct.Struct(EVENT_FORMAT)


def _fit(text: str, capacity: int) -> str:
    return text.encode("utf-8")[: capacity - 1].decode("utf-8", "ignore")


def _field(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", "replace")


@dataclass
class Event:
    """An event with tickets on sale; text fields are cut to their stored width."""

    id: int
    name: str
    description: str
    tickets: int
    price: float

    def __post_init__(self) -> None:
        self.name = _fit(self.name, 100)
        self.description = _fit(self.description, 150)
        self.price = float(self.price)

    def pack(self) -> bytes:
        """Encode as one fixed-size record."""
        return _STRUCT.pack(
            self.id,
            self.name.encode("utf-8"),
            self.description.encode("utf-8"),
            self.tickets,
            self.price,
        )

    @classmethod
    def unpack(cls, data: bytes) -> "Event":
        """Decode one fixed-size record."""
        if len(data) != _STRUCT.size:
            raise ValueError(
                f"event record must be {_STRUCT.size} bytes, got {len(data)}"
            )
        event_id, name, description, tickets, price = _STRUCT.unpack(data)
        return cls(event_id, _field(name), _field(description), tickets, price)


def read_event(stream: BinaryIO) -> Optional[Event]:
    """Read the next event, or None at the end of the stream."""
    data = stream.read(_STRUCT.size)
    if len(data) < _STRUCT.size:
        return None
    return Event.unpack(data)


def write_event(event: Event, stream: BinaryIO) -> None:
    """Write ``event`` at the current position."""
    stream.write(event.pack())


def iter_events(stream: BinaryIO) -> Iterator[Event]:
    """Yield every event from the start of the stream."""
    stream.seek(0)
    while (event := read_event(stream)) is not None:
        yield event


def create_event_base(stream: BinaryIO, count: int, rng=None) -> None:
    """Write ``count`` generated events with shuffled ids 1..count."""
    rng = rng or random
    ids = list(range(1, count + 1))
    shuffle(ids, rng)
    print("Gerando a base de Eventos...")
    letter = "A"
    for event_id in ids:
        event = Event(
            event_id,
            f"Evento {letter}",
            f"Descricao do evento de ID {event_id}",
            20 + rng.randrange(10000),
            50.0 + rng.randrange(200),
        )
        write_event(event, stream)
        letter = next_name(letter)
    print("Base de eventos gerada com sucesso!")


def format_event(event: Event) -> str:
    """Text block describing ``event``."""
    rule = "*" * 46
    return (
        f"{rule}"
        f"\nID do evento: {event.id}"
        f"\nNome: {event.name}"
        f"\nDescricao: {event.description}"
        f"\nQuantidade de Ingressos disponiveis: {event.tickets}"
        f"\nValor do Ingresso: {event.price:.2f}"
        f"\n{rule}"
    )


def print_event_base(stream: BinaryIO) -> None:
    """Print every event in the stream."""
    for event in iter_events(stream):
        print(format_event(event), end="")


def register_event(
    stream: BinaryIO, name: str, description: str, tickets: int, price: float
) -> Event:
    """Append a new event and return it.

    The new id is two above the highest stored id.
    """
    new_id = next_unique_id(stream, _STRUCT.size) + 1
    event = Event(new_id, name, description, tickets, price)
    stream.seek(0, io.SEEK_END)
    write_event(event, stream)
    print(f"\nEvento '{event.name}' cadastrado com sucesso com o ID: {event.id}")
    return event


def delete_event(stream: BinaryIO, event_id: int) -> bool:
    """Remove every event with ``event_id``; return whether any was found."""
    kept = []
    found = False
    for event in iter_events(stream):
        if event.id == event_id:
            found = True
        else:
            kept.append(event)
    if not found:
        return False
    stream.seek(0)
    stream.truncate()
    for event in kept:
        write_event(event, stream)
    stream.flush()
    return True