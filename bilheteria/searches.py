"""Sequential and binary searches by id over event and user files."""

from __future__ import annotations

import time
from typing import BinaryIO, Callable, Optional, TextIO, TypeVar

from .events import Event, iter_events, read_event
from .users import User, iter_users, read_user
from .utilities import RecordType, record_size

T = TypeVar("T", Event, User)


def _log_block(log: Optional[TextIO], kind: str, count: int, elapsed: float) -> None:
    if log is None:
        return
    log.write("\n---------------------------")
    log.write(f"\nComparacoes {kind}: {count} ")
    log.write(f"\nTempo {kind}: {elapsed:f} ")
    log.write("\n---------------------------\n")


def _sequential(records, key: int, log: Optional[TextIO]):
    started = time.process_time()
    count = 0
    found = None
    for record in records:
        count += 1
        if record.id == key:
            found = record
            break
    if found is None:
        print("Usuario nao encontrado", end="")
    _log_block(log, "Sequencial", count, time.process_time() - started)
    return found


def sequential_search_user(
    stream: BinaryIO, key: int, log: Optional[TextIO] = None
) -> Optional[User]:
    """Scan the user file from the start for ``key``."""
    return _sequential(iter_users(stream), key, log)


def sequential_search_event(
    stream: BinaryIO, key: int, log: Optional[TextIO] = None
) -> Optional[Event]:
    """Scan the event file from the start for ``key``."""
    return _sequential(iter_events(stream), key, log)


def _binary(
    stream: BinaryIO,
    key: int,
    start: int,
    end: int,
    log: Optional[TextIO],
    size: int,
    reader: Callable[[BinaryIO], Optional[T]],
) -> Optional[T]:
    started = time.process_time()
    count = 0
    while start <= end:
        middle = start + (end - start) // 2
        stream.seek(middle * size)
        record = reader(stream)
        if record is None:
            break
        count += 1
        if record.id == key:
            _log_block(log, "Binaria", count, time.process_time() - started)
            return record
        if record.id > key:
            end = middle - 1
        else:
            start = middle + 1
    return None


def binary_search_event(
    stream: BinaryIO, key: int, start: int, end: int, log: Optional[TextIO] = None
) -> Optional[Event]:
    """Binary search for ``key`` among event positions ``start``..``end`` of a sorted file."""
    return _binary(stream, key, start, end, log, record_size(RecordType.EVENT), read_event)


def binary_search_user(
    stream: BinaryIO, key: int, start: int, end: int, log: Optional[TextIO] = None
) -> Optional[User]:
    """Binary search for ``key`` among user positions ``start``..``end`` of a sorted file."""
    return _binary(stream, key, start, end, log, record_size(RecordType.USER), read_user)