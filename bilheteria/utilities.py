"""Console helpers and helpers for files of fixed-size binary records."""

from __future__ import annotations

import datetime
import enum
import io
import random
import struct
import sys
from typing import BinaryIO, MutableSequence

EVENT_FORMAT = "<i100s150sid"
USER_FORMAT = "<i100s100s50s11s11si"

_ID = struct.Struct("<i")

# Erase the whole display, then move the cursor to the top-left corner.
_CLEAR_SEQUENCE = "\033[2J\033[H"


class RecordType(enum.IntEnum):
    """Kinds of fixed-size record stored in the data files."""

    EVENT = 0
    USER = 1


_RECORD_SIZES = {
    RecordType.EVENT: struct.calcsize(EVENT_FORMAT),
    RecordType.USER: struct.calcsize(USER_FORMAT),
}


def clear_screen() -> None:
    """Clear the terminal by sending the ANSI erase-display sequence to stdout."""
    out = sys.stdout
    out.write(_CLEAR_SEQUENCE)
    out.flush()


def next_name(name: str) -> str:
    """Return the name that follows ``name`` in the sequence A..Z, AA..ZZ, AAA..."""
    letters = list(name)
    for pos in reversed(range(len(letters))):
        if letters[pos] < "Z":
            letters[pos] = chr(ord(letters[pos]) + 1)
            return "".join(letters)
        letters[pos] = "A"
    return "A" + "".join(letters)


def shuffle(values: MutableSequence, rng=None) -> None:
    """Shuffle ``values`` in place."""
    (rng or random).shuffle(values)


def pause_screen() -> None:
    """Wait for the user to press ENTER."""
    print("\n\nPressione ENTER para continuar...", end="", flush=True)
    try:
        input()
    except EOFError:
        pass


def record_size(record_type: RecordType) -> int:
    """Size in bytes of one stored record of the given type."""
    return _RECORD_SIZES[RecordType(record_type)]


def record_count(stream: BinaryIO, record_type: RecordType) -> int:
    """Number of whole records of the given type in ``stream``."""
    stream.seek(0, io.SEEK_END)
    return stream.tell() // record_size(record_type)


def current_date() -> str:
    """Today's date as dd/mm/yyyy."""
    return datetime.date.today().strftime("%d/%m/%Y")


def next_unique_id(stream: BinaryIO, size: int) -> int:
    """One more than the highest id among the ``size``-byte records of ``stream``."""
    stream.seek(0)
    highest = 0
    while len(chunk := stream.read(size)) == size:
        highest = max(highest, _ID.unpack_from(chunk)[0])
    return highest + 1