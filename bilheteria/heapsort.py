"""In-place heap sort of a file of fixed-size records, ordered by id."""

from __future__ import annotations

import struct
import time
from dataclasses import dataclass
from typing import BinaryIO, Optional, TextIO

from .utilities import RecordType, record_size

_ID = struct.Struct("<i")


@dataclass
class SortStats:
    """Work done by one sort."""

    comparisons: int = 0
    swaps: int = 0
    elapsed: float = 0.0


def read_record(stream: BinaryIO, position: int, record_type: RecordType) -> bytes:
    """Return the raw bytes of the record at ``position``."""
    size = record_size(record_type)
    stream.seek(position * size)
    data = stream.read(size)
    if len(data) != size:
        raise ValueError(f"no complete record at position {position}")
    return data


def write_record(
    stream: BinaryIO, data: bytes, position: int, record_type: RecordType
) -> None:
    """Overwrite the record at ``position`` with ``data``."""
    size = record_size(record_type)
    if len(data) != size:
        raise ValueError(f"record must be {size} bytes, got {len(data)}")
    stream.seek(position * size)
    stream.write(data)


def record_id(data: bytes) -> int:
    """The id stored at the start of a raw record."""
    return _ID.unpack_from(data)[0]


def swap_records(stream: BinaryIO, i: int, j: int, record_type: RecordType) -> None:
    """Exchange the records at positions ``i`` and ``j``."""
    first = read_record(stream, i, record_type)
    second = read_record(stream, j, record_type)
    write_record(stream, first, j, record_type)
    write_record(stream, second, i, record_type)


def _sift_down(
    stream: BinaryIO, n: int, i: int, record_type: RecordType, stats: SortStats
) -> None:
    while True:
        largest = i
        largest_id = record_id(read_record(stream, i, record_type))
        left, right = 2 * i + 1, 2 * i + 2
        if left < n:
            stats.comparisons += 1
            left_id = record_id(read_record(stream, left, record_type))
            if left_id > largest_id:
                largest, largest_id = left, left_id
        if right < n:
            stats.comparisons += 1
            right_id = record_id(read_record(stream, right, record_type))
            if right_id > largest_id:
                largest = right
        if largest == i:
            return
        stats.swaps += 1
        swap_records(stream, i, largest, record_type)
        i = largest


def heap_sort(
    stream: BinaryIO,
    count: int,
    record_type: RecordType,
    log: Optional[TextIO] = None,
) -> SortStats:
    """Sort the first ``count`` records by ascending id and report the work to ``log``."""
    stats = SortStats()
    started = time.process_time()

    for i in reversed(range(count // 2)):
        _sift_down(stream, count, i, record_type, stats)

    for end in range(count - 1, 0, -1):
        swap_records(stream, 0, end, record_type)
        stats.swaps += 1
        _sift_down(stream, end, 0, record_type, stats)
    stream.flush()

    stats.elapsed = time.process_time() - started
    if log is not None:
        log.write("\n------------------------------")
        log.write(f"\nTempo de Execução: {stats.elapsed:.6f}\n")
        log.write(f"Comparações: {stats.comparisons}\n")
        log.write(f"Numero de trocas: {stats.swaps}\n")
        log.write("------------------------------\n")
    return stats