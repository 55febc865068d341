from typing import Iterator

from .bbp import pi_hex_digit, pi_hex_digits
from .constants import DEFAULT_LIMITS, Limits


def _check_run(start: int, count: int):
    if start < 0:
        raise ValueError("start must be >= 0")
    if count < 0:
        raise ValueError("count must be >= 0")


def iter_hex_digits(start: int, count: int, limits: Limits = DEFAULT_LIMITS) -> Iterator[str]:
    start = int(start)
    count = int(count)
    _check_run(start, count)
    for d in range(start, start + count):
        yield pi_hex_digit(d, limits)


def iter_hex_chunks(
    start: int,
    count: int,
    chunk_size: int,
    limits: Limits = DEFAULT_LIMITS,
    workers: int = 1,
) -> Iterator[str]:
    start = int(start)
    count = int(count)
    chunk_size = int(chunk_size)
    _check_run(start, count)
    if chunk_size < 1:
        raise ValueError("chunk_size must be >= 1")
    for offset in range(0, count, chunk_size):
        yield pi_hex_digits(start + offset, min(chunk_size, count - offset), workers=workers, limits=limits)
