import logging
from typing import List, Tuple

from mpmath import mp

from .bbp import pi_hex_digits
from .constants import ALPHABET, DEFAULT_LIMITS, Limits


logger = logging.getLogger(__name__)


def _prec_bits(start: int, count: int) -> int:
    return 4 * (int(start) + int(count)) + 64


def reference_hex_digits(start: int, count: int) -> str:
    """Hex digits of pi at ``start .. start+count-1`` from an mpmath evaluation of pi."""
    start = int(start)
    count = int(count)
    if start < 0:
        raise ValueError("start must be >= 0")
    if count < 0:
        raise ValueError("count must be >= 0")
    with mp.workprec(_prec_bits(start, count)):
        f = mp.ldexp(mp.pi, 4 * start)
        f = f - mp.floor(f)
        out = []
        for _ in range(count):
            f *= 16
            d = int(mp.floor(f))
            out.append(ALPHABET[d])
            f -= d
    return "".join(out)


def verify_hex_digits(start: int, count: int, limits: Limits = DEFAULT_LIMITS, workers: int = 1) -> Tuple[bool, List[int]]:
    expected = reference_hex_digits(start, count)
    actual = pi_hex_digits(start, count, workers=workers, limits=limits)
    mismatches = [int(start) + i for i, (a, b) in enumerate(zip(expected, actual)) if a != b]
    if mismatches:
        logger.warning("%d of %d digits differ from the reference", len(mismatches), int(count))
    return not mismatches, mismatches
