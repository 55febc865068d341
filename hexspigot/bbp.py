import logging
import math
from concurrent.futures import ProcessPoolExecutor
from functools import partial

from .constants import ALPHABET, DEFAULT_LIMITS, REGIME_EXACT, Limits, precision_regime
from .modpow import mod_pow_native


logger = logging.getLogger(__name__)


def _lower_range(d: int, j: int, limits: Limits, powmod) -> float:
    s = 0.0
    for k in range(min(d, limits.direct_limit) + 1):
        m = 8 * k + j
        if m == 0:
            continue
        if d - k <= limits.direct_limit:
            r = powmod(16, d - k, m)
        elif m == 1:
            r = 0
        else:
            # 16^(d-k) = 16^((d-k) mod (m-1)) only holds for prime m
            r = powmod(16, (d - k) % (m - 1), m)
        s += r / m
        s -= math.floor(s)
    return s


def _add_tail(s: float, d: int, j: int, limits: Limits) -> float:
    term = 1.0 / (16.0 * (8 * (d + 1) + j))
    k = d + 1
    while term >= limits.tail_epsilon:
        s += term
        if k - d > limits.tail_max_terms:
            break
        # geometric decay only; the growth of 8k + j is ignored
        term /= 16.0
        k += 1
    return s


def bbp_partial_sum(d: int, j: int, limits: Limits = DEFAULT_LIMITS, powmod=mod_pow_native) -> float:
    """Fractional part of ``sum_k 16^(d-k) / (8k + j)``.

    The lower range runs for ``k <= min(d, limits.direct_limit)``. The tail
    ``k > d`` is only added while ``d < limits.direct_limit``; past that the
    series is truncated and the result is approximate.
    """
    d = int(d)
    if d < 0:
        raise ValueError("d must be >= 0")
    s = _lower_range(d, j, limits, powmod)
    if d < limits.direct_limit:
        s = _add_tail(s, d, j, limits)
    return s - math.floor(s)


def pi_hex_value(d: int, limits: Limits = DEFAULT_LIMITS, powmod=mod_pow_native) -> int:
    d = int(d)
    if d < 0:
        raise ValueError("d must be >= 0")
    x = (
        4.0 * bbp_partial_sum(d, 1, limits, powmod)
        - 2.0 * bbp_partial_sum(d, 4, limits, powmod)
        - bbp_partial_sum(d, 5, limits, powmod)
        - bbp_partial_sum(d, 6, limits, powmod)
    )
    x = x - math.floor(x)
    if x < 0:
        x = 0.0
    digit = int(x * 16.0)
    return min(max(digit, 0), 15)


def pi_hex_digit(d: int, limits: Limits = DEFAULT_LIMITS, powmod=mod_pow_native) -> str:
    return ALPHABET[pi_hex_value(d, limits, powmod)]


def pi_hex_digits(start: int, count: int, workers: int = 1, limits: Limits = DEFAULT_LIMITS) -> str:
    start = int(start)
    count = int(count)
    workers = int(workers)
    if start < 0:
        raise ValueError("start must be >= 0")
    if count < 0:
        raise ValueError("count must be >= 0")
    if workers < 1:
        raise ValueError("workers must be >= 1")
    if count == 0:
        return ""
    regime = precision_regime(start + count - 1, limits)
    if regime != REGIME_EXACT:
        logger.warning("positions %d..%d fall in the %s precision regime", start, start + count - 1, regime)
    positions = range(start, start + count)
    logger.debug("computing %d hex digits from position %d with %d worker(s)", count, start, workers)
    if workers == 1 or count == 1:
        return "".join(pi_hex_digit(d, limits) for d in positions)
    chunksize = max(1, count // (workers * 4))
    with ProcessPoolExecutor(max_workers=min(workers, count)) as ex:
        out = ex.map(partial(pi_hex_digit, limits=limits), positions, chunksize=chunksize)
        return "".join(out)
