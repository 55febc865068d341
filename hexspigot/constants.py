from dataclasses import dataclass


ALPHABET = "0123456789ABCDEF"

BBP_TERMS = (1, 4, 5, 6)

REGIME_EXACT = "exact"
REGIME_REDUCED = "reduced"
REGIME_DEGRADED = "degraded"


@dataclass(frozen=True)
class Limits:
    # lower-range cap, and the exponent size above which exponents are reduced mod (m - 1)
    direct_limit: int = 1_000_000
    tail_epsilon: float = 1e-15
    tail_max_terms: int = 100
    # callers should ask before computing past this position
    warn_above: int = 10**12

    def __post_init__(self):
        if self.direct_limit < 0:
            raise ValueError("direct_limit must be >= 0")
        if self.tail_epsilon <= 0:
            raise ValueError("tail_epsilon must be > 0")
        if self.tail_max_terms < 0:
            raise ValueError("tail_max_terms must be >= 0")
        if self.warn_above < 0:
            raise ValueError("warn_above must be >= 0")


DEFAULT_LIMITS = Limits()


def precision_regime(position: int, limits: Limits = DEFAULT_LIMITS) -> str:
    """Classify how trustworthy a digit at ``position`` is.

    ``exact``: direct exponents and the tail series are used; digits match the
    true expansion apart from the usual double-precision boundary cases.

    ``reduced``: the lower range is cut at ``direct_limit``, exponents are
    reduced modulo ``m - 1`` whether or not ``m`` is prime, and the tail is
    skipped. Digits may be wrong.

    ``degraded``: beyond ``warn_above``; accuracy is not expected.
    """
    position = int(position)
    if position < 0:
        raise ValueError("position must be >= 0")
    if position < limits.direct_limit:
        return REGIME_EXACT
    if position <= limits.warn_above:
        return REGIME_REDUCED
    return REGIME_DEGRADED


def needs_confirmation(position: int, limits: Limits = DEFAULT_LIMITS) -> bool:
    return int(position) > limits.warn_above
