__all__ = [
    "ALPHABET",
    "DEFAULT_LIMITS",
    "Limits",
    "bbp_partial_sum",
    "mod_pow",
    "mod_pow_native",
    "needs_confirmation",
    "pi_hex_digit",
    "pi_hex_digits",
    "pi_hex_value",
    "precision_regime",
    "reference_hex_digits",
    "verify_hex_digits",
]

from .bbp import bbp_partial_sum, pi_hex_digit, pi_hex_digits, pi_hex_value
from .constants import ALPHABET, DEFAULT_LIMITS, Limits, needs_confirmation, precision_regime
from .modpow import mod_pow, mod_pow_native
from .verify import reference_hex_digits, verify_hex_digits
