def _check(exponent: int, modulus: int):
    if exponent < 0:
        raise ValueError("exponent must be >= 0")
    if modulus < 1:
        raise ValueError("modulus must be >= 1")


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Square-and-multiply ``base ** exponent % modulus``."""
    base = int(base)
    exponent = int(exponent)
    modulus = int(modulus)
    _check(exponent, modulus)
    if modulus == 1:
        return 0
    result = 1
    base = base % modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        exponent >>= 1
        base = (base * base) % modulus
    return result


def mod_pow_native(base: int, exponent: int, modulus: int) -> int:
    """Same contract as :func:`mod_pow`, with the loop run by the builtin ``pow``."""
    _check(exponent, modulus)
    if modulus == 1:
        return 0
    return pow(base, exponent, modulus)
