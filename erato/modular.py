"""
Overflow-safe modular arithmetic.

Every product is formed in the domain's double-width representation and
reduced before it is narrowed back, so operands up to the full domain
width never overflow.
"""

from .numeric import UnsignedDomain, U64


def mul_mod(a: int, b: int, modulus: int, domain: UnsignedDomain = U64) -> int:
    """(a * b) mod modulus through a widening intermediate."""
    wide = domain.widening_mul(a, b)
    return domain.narrow(wide % domain.widen(modulus))


def pow_mod(base: int, exponent: int, modulus: int,
            domain: UnsignedDomain = U64) -> int:
    """base^exponent mod modulus by binary exponentiation."""
    if modulus == domain.zero:
        raise ZeroDivisionError("modulus must be non-zero")
    result = domain.one % modulus
    base = base % modulus
    while exponent > domain.zero:
        if exponent & domain.one:
            result = mul_mod(result, base, modulus, domain)
        exponent >>= 1
        base = mul_mod(base, base, modulus, domain)
    return result


def split_power_of_two(m: int):
    """
    Write m = d * 2^r with d odd. Returns (d, r).
    m must be positive.
    """
    if m <= 0:
        raise ValueError(f"m must be positive, got {m}")
    r = 0
    while m % 2 == 0:
        m //= 2
        r += 1
    return m, r
