"""
Numeric capability interface for candidate integers.

An UnsignedDomain describes a fixed-width unsigned integer type: its
identity elements, its range, the double-width representation used for
widening multiplication, and the numpy dtype used for vectorised divisor
scans. Values travel through the algorithms as plain Python ints that
have been checked against the domain.
"""

import numbers
import numpy as np
from dataclasses import dataclass, field


# Largest integer a float64 represents exactly. Square roots and
# logarithms of values above this are estimates.
FLOAT_EXACT_LIMIT = 2 ** 53


@dataclass(frozen=True)
class UnsignedDomain:
    name: str
    bits: int
    dtype: np.dtype = field(default=np.dtype(object))

    def __post_init__(self):
        if self.bits < 2:
            raise ValueError(f"bits must be >= 2, got {self.bits}")
        object.__setattr__(self, "dtype", np.dtype(self.dtype))
        if self.dtype != np.dtype(object):
            if self.dtype.kind != "u":
                raise ValueError(f"dtype must be unsigned or object, got {self.dtype}")
            if self.dtype.itemsize * 8 < self.bits:
                raise ValueError(
                    f"dtype {self.dtype} cannot hold {self.bits}-bit values"
                )

    # --- identities and range ---

    @property
    def zero(self) -> int:
        return 0

    @property
    def one(self) -> int:
        return 1

    @property
    def max_value(self) -> int:
        return (1 << self.bits) - 1

    @property
    def wide_bits(self) -> int:
        return 2 * self.bits

    @property
    def wide_max(self) -> int:
        return (1 << self.wide_bits) - 1

    def contains(self, n) -> bool:
        return isinstance(n, int) and 0 <= n <= self.max_value

    def coerce(self, n) -> int:
        """
        Validate a candidate and return it as a Python int.
        Accepts Python ints and numpy integer scalars; bools are rejected.
        """
        if isinstance(n, (bool, np.bool_)) or not isinstance(n, numbers.Integral):
            raise TypeError(
                f"{self.name} candidates must be integers, got {type(n).__name__}"
            )
        value = int(n)
        if value < 0 or value > self.max_value:
            raise ValueError(
                f"{value} is outside the {self.name} range [0, {self.max_value}]"
            )
        return value

    # --- conversions ---

    def to_u64(self, n: int) -> int:
        if n > 0xFFFF_FFFF_FFFF_FFFF:
            raise OverflowError(f"{n} does not fit in 64 bits")
        return n

    def from_u64(self, value: int) -> int:
        return self.coerce(value)

    def to_u128(self, n: int) -> int:
        if n > (1 << 128) - 1:
            raise OverflowError(f"{n} does not fit in 128 bits")
        return n

    def from_u128(self, value: int) -> int:
        return self.coerce(value)

    def widen(self, n: int) -> int:
        """Promote a domain value to the double-width representation."""
        return self.coerce(n)

    def narrow(self, wide: int) -> int:
        """Bring a double-width value back into the domain, range-checked."""
        if wide < 0 or wide > self.max_value:
            raise OverflowError(
                f"{wide} does not narrow into {self.name}"
            )
        return wide

    def widening_mul(self, a: int, b: int) -> int:
        product = self.widen(a) * self.widen(b)
        if product > self.wide_max:
            raise OverflowError(
                f"product exceeds the {self.wide_bits}-bit intermediate"
            )
        return product

    # --- float-assisted bounds ---

    def to_float(self, n: int) -> float:
        return float(n)

    def isqrt_bound(self, n: int) -> int:
        """
        Trial-division limit: floor(sqrt(float(n))) + 1.

        The +1 covers truncation of the float square root. Above
        FLOAT_EXACT_LIMIT the conversion itself rounds, so the bound is
        an estimate there.
        """
        return int(np.sqrt(self.to_float(n))) + 1

    def divisor_block(self, start: int, stop: int, step: int = 2) -> np.ndarray:
        """Candidate divisors start, start+step, ... < stop in this domain's dtype."""
        if self.dtype == np.dtype(object):
            return np.array(list(range(start, stop, step)), dtype=object)
        return np.arange(start, stop, step, dtype=self.dtype)

    def scalar(self, n: int):
        """n in the numpy representation matching divisor_block arrays."""
        if self.dtype == np.dtype(object):
            return n
        return self.dtype.type(n)


U32 = UnsignedDomain("u32", 32, np.uint32)
U64 = UnsignedDomain("u64", 64, np.uint64)
