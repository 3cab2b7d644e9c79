from dataclasses import dataclass
from fractions import Fraction
from math import sqrt
from typing import ClassVar

from mypy_extensions import mypyc_attr

from quadint.exceptions import UnsupportedNumberDomainException
from quadint.utils import is_squarefree


# TODO: Once Py3.9 support has been dropped, add slots=True
# @dataclass(frozen=True, slots=True)
@dataclass(frozen=True)
class PowerBasis:
    """
    Power basis of a ring of algebraic integers.

    Element i of the basis is multiplicative_factors[i] * g**i for the generating root g,
    so for a quadratic ring (1, 1) means the basis {1, sqrt(d)}.
    """
    multiplicative_factors: tuple[Fraction, ...]

    @property
    def power_count(self) -> int:
        """Number of powers in the basis, which is also the maximum algebraic degree"""
        return len(self.multiplicative_factors)


QUADRATIC_POWER_BASIS = PowerBasis((Fraction(1), Fraction(1)))
UNARY_POWER_BASIS = PowerBasis((Fraction(1),))


@mypyc_attr(allow_interpreted_subclasses=True)
class QuadraticRing:
    """
    The ring of algebraic integers of Q(sqrt(d)), for squarefree d other than 0 and 1.

    When d = 1 (mod 4) the ring also contains the "half-integers" (a + b*sqrt(d))/2 with
    a and b both odd. Otherwise it is just Z[sqrt(d)].

    Use ring(d) (or QuadraticRing.apply(d)) to get the right variant for the sign of d.
    """

    __slots__ = ("radicand", "abs_radicand", "sqrt_abs_radicand", "has_half_integers")

    radicand: int
    abs_radicand: int
    sqrt_abs_radicand: float
    has_half_integers: bool

    MAX_ALGEBRAIC_DEGREE: ClassVar[int] = 2

    def __init__(self, d: int) -> None:
        """
        Initialize a quadratic ring.

        Args:
            d: The radicand. Must be squarefree, and neither 0 nor 1.

        Raises:
            ValueError: If d is not a valid radicand.
        """
        d = int(d)
        if d == 0:
            raise ValueError("0 is not valid for parameter d")
        if d == 1:
            raise ValueError("Sorry, O_(Q(sqrt(1))) is not supported")
        if not is_squarefree(d):
            raise ValueError(f"Squarefree integer required for parameter d, {d} is not squarefree")

        self.radicand = d
        self.abs_radicand = abs(d)
        # Numeric convenience only, never used to decide anything exact.
        self.sqrt_abs_radicand = sqrt(self.abs_radicand)
        # Python's % is always non-negative here, so this covers d < 0 too (-3 % 4 == 1).
        self.has_half_integers = d % 4 == 1

    @staticmethod
    def apply(d: int) -> "QuadraticRing":
        """
        Construct the ring variant that matches the sign of d.

        Raises:
            ValueError: If d is not a valid radicand.
        """
        d = int(d)
        if d < 0:
            return ImaginaryQuadraticRing(d)
        if d == 0:
            raise ValueError("0 is not valid for parameter d")
        return RealQuadraticRing(d)

    def is_purely_real(self) -> bool:
        """
        True iff every number in the ring is real (d > 0).

        Raises:
            UnsupportedNumberDomainException: If the ring is neither a RealQuadraticRing nor an
                ImaginaryQuadraticRing, like a bare QuadraticRing(d). Use ring(d) to get the right variant.
        """
        raise UnsupportedNumberDomainException(
            f"{self!r} is neither real nor imaginary; use QuadraticRing.apply({self.radicand})", self)

    @property
    def max_algebraic_degree(self) -> int:
        return self.MAX_ALGEBRAIC_DEGREE

    def discriminant(self) -> int:
        """d if d = 1 (mod 4), 4d otherwise."""
        if self.has_half_integers:
            return self.radicand
        return 4 * self.radicand

    @property
    def power_basis(self) -> PowerBasis:
        return QUADRATIC_POWER_BASIS

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QuadraticRing):
            return False

        return type(self) is type(other) and self.radicand == other.radicand

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.radicand))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.radicand})"


class RealQuadraticRing(QuadraticRing):
    """Q(sqrt(d)) for d > 1."""

    __slots__ = ()

    def __init__(self, d: int) -> None:
        if int(d) < 1:
            raise ValueError("Positive integer required for parameter d")
        super().__init__(d)

    def is_purely_real(self) -> bool:
        return True

    @property
    def rad_sqrt(self) -> float:
        """Numeric sqrt(d)."""
        return self.sqrt_abs_radicand


class ImaginaryQuadraticRing(QuadraticRing):
    """Q(sqrt(d)) for d < 0."""

    __slots__ = ()

    def __init__(self, d: int) -> None:
        if int(d) > -1:
            raise ValueError("Negative integer required for parameter d")
        super().__init__(d)

    def is_purely_real(self) -> bool:
        return False


class UnaryRing:
    """
    The ordinary integers Z, as the ring of algebraic integers of Q itself.

    There is only one, available as Z.
    """

    __slots__ = ()

    MAX_ALGEBRAIC_DEGREE: ClassVar[int] = 1

    @property
    def max_algebraic_degree(self) -> int:
        return self.MAX_ALGEBRAIC_DEGREE

    def is_purely_real(self) -> bool:
        return True

    def discriminant(self) -> int:
        return 1

    @property
    def power_basis(self) -> PowerBasis:
        return UNARY_POWER_BASIS

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnaryRing)

    def __hash__(self) -> int:
        return hash(UnaryRing.__name__)

    def __repr__(self) -> str:
        return "Z"


Z = UnaryRing()


def ring(d: int) -> QuadraticRing:
    """Simply a helper method for QuadraticRing.apply"""
    return QuadraticRing.apply(d)
