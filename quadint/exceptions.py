"""
Failures raised by quadratic integer arithmetic.

Each one keeps the data that explains it as attributes, so callers can inspect the failure
instead of just catching it.
"""
from fractions import Fraction
from math import ceil, floor, hypot, prod
from typing import TYPE_CHECKING, Any, Optional, Union

if TYPE_CHECKING:
    from quadint.quad import QuadraticInteger, UnaryInteger
    from quadint.ring import QuadraticRing, UnaryRing

    NUMBER_TYPES = Union[QuadraticInteger, UnaryInteger]
    RING_TYPES = Union[QuadraticRing, UnaryRing]


class AlgebraicDegreeOverflowException(ArithmeticError):
    """
    Raised when a result would need a higher algebraic degree than the numbers' rings allow.

    The typical cause is adding or multiplying two quadratic integers from different fields,
    which in general gives a number of degree 4.
    """

    def __init__(self,
                 message: str,
                 max_degree: int,
                 *numbers: Any,
                 necessary_degree: Optional[int] = None) -> None:
        """
        Args:
            message: Human-readable error message.
            max_degree: The highest degree the causing numbers' domain can represent.
            numbers: The numbers that caused the overflow.
            necessary_degree: The degree the result actually needs. Defaults to the product of
                the maximum degrees of the causing numbers' rings.
        """
        super().__init__(message)
        self.max_algebraic_degree = max_degree
        self.causing_numbers: tuple[Any, ...] = numbers

        if necessary_degree is None:
            necessary_degree = prod(n.ring.max_algebraic_degree for n in numbers) if numbers else max_degree

        self.necessary_algebraic_degree = necessary_degree


class UnsupportedNumberDomainException(ArithmeticError):
    """
    Raised when an operation is attempted in a domain the engine does not implement.

    For example, a QuadraticRing subclass that is neither real nor imaginary.
    """

    def __init__(self, message: str, domain: Any, *numbers: Any) -> None:
        """
        Args:
            message: Human-readable error message.
            domain: The unsupported ring.
            numbers: Up to two numbers from that ring that triggered the failure.

        Raises:
            ValueError: If the domain is missing, or the numbers come from different rings.
        """
        super().__init__(message)
        if domain is None:
            raise ValueError("Ring parameter must not be None")

        if len(numbers) > 1 and numbers[0].ring != numbers[1].ring:
            raise ValueError(f"{numbers[0]!r} is from {numbers[0].ring!r} but {numbers[1]!r} is from "
                             f"{numbers[1].ring!r}")

        self.domain = domain
        self.causing_numbers: tuple[Any, ...] = numbers


class NotDivisibleException(ArithmeticError):
    """
    Raised when a division does not come out to an algebraic integer.

    The exact quotient is kept as fractions over the power basis of the ring, so for a
    quadratic ring with radicand d the quotient is fractions[0] + fractions[1]*sqrt(d).
    """

    def __init__(self,
                 dividend: "NUMBER_TYPES",
                 divisor: "NUMBER_TYPES",
                 fractions: tuple[Fraction, ...],
                 ring: Optional["RING_TYPES"] = None,
                 message: Optional[str] = None) -> None:
        """
        Args:
            dividend: The number that was divided.
            divisor: The number it was divided by.
            fractions: The exact quotient as coefficients over the ring's power basis.
            ring: The ring the quotient lives in. Defaults to the dividend's ring; differs only
                for cross-ring division of pure surds.
            message: Human-readable error message. Inferred from the operands if not given.
        """
        if message is None:
            message = f"{dividend!r} is not divisible by {divisor!r}"
        super().__init__(message)

        self.dividend = dividend
        self.divisor = divisor
        self.ring: Any = dividend.ring if ring is None else ring
        self.fractions = tuple(Fraction(f) for f in fractions)

        if len(self.fractions) != self.ring.max_algebraic_degree:
            raise ValueError(f"{self.ring!r} needs {self.ring.max_algebraic_degree} fractions, got "
                             f"{len(self.fractions)}")

        re = float(self.fractions[0])
        im = 0.0
        if len(self.fractions) > 1:
            if self.ring.is_purely_real():
                re += float(self.fractions[1]) * self.ring.sqrt_abs_radicand
            else:
                im = float(self.fractions[1]) * self.ring.sqrt_abs_radicand

        self.numeric_real_part = re
        self.numeric_imag_part = im

    def abs(self) -> float:
        """Numeric absolute value of the exact quotient."""
        if self.numeric_imag_part == 0.0:
            return abs(self.numeric_real_part)
        return hypot(self.numeric_real_part, self.numeric_imag_part)

    def bounding_integers(self) -> tuple["NUMBER_TYPES", ...]:
        """
        Algebraic integers of the quotient's ring that surround the exact quotient.

        For rings without half-integers these are the four corners of the unit square of the
        lattice containing the quotient. With half-integers, four points of the (a + b*sqrt(d))/2
        lattice around it. Real rings also get the two rational integers on either side.

        Returns:
            tuple: The bounding integers, without duplicates.
        """
        from quadint.quad import QuadraticInteger, UnaryInteger

        if len(self.fractions) == 1:
            f = self.fractions[0]
            return tuple(dict.fromkeys((UnaryInteger(floor(f)), UnaryInteger(ceil(f)))))

        ring = self.ring
        reg, surd = self.fractions
        out: list[QuadraticInteger] = []

        if ring.has_half_integers:
            top_a = ceil(reg * 2)
            top_b = ceil(surd * 2)
            if (top_a ^ top_b) & 1:
                top_a -= 1

            for a, b in ((top_a, top_b), (top_a - 1, top_b - 1), (top_a + 1, top_b - 1), (top_a, top_b - 2)):
                out.append(QuadraticInteger._make(a, b, ring, 2))
        else:
            for a in (floor(reg), ceil(reg)):
                for b in (floor(surd), ceil(surd)):
                    out.append(QuadraticInteger._make(a, b, ring, 1))

        if ring.is_purely_real():
            out.append(QuadraticInteger._make(floor(self.numeric_real_part), 0, ring, 1))
            out.append(QuadraticInteger._make(ceil(self.numeric_real_part), 0, ring, 1))

        return tuple(dict.fromkeys(out))

    def round_towards_zero(self) -> "NUMBER_TYPES":
        """The bounding integer of smallest absolute value."""
        return min(self.bounding_integers(), key=lambda x: x.abs())

    def round_away_from_zero(self) -> "NUMBER_TYPES":
        """The bounding integer of largest absolute value."""
        return max(self.bounding_integers(), key=lambda x: x.abs())
