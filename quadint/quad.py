import logging

from fractions import Fraction
from math import atan2, gcd, hypot, pi
from typing import Optional, Union

from mypy_extensions import mypyc_attr
from sympy import Expr, Integer, Poly, Symbol
from sympy import sqrt as sym_sqrt

from quadint.exceptions import AlgebraicDegreeOverflowException, NotDivisibleException, UnsupportedNumberDomainException
from quadint.ring import ImaginaryQuadraticRing, QuadraticRing, RealQuadraticRing, UnaryRing, Z
from quadint.utils import round_div_ties_away_from_zero

logger = logging.getLogger(__name__)

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

OTHER_OP_TYPES = Union[int, "UnaryInteger"]
OP_TYPES = Union["QuadraticInteger", OTHER_OP_TYPES]
NUMBER_TYPES = Union["QuadraticInteger", "UnaryInteger"]

_X = Symbol("x")


def _check_int64(value: int, what: str) -> int:
    """Return value if it fits a signed 64-bit integer, raise OverflowError otherwise."""
    if value < INT64_MIN or value > INT64_MAX:
        raise OverflowError(f"{what} {value} exceeds the range of a signed 64-bit integer")
    return value


def _as_scalar(n: object) -> Optional[int]:
    """The plain integer value of n, or None if n is not a rational integer type."""
    if isinstance(n, UnaryInteger):
        return n.value
    if isinstance(n, int):
        return int(n)
    return None


def _root_product(d1: int, d2: int) -> tuple[int, int]:
    """
    Express sqrt(d1) * sqrt(d2) as coat * sqrt(kernel) with kernel squarefree.

    For squarefree d1 and d2 the largest square dividing d1*d2 is gcd(d1, d2)**2.
    sqrt of a negative number is i*sqrt(|d|), so two negative radicands contribute i*i = -1.

    Returns:
        tuple: (coat, kernel).
    """
    g = gcd(d1, d2)
    kernel = (d1 // g) * (d2 // g)
    coat = -g if d1 < 0 and d2 < 0 else g
    return coat, kernel


def _real_sign(a: int, b: int, d: int) -> int:
    """Exact sign of a + b*sqrt(d) for d > 0 not a square."""
    sa = (a > 0) - (a < 0)
    sb = (b > 0) - (b < 0)
    if sb == 0 or sa == sb:
        return sa
    if sa == 0:
        return sb

    # Opposite signs: whichever term is bigger in absolute value wins. d is not a square, so never equal.
    return sa if a * a > b * b * d else sb


def _real_abs_less(a1: int, b1: int, a2: int, b2: int, d: int) -> bool:
    """|a1 + b1*sqrt(d)| < |a2 + b2*sqrt(d)|, exactly."""
    s1 = _real_sign(a1, b1, d)
    s2 = _real_sign(a2, b2, d)
    return _real_sign(s1 * a1 - s2 * a2, s1 * b1 - s2 * b2, d) < 0


@mypyc_attr(allow_interpreted_subclasses=True)
class QuadraticInteger:
    """
    Algebraic integer of a quadratic field Q(sqrt(d)).

    Stored as (reg_part + surd_part*sqrt(d)) / denominator, with denominator 1 or 2:
      - denominator 2 is only legal in rings with half-integers (d = 1 mod 4), and then
        reg_part and surd_part must have the same parity.
      - A denominator of 2 with both parts even is kept as given. It is the same number as
        its reduced form but does not compare equal to it, the denominator being part of the
        declared representation. Arithmetic results are always reduced.

    For d < 0, sqrt(d) means i*sqrt(|d|).

    Arithmetic between numbers of different rings works when one side is a rational integer,
    and for products and quotients of pure surds (like sqrt(-2) * sqrt(5) = sqrt(-10)).
    Anything else raises AlgebraicDegreeOverflowException.
    """

    __slots__ = ("reg_part", "surd_part", "ring", "denominator")

    reg_part: int
    surd_part: int
    ring: QuadraticRing
    denominator: int

    def __init__(self, a: int, b: int, ring: QuadraticRing, denom: int = 1) -> None:
        """
        Initialize a QuadraticInteger.

        Args:
            a: The regular (rational) part numerator.
            b: The surd part numerator, the multiple of sqrt(d).
            ring: The ring the number belongs to.
            denom: 1 or 2. -1 and -2 are accepted and flip the signs of a and b.

        Raises:
            ValueError: If the ring is missing, the denominator is not 1 or 2, or
                denominator 2 is used in a ring without half-integers or with mismatched parity.
        """
        if ring is None:
            raise ValueError("Ring parameter must not be None")

        a0, b0, d0 = int(a), int(b), int(denom)
        if d0 == -1 or d0 == -2:
            a0, b0, d0 = -a0, -b0, -d0

        if d0 != 1 and d0 != 2:
            raise ValueError("Parameter denom must be 1 or 2")

        if d0 == 2:
            if (a0 ^ b0) & 1:
                raise ValueError("Parity of a must match parity of b")
            if not ring.has_half_integers:
                raise ValueError(f"{ring!r} does not have half-integers, denom must be 1")

        self.reg_part, self.surd_part, self.ring, self.denominator = a0, b0, ring, d0

    # region constructors / conversions
    @classmethod
    def _make(cls, a: int, b: int, ring: QuadraticRing, den: int = 1) -> "QuadraticInteger":
        """
        Construct from numerators over any nonzero common denominator, reducing it to 1 or 2.

        Raises:
            ArithmeticError: If the value is not an algebraic integer of the ring.
        """
        if den < 0:
            a, b, den = -a, -b, -den

        g = gcd(gcd(a, b), den)
        a, b, den = a // g, b // g, den // g

        if den == 1 or (den == 2 and ring.has_half_integers and not (a ^ b) & 1):
            return cls(a, b, ring, den)

        raise ArithmeticError(f"Non-integral result ({a} + {b}*sqrt({ring.radicand}))/{den}")

    @classmethod
    def from_theta(cls, m: int, n: int, ring: QuadraticRing) -> "QuadraticInteger":
        """
        Construct m + n*theta, where theta = (1 + sqrt(d))/2.

        Raises:
            ValueError: If the ring does not have half-integers.
        """
        if ring is None:
            raise ValueError("Ring parameter must not be None")
        if not ring.has_half_integers:
            raise ValueError(f'The ring {ring!r} does not have "half-integers"')
        return cls._make(2 * m + n, n, ring, 2)

    @classmethod
    def from_omega(cls, m: int, n: int) -> "QuadraticInteger":
        """Construct m + n*omega in Z[omega], where omega = (-1 + sqrt(-3))/2."""
        return cls._make(2 * m - n, n, ImaginaryQuadraticRing(-3), 2)

    @classmethod
    def from_phi(cls, m: int, n: int) -> "QuadraticInteger":
        """Construct m + n*phi in Z[phi], where phi = (1 + sqrt(5))/2 is the golden ratio."""
        return cls.from_theta(m, n, RealQuadraticRing(5))

    def _from_obj(self, n: OP_TYPES) -> "QuadraticInteger":
        """Convert a random object to a QuadraticInteger of this ring"""
        if isinstance(n, QuadraticInteger):
            return n

        scalar = _as_scalar(n)
        if scalar is None:
            raise TypeError(f"Unsupported operand type {type(n).__name__} for QuadraticInteger")

        return QuadraticInteger(scalar, 0, self.ring)

    def _rational(self) -> int:
        """Value of a number with no surd part. The parity rule makes this division exact."""
        return self.reg_part // self.denominator

    def _surd(self) -> int:
        """Multiple of sqrt(d) for a number with no regular part."""
        return self.surd_part // self.denominator

    def to_sympy(self) -> Expr:
        """The exact value as a sympy expression."""
        return (Integer(self.reg_part) + Integer(self.surd_part) * sym_sqrt(self.ring.radicand)) / self.denominator
    # endregion

    # region domain checks
    def _is_real_variant(self, op: str) -> bool:
        """
        Dispatch on the ring variant: True for real rings, False for imaginary rings.

        Raises:
            UnsupportedNumberDomainException: For any other kind of ring.
        """
        ring = self.ring
        if isinstance(ring, RealQuadraticRing):
            return True
        if isinstance(ring, ImaginaryQuadraticRing):
            return False

        raise UnsupportedNumberDomainException(
            f"{ring!r} of type {type(ring).__name__} is not a supported number domain for {op}", ring, self)

    def _check_pair(self, other: "QuadraticInteger", op: str) -> None:
        self._is_real_variant(op)
        other._is_real_variant(op)

    def _degree_overflow(self, other: "QuadraticInteger", op: str) -> AlgebraicDegreeOverflowException:
        logger.debug("Cross-ring %s of %r and %r needs degree 4", op, self, other)
        return AlgebraicDegreeOverflowException("This operation's result is of degree 4",
                                                self.ring.max_algebraic_degree, self, other)
    # endregion

    # region queries
    @property
    def algebraic_degree(self) -> int:
        """0 for zero, 1 for other rational integers, 2 otherwise."""
        if self.surd_part == 0:
            return 0 if self.reg_part == 0 else 1
        return 2

    @property
    def twice_reg_part(self) -> int:
        """Regular part numerator in half-units, whatever the stored denominator."""
        return self.reg_part if self.denominator == 2 else 2 * self.reg_part

    @property
    def twice_surd_part(self) -> int:
        """Surd part numerator in half-units, whatever the stored denominator."""
        return self.surd_part if self.denominator == 2 else 2 * self.surd_part

    def is_purely_real(self) -> bool:
        """True iff the number is real: always in real rings, only for rationals in imaginary ones."""
        if self._is_real_variant("is_purely_real"):
            return True
        return self.surd_part == 0

    def full_trace(self) -> int:
        """Trace, the number plus its conjugate: 2a/denominator."""
        if self.denominator == 2:
            return self.reg_part
        return 2 * self.reg_part

    def trace(self) -> int:
        """
        Trace, restricted to the range of a signed 64-bit integer.

        Raises:
            OverflowError: If the trace does not fit. Use full_trace() instead.
        """
        return _check_int64(self.full_trace(), "Trace")

    def full_norm(self) -> int:
        """
        Norm, the number times its conjugate: (a^2 - d*b^2)/denominator^2.

        Raises:
            ArithmeticError: If there is a non-integral norm due to parity violation.
        """
        num = self.reg_part * self.reg_part - self.surd_part * self.surd_part * self.ring.radicand
        q, r = divmod(num, self.denominator * self.denominator)
        if r != 0:
            raise ArithmeticError("Non-integral norm; parity constraint violated")

        return q

    def norm(self) -> int:
        """
        Norm, restricted to the range of a signed 64-bit integer.

        Raises:
            OverflowError: If the norm does not fit. Use full_norm() instead.
        """
        return _check_int64(self.full_norm(), "Norm")

    def min_polynomial_coeffs(self) -> tuple[int, int, int]:
        """
        Coefficients of the minimal polynomial, constant term first.

        (0, 1, 0) is x for zero, (-n, 1, 0) is x - n for a rational n, and
        (norm, -trace, 1) is x^2 - trace*x + norm otherwise.

        Raises:
            AlgebraicDegreeOverflowException: If the algebraic degree is somehow above 2.
        """
        degree = self.algebraic_degree
        if degree == 0:
            return 0, 1, 0
        if degree == 1:
            return -self._rational(), 1, 0
        if degree == 2:
            return self.full_norm(), -self.full_trace(), 1

        raise AlgebraicDegreeOverflowException(f"Excessive degree {degree} occurred somehow",
                                               self.ring.max_algebraic_degree, self, necessary_degree=degree)

    def min_polynomial(self, x: Symbol = _X) -> Poly:
        """The minimal polynomial as a sympy Poly in x."""
        return Poly(list(reversed(self.min_polynomial_coeffs())), x)
    # endregion

    # region numeric approximations
    @property
    def real_part_numeric(self) -> float:
        """Real part as a float. Approximate whenever a real ring's surd part is nonzero."""
        if self._is_real_variant("real_part_numeric"):
            return (self.reg_part + self.surd_part * self.ring.sqrt_abs_radicand) / self.denominator
        return self.reg_part / self.denominator

    @property
    def imag_part_numeric(self) -> float:
        """Imaginary part as a float. Approximate whenever sqrt(|d|) is irrational."""
        if self._is_real_variant("imag_part_numeric"):
            return 0.0
        return self.surd_part * self.ring.sqrt_abs_radicand / self.denominator

    @property
    def is_re_approx(self) -> bool:
        return self._is_real_variant("is_re_approx") and self.surd_part != 0

    @property
    def is_im_approx(self) -> bool:
        if self._is_real_variant("is_im_approx"):
            return False
        return self.surd_part != 0 and self.ring.radicand != -1

    def abs(self) -> float:
        """Numeric absolute value."""
        return hypot(self.real_part_numeric, self.imag_part_numeric)

    def angle(self) -> float:
        """Numeric argument in radians: 0 or pi in real rings."""
        if self._is_real_variant("angle"):
            return pi if self.real_part_numeric < 0.0 else 0.0
        return atan2(self.imag_part_numeric, self.real_part_numeric)

    def __abs__(self) -> float:
        return self.abs()

    def __complex__(self) -> complex:
        return complex(self.real_part_numeric, self.imag_part_numeric)

    def __float__(self) -> float:
        if self.is_purely_real():
            return self.real_part_numeric
        raise TypeError(f"Can't convert non-real {self!r} to float")
    # endregion

    # region arithmetic
    def conjugate(self) -> "QuadraticInteger":
        """
        Field conjugate: negates the surd part, keeping the representation.

        Raises:
            UnsupportedNumberDomainException: If the ring is neither real nor imaginary.
        """
        self._is_real_variant("conjugate")
        return type(self)(self.reg_part, -self.surd_part, self.ring, self.denominator)

    def negate(self) -> "QuadraticInteger":
        self._is_real_variant("negate")
        return type(self)(-self.reg_part, -self.surd_part, self.ring, self.denominator)

    def plus(self, addend: OP_TYPES) -> NUMBER_TYPES:
        """
        Add a number of the same ring, a rational integer, or a rational integer of another ring.

        Raises:
            AlgebraicDegreeOverflowException: If both numbers have surd parts from different rings.
            UnsupportedNumberDomainException: If either ring is not supported.
        """
        n = _as_scalar(addend)
        if n is not None:
            self._is_real_variant("addition")
            return self._make(self.reg_part + n * self.denominator, self.surd_part, self.ring, self.denominator)

        other = self._from_obj(addend)
        self._check_pair(other, "addition")

        if self.ring != other.ring:
            if self.surd_part == 0 and other.surd_part == 0:
                return UnaryInteger(self._rational() + other._rational())
            if other.surd_part == 0:
                return self.plus(other._rational())
            if self.surd_part == 0:
                return other.plus(self._rational())
            raise self._degree_overflow(other, "addition")

        # Rescale both to the common denominator (1 or 2)
        den = max(self.denominator, other.denominator)
        a = self.reg_part * (den // self.denominator) + other.reg_part * (den // other.denominator)
        b = self.surd_part * (den // self.denominator) + other.surd_part * (den // other.denominator)
        return self._make(a, b, self.ring, den)

    def minus(self, subtrahend: OP_TYPES) -> NUMBER_TYPES:
        """Subtract, with the same rules as plus()."""
        n = _as_scalar(subtrahend)
        if n is not None:
            return self.plus(-n)

        return self.plus(self._from_obj(subtrahend).negate())

    def _times_surds(self, other: "QuadraticInteger") -> "QuadraticInteger":
        """b1*sqrt(d1) * b2*sqrt(d2) for different rings, landing in Q(sqrt(d1*d2)) reduced."""
        coat, kernel = _root_product(self.ring.radicand, other.ring.radicand)
        target = QuadraticRing.apply(kernel)
        logger.debug("Product of %r and %r lands in %r", self, other, target)
        return QuadraticInteger(0, self._surd() * other._surd() * coat, target)

    def times(self, multiplicand: OP_TYPES) -> NUMBER_TYPES:
        """
        Multiply by a number of the same ring, a rational integer, or a pure surd of another ring.

        Raises:
            AlgebraicDegreeOverflowException: If the product would have degree 4.
            UnsupportedNumberDomainException: If either ring is not supported.
            ArithmeticError: If the product does not reduce to a legal denominator.
        """
        n = _as_scalar(multiplicand)
        if n is not None:
            self._is_real_variant("multiplication")
            return self._make(self.reg_part * n, self.surd_part * n, self.ring, self.denominator)

        other = self._from_obj(multiplicand)
        self._check_pair(other, "multiplication")

        if self.ring != other.ring:
            if self.surd_part == 0 and other.surd_part == 0:
                return UnaryInteger(self._rational() * other._rational())
            if other.surd_part == 0:
                return self.times(other._rational())
            if self.surd_part == 0:
                return other.times(self._rational())
            if self.reg_part == 0 and other.reg_part == 0:
                return self._times_surds(other)
            raise self._degree_overflow(other, "multiplication")

        a = self.reg_part * other.reg_part + self.surd_part * other.surd_part * self.ring.radicand
        b = self.reg_part * other.surd_part + self.surd_part * other.reg_part
        return self._make(a, b, self.ring, self.denominator * other.denominator)

    def _exact_quotient(self,
                        reg: Fraction,
                        surd: Fraction,
                        ring: QuadraticRing,
                        divisor: NUMBER_TYPES) -> "QuadraticInteger":
        """Turn an exact quotient reg + surd*sqrt(d) into a QuadraticInteger, or raise NotDivisibleException."""
        den = reg.denominator
        if den == surd.denominator and (den == 1 or (den == 2 and ring.has_half_integers)):
            return self._make(reg.numerator, surd.numerator, ring, den)

        raise NotDivisibleException(self, divisor, (reg, surd), ring)

    def _divides_surds(self, other: "QuadraticInteger") -> "QuadraticInteger":
        """
        b1*sqrt(d1) / (b2*sqrt(d2)) for different rings.

        sqrt(d1)/sqrt(d2) = sqrt(d1)*sqrt(d2)/d2, so the quotient lives in the same ring as the product.
        """
        coat, kernel = _root_product(self.ring.radicand, other.ring.radicand)
        target = QuadraticRing.apply(kernel)
        logger.debug("Quotient of %r by %r lands in %r", self, other, target)

        surd = Fraction(self._surd() * coat, other._surd() * other.ring.radicand)
        if surd.denominator == 1:
            return QuadraticInteger(0, surd.numerator, target)

        raise NotDivisibleException(self, other, (Fraction(0), surd), target)

    def _rehomed_quotient(self,
                          dividend: NUMBER_TYPES,
                          divisor: OP_TYPES,
                          reported_divisor: NUMBER_TYPES) -> NUMBER_TYPES:
        """dividend / divisor, where dividend is this number moved to another ring; failures name this number."""
        try:
            return dividend.divides(divisor)
        except NotDivisibleException as exc:
            raise NotDivisibleException(self, reported_divisor, exc.fractions, exc.ring) from None

    def divides(self, divisor: OP_TYPES) -> NUMBER_TYPES:
        """
        Exact division.

        Multiplies by the conjugate of the divisor and divides by its norm; the quotient must
        come out to an algebraic integer.

        Raises:
            ZeroDivisionError: If divisor is 0.
            NotDivisibleException: If the quotient is not an algebraic integer. It carries the exact quotient.
            AlgebraicDegreeOverflowException: If the quotient would have degree 4.
            UnsupportedNumberDomainException: If either ring is not supported.
        """
        n = _as_scalar(divisor)
        if n is not None:
            if n == 0:
                raise ZeroDivisionError("Division by 0 is not valid")
            self._is_real_variant("division")
            den = self.denominator * n
            return self._exact_quotient(Fraction(self.reg_part, den), Fraction(self.surd_part, den),
                                        self.ring, QuadraticInteger(n, 0, self.ring))

        other = self._from_obj(divisor)
        self._check_pair(other, "division")
        if not other:
            raise ZeroDivisionError("Division by 0 is not valid")

        if self.ring != other.ring:
            if self.surd_part == 0 and other.surd_part == 0:
                return self._rehomed_quotient(UnaryInteger(self._rational()), other._rational(), other)
            if other.surd_part == 0:
                return self.divides(other._rational())
            if self.surd_part == 0:
                return self._rehomed_quotient(QuadraticInteger(self._rational(), 0, other.ring), other, other)
            if self.reg_part == 0 and other.reg_part == 0:
                return self._divides_surds(other)
            raise self._degree_overflow(other, "division")

        # self * conj(other) = (a + b*sqrt(d)) / (e1*e2), and other's norm is an integer
        a = self.reg_part * other.reg_part - self.surd_part * other.surd_part * self.ring.radicand
        b = self.surd_part * other.reg_part - self.reg_part * other.surd_part
        den = self.denominator * other.denominator * other.full_norm()
        return self._exact_quotient(Fraction(a, den), Fraction(b, den), self.ring, other)

    def _nearest_quotient(self, a: int, b: int, den: int) -> "QuadraticInteger":
        """
        Nearest ring element to t = (a + b*sqrt(d))/den.

        In imaginary rings the metric is the squared complex distance, (da)^2 + |d|*(db)^2.
        In real rings it is |N(t - q)|, ties going to the smaller real embedding. That makes
        |N(remainder)| < |N(divisor)| in every norm-Euclidean real ring (d = 2, 3, 5, 6, 7, 13, ...);
        in other rings no choice of q can promise it.
        """
        if den < 0:
            a, b, den = -a, -b, -den

        ring = self.ring
        d = ring.radicand
        half = ring.has_half_integers
        real = self._is_real_variant("modulus")
        # Real rings sometimes need q a whole unit beyond the rounded quotient
        span = 3 if real else 1

        # Candidates are in half-units: (qa + qb*sqrt(d))/2
        a0 = round_div_ties_away_from_zero(2 * a, den)
        b0 = round_div_ties_away_from_zero(2 * b, den)

        best_a, best_b, best_da, best_db = a0, b0, 0, 0
        best_metric: Optional[int] = None
        for qa in range(a0 - span, a0 + span + 1):
            if not half and qa & 1:
                continue
            da = qa * den - 2 * a
            da2 = da * da

            for qb in range(b0 - span, b0 + span + 1):
                if (qa ^ qb) & 1:
                    continue

                db = qb * den - 2 * b
                if real:
                    metric = abs(da2 - d * db * db)
                else:
                    metric = da2 + ring.abs_radicand * db * db

                if (best_metric is None or metric < best_metric
                        or (real and metric == best_metric and _real_abs_less(da, db, best_da, best_db, d))):
                    best_metric = metric
                    best_a, best_b, best_da, best_db = qa, qb, da, db

        return self._make(best_a, best_b, ring, 2)

    def __divmod__(self, other: OP_TYPES) -> tuple[NUMBER_TYPES, NUMBER_TYPES]:
        """
        Nearest-lattice division: self = q * other + r.

        q is the ring element closest to the exact quotient, so r is small; in norm-Euclidean
        rings (like the Gaussian and Eisenstein integers) |N(r)| < |N(other)|.

        Raises:
            ZeroDivisionError: if other == 0
            AlgebraicDegreeOverflowException: For incompatible rings.
        """
        n = _as_scalar(other)
        if n is not None:
            if n == 0:
                raise ZeroDivisionError("Division by 0 is not valid")
            self._is_real_variant("modulus")
            q = self._nearest_quotient(self.reg_part, self.surd_part, self.denominator * n)
            return q, self.minus(q.times(n))

        divisor = self._from_obj(other)
        self._check_pair(divisor, "modulus")
        if not divisor:
            raise ZeroDivisionError("Division by 0 is not valid")

        if self.ring != divisor.ring:
            if self.surd_part == 0 and divisor.surd_part == 0:
                return divmod(UnaryInteger(self._rational()), divisor._rational())
            if divisor.surd_part == 0:
                return divmod(self, divisor._rational())
            if self.surd_part == 0:
                return divmod(QuadraticInteger(self._rational(), 0, divisor.ring), divisor)
            raise self._degree_overflow(divisor, "modulus")

        a = self.reg_part * divisor.reg_part - self.surd_part * divisor.surd_part * self.ring.radicand
        b = self.surd_part * divisor.reg_part - self.reg_part * divisor.surd_part
        q = self._nearest_quotient(a, b, self.denominator * divisor.denominator * divisor.full_norm())
        return q, self.minus(q.times(divisor))

    def mod(self, divisor: OP_TYPES) -> NUMBER_TYPES:
        """Remainder of nearest-lattice division, self - divisor * round(self / divisor)."""
        _, r = divmod(self, divisor)
        return r
    # endregion

    # region operators
    def __add__(self, other: OP_TYPES) -> NUMBER_TYPES:
        if isinstance(other, (QuadraticInteger, int, UnaryInteger)):
            return self.plus(other)
        return NotImplemented

    def __radd__(self, other: OTHER_OP_TYPES) -> NUMBER_TYPES:
        return self.__add__(other)

    def __sub__(self, other: OP_TYPES) -> NUMBER_TYPES:
        if isinstance(other, (QuadraticInteger, int, UnaryInteger)):
            return self.minus(other)
        return NotImplemented

    def __rsub__(self, other: OTHER_OP_TYPES) -> NUMBER_TYPES:
        if isinstance(other, (int, UnaryInteger)):
            return self.negate().plus(other)
        return NotImplemented

    def __neg__(self) -> "QuadraticInteger":
        return self.negate()

    def __pos__(self) -> "QuadraticInteger":
        return type(self)(self.reg_part, self.surd_part, self.ring, self.denominator)

    def __mul__(self, other: OP_TYPES) -> NUMBER_TYPES:
        if isinstance(other, (QuadraticInteger, int, UnaryInteger)):
            return self.times(other)
        return NotImplemented

    def __rmul__(self, other: OTHER_OP_TYPES) -> NUMBER_TYPES:
        return self.__mul__(other)

    def __pow__(self, exp: int) -> "QuadraticInteger":
        e = int(exp)
        if e < 0:
            raise ValueError("Negative powers not supported")

        self._is_real_variant("power")
        result = QuadraticInteger(1, 0, self.ring)  # multiplicative identity
        base: QuadraticInteger = self
        while e:
            if e & 1:
                result = result._same_ring_product(base)

            e >>= 1
            if e:
                base = base._same_ring_product(base)

        return result

    def _same_ring_product(self, other: "QuadraticInteger") -> "QuadraticInteger":
        product = self.times(other)
        assert isinstance(product, QuadraticInteger)
        return product

    def __truediv__(self, other: OP_TYPES) -> NUMBER_TYPES:
        # / is exact division here; // and % are the rounding ones
        if isinstance(other, (QuadraticInteger, int, UnaryInteger)):
            return self.divides(other)
        return NotImplemented

    def __rtruediv__(self, other: OTHER_OP_TYPES) -> NUMBER_TYPES:
        if isinstance(other, (int, UnaryInteger)):
            return self._from_obj(other).divides(self)
        return NotImplemented

    def __floordiv__(self, other: OP_TYPES) -> NUMBER_TYPES:
        q, _ = divmod(self, other)
        return q

    def __rfloordiv__(self, other: OTHER_OP_TYPES) -> NUMBER_TYPES:
        if isinstance(other, (int, UnaryInteger)):
            return self._from_obj(other).__floordiv__(self)
        return NotImplemented

    def __mod__(self, other: OP_TYPES) -> NUMBER_TYPES:
        return self.mod(other)

    def __rmod__(self, other: OTHER_OP_TYPES) -> NUMBER_TYPES:
        if isinstance(other, (int, UnaryInteger)):
            return self._from_obj(other).mod(self)
        return NotImplemented
    # endregion

    # region ordering (real rings only)
    def _sign(self) -> int:
        """Exact sign in a real ring; the denominator is positive so it doesn't matter."""
        return _real_sign(self.reg_part, self.surd_part, self.ring.radicand)

    def _compare(self, other: object) -> Optional[int]:
        if isinstance(other, (int, UnaryInteger)) or (isinstance(other, QuadraticInteger) and other.ring == self.ring):
            diff = self.minus(other)
            assert isinstance(diff, QuadraticInteger)
            if diff.surd_part != 0 and not diff._is_real_variant("comparison"):
                raise TypeError(f"Non-real quadratic integers are not ordered: {self!r}, {other!r}")
            return diff._sign()

        return None

    def __lt__(self, other: object) -> bool:
        c = self._compare(other)
        if c is None:
            return NotImplemented
        return c < 0

    def __le__(self, other: object) -> bool:
        c = self._compare(other)
        if c is None:
            return NotImplemented
        return c <= 0

    def __gt__(self, other: object) -> bool:
        c = self._compare(other)
        if c is None:
            return NotImplemented
        return c > 0

    def __ge__(self, other: object) -> bool:
        c = self._compare(other)
        if c is None:
            return NotImplemented
        return c >= 0
    # endregion

    def __bool__(self) -> bool:
        return (self.reg_part | self.surd_part) != 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QuadraticInteger):
            return False

        return ((self.reg_part, self.surd_part, self.denominator) == (other.reg_part, other.surd_part, other.denominator)
                and self.ring == other.ring)

    def __hash__(self) -> int:
        return hash((self.ring, self.reg_part, self.surd_part, self.denominator))

    def __repr__(self) -> str:
        if self.denominator == 1:
            return f"QuadraticInteger({self.reg_part}, {self.surd_part}, {self.ring!r})"
        return f"QuadraticInteger({self.reg_part}, {self.surd_part}, {self.ring!r}, {self.denominator})"


class UnaryInteger:
    """
    An ordinary integer, as an algebraic integer of degree 1 (or 0 for zero).

    This is what cross-ring operations collapse to when both operands are rational integers
    living in different quadratic rings. Mixing it with a QuadraticInteger gives a QuadraticInteger.
    """

    __slots__ = ("value",)

    value: int

    def __init__(self, n: int = 0) -> None:
        self.value = int(n)

    @property
    def ring(self) -> UnaryRing:
        return Z

    @property
    def algebraic_degree(self) -> int:
        return 0 if self.value == 0 else 1

    def is_purely_real(self) -> bool:
        return True

    def full_norm(self) -> int:
        """Norm over Q, which for a rational is the number itself."""
        return self.value

    def norm(self) -> int:
        return _check_int64(self.value, "Norm")

    def full_trace(self) -> int:
        return self.value

    def trace(self) -> int:
        return _check_int64(self.value, "Trace")

    def min_polynomial_coeffs(self) -> tuple[int, int]:
        """Coefficients of x - n, constant term first."""
        return -self.value, 1

    def min_polynomial(self, x: Symbol = _X) -> Poly:
        return Poly([1, -self.value], x)

    def to_sympy(self) -> Expr:
        return Integer(self.value)

    @property
    def real_part_numeric(self) -> float:
        return float(self.value)

    @property
    def imag_part_numeric(self) -> float:
        return 0.0

    def abs(self) -> float:
        return float(abs(self.value))

    def angle(self) -> float:
        return pi if self.value < 0 else 0.0

    def conjugate(self) -> "UnaryInteger":
        return self

    def negate(self) -> "UnaryInteger":
        return UnaryInteger(-self.value)

    def plus(self, addend: OP_TYPES) -> NUMBER_TYPES:
        if isinstance(addend, QuadraticInteger):
            return addend.plus(self.value)
        return UnaryInteger(self.value + self._scalar(addend))

    def minus(self, subtrahend: OP_TYPES) -> NUMBER_TYPES:
        if isinstance(subtrahend, QuadraticInteger):
            return subtrahend.negate().plus(self.value)
        return UnaryInteger(self.value - self._scalar(subtrahend))

    def times(self, multiplicand: OP_TYPES) -> NUMBER_TYPES:
        if isinstance(multiplicand, QuadraticInteger):
            return multiplicand.times(self.value)
        return UnaryInteger(self.value * self._scalar(multiplicand))

    def divides(self, divisor: OP_TYPES) -> NUMBER_TYPES:
        """
        Exact division.

        Raises:
            ZeroDivisionError: If divisor is 0.
            NotDivisibleException: If the quotient is not an integer.
        """
        if isinstance(divisor, QuadraticInteger):
            try:
                return QuadraticInteger(self.value, 0, divisor.ring).divides(divisor)
            except NotDivisibleException as exc:
                raise NotDivisibleException(self, divisor, exc.fractions, exc.ring) from None

        n = self._scalar(divisor)
        if n == 0:
            raise ZeroDivisionError("Division by 0 is not valid")

        q, r = divmod(self.value, n)
        if r:
            raise NotDivisibleException(self, UnaryInteger(n), (Fraction(self.value, n),))
        return UnaryInteger(q)

    def __divmod__(self, other: OP_TYPES) -> tuple[NUMBER_TYPES, NUMBER_TYPES]:
        """Nearest-integer division, ties away from zero: self = q * other + r with |r| <= |other|/2."""
        if isinstance(other, QuadraticInteger):
            return divmod(QuadraticInteger(self.value, 0, other.ring), other)

        n = self._scalar(other)
        if n == 0:
            raise ZeroDivisionError("Division by 0 is not valid")

        q = round_div_ties_away_from_zero(self.value if n > 0 else -self.value, abs(n))
        return UnaryInteger(q), UnaryInteger(self.value - q * n)

    def mod(self, divisor: OP_TYPES) -> NUMBER_TYPES:
        _, r = divmod(self, divisor)
        return r

    @staticmethod
    def _scalar(n: object) -> int:
        scalar = _as_scalar(n)
        if scalar is None:
            raise TypeError(f"Unsupported operand type {type(n).__name__} for UnaryInteger")
        return scalar

    def __add__(self, other: OP_TYPES) -> NUMBER_TYPES:
        if isinstance(other, (QuadraticInteger, int, UnaryInteger)):
            return self.plus(other)
        return NotImplemented

    def __radd__(self, other: int) -> NUMBER_TYPES:
        return self.__add__(other)

    def __sub__(self, other: OP_TYPES) -> NUMBER_TYPES:
        if isinstance(other, (QuadraticInteger, int, UnaryInteger)):
            return self.minus(other)
        return NotImplemented

    def __rsub__(self, other: int) -> NUMBER_TYPES:
        if isinstance(other, int):
            return UnaryInteger(other - self.value)
        return NotImplemented

    def __neg__(self) -> "UnaryInteger":
        return self.negate()

    def __pos__(self) -> "UnaryInteger":
        return self

    def __mul__(self, other: OP_TYPES) -> NUMBER_TYPES:
        if isinstance(other, (QuadraticInteger, int, UnaryInteger)):
            return self.times(other)
        return NotImplemented

    def __rmul__(self, other: int) -> NUMBER_TYPES:
        return self.__mul__(other)

    def __pow__(self, exp: int) -> "UnaryInteger":
        e = int(exp)
        if e < 0:
            raise ValueError("Negative powers not supported")
        return UnaryInteger(self.value ** e)

    def __truediv__(self, other: OP_TYPES) -> NUMBER_TYPES:
        if isinstance(other, (QuadraticInteger, int, UnaryInteger)):
            return self.divides(other)
        return NotImplemented

    def __rtruediv__(self, other: int) -> NUMBER_TYPES:
        if isinstance(other, int):
            return UnaryInteger(other).divides(self)
        return NotImplemented

    def __floordiv__(self, other: OP_TYPES) -> NUMBER_TYPES:
        q, _ = divmod(self, other)
        return q

    def __mod__(self, other: OP_TYPES) -> NUMBER_TYPES:
        return self.mod(other)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __float__(self) -> float:
        return float(self.value)

    def __lt__(self, other: object) -> bool:
        n = _as_scalar(other)
        if n is None:
            return NotImplemented
        return self.value < n

    def __le__(self, other: object) -> bool:
        n = _as_scalar(other)
        if n is None:
            return NotImplemented
        return self.value <= n

    def __gt__(self, other: object) -> bool:
        n = _as_scalar(other)
        if n is None:
            return NotImplemented
        return self.value > n

    def __ge__(self, other: object) -> bool:
        n = _as_scalar(other)
        if n is None:
            return NotImplemented
        return self.value >= n

    def __bool__(self) -> bool:
        return self.value != 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnaryInteger):
            return False
        return self.value == other.value

    def __hash__(self) -> int:
        return hash((Z, self.value))

    def __repr__(self) -> str:
        return f"UnaryInteger({self.value})"


def integer(a: int, b: int, ring: QuadraticRing, denom: int = 1) -> QuadraticInteger:
    """Simply a helper method for the QuadraticInteger constructor"""
    return QuadraticInteger(a, b, ring, denom)
