from fractions import Fraction

import pytest

from quadint import (AlgebraicDegreeOverflowException, NotDivisibleException, QuadraticInteger, UnaryInteger,
                     UnsupportedNumberDomainException, ring)


class TestAlgebraicDegreeOverflow:
    """Tests for AlgebraicDegreeOverflowException"""

    def test_default_degree(self):
        """The necessary degree defaults to the product of the rings' degrees"""
        x = QuadraticInteger(1, 1, ring(-1))
        y = QuadraticInteger(1, 1, ring(-7))
        exc = AlgebraicDegreeOverflowException("test", 2, x, y)
        assert exc.max_algebraic_degree == 2
        assert exc.necessary_algebraic_degree == 4
        assert exc.causing_numbers == (x, y)
        assert str(exc) == "test"
        assert isinstance(exc, ArithmeticError)

    def test_explicit_degree(self):
        """An explicit degree wins"""
        exc = AlgebraicDegreeOverflowException("test", 2, QuadraticInteger(1, 1, ring(2)), necessary_degree=3)
        assert exc.necessary_algebraic_degree == 3


class TestUnsupportedNumberDomain:
    """Tests for UnsupportedNumberDomainException"""

    def test_main(self):
        """Attributes"""
        r = ring(-5)
        x = QuadraticInteger(1, 1, r)
        exc = UnsupportedNumberDomainException("test", r, x)
        assert exc.domain == r
        assert exc.causing_numbers == (x,)

    def test_no_domain(self):
        """The domain is required"""
        with pytest.raises(ValueError):
            UnsupportedNumberDomainException("test", None)

    def test_different_rings(self):
        """Both numbers must come from the same domain"""
        with pytest.raises(ValueError):
            UnsupportedNumberDomainException("test", ring(-1), QuadraticInteger(1, 1, ring(-1)),
                                             QuadraticInteger(1, 1, ring(2)))


class TestNotDivisible:
    """Tests for NotDivisibleException"""

    @staticmethod
    def catch(dividend, divisor) -> NotDivisibleException:
        with pytest.raises(NotDivisibleException) as exc:
            dividend.divides(divisor)
        return exc.value

    def test_fraction_count(self):
        """One fraction per power of the basis"""
        x = QuadraticInteger(1, 1, ring(-1))
        with pytest.raises(ValueError):
            NotDivisibleException(x, UnaryInteger(2), (Fraction(1, 2),))

    def test_gaussian(self):
        """(5 + i) / (3 + i) = 8/5 - i/5"""
        r = ring(-1)
        exc = self.catch(QuadraticInteger(5, 1, r), QuadraticInteger(3, 1, r))
        assert exc.fractions == (Fraction(8, 5), Fraction(-1, 5))
        assert exc.numeric_real_part == pytest.approx(1.6)
        assert exc.numeric_imag_part == pytest.approx(-0.2)
        assert exc.abs() == pytest.approx(abs(complex(1.6, -0.2)))

        assert set(exc.bounding_integers()) == {QuadraticInteger(1, 0, r), QuadraticInteger(1, -1, r),
                                                QuadraticInteger(2, 0, r), QuadraticInteger(2, -1, r)}
        assert exc.round_towards_zero() == QuadraticInteger(1, 0, r)
        assert exc.round_away_from_zero() == QuadraticInteger(2, -1, r)

    def test_eisenstein(self):
        """61 / (1 + 9*sqrt(-3)) = 1/4 - 9/4*sqrt(-3)"""
        r = ring(-3)
        exc = self.catch(QuadraticInteger(61, 0, r), QuadraticInteger(1, 9, r))
        assert exc.fractions == (Fraction(1, 4), Fraction(-9, 4))

        assert set(exc.bounding_integers()) == {QuadraticInteger(0, -2, r), QuadraticInteger(-1, -5, r, 2),
                                                QuadraticInteger(1, -5, r, 2), QuadraticInteger(0, -3, r)}
        assert exc.round_towards_zero() == QuadraticInteger(0, -2, r)
        assert exc.round_away_from_zero() == QuadraticInteger(0, -3, r)

    def test_real(self):
        """(3 - 8*sqrt(2)) / 7"""
        r = ring(2)
        exc = self.catch(QuadraticInteger(3, -8, r), 7)
        assert exc.fractions == (Fraction(3, 7), Fraction(-8, 7))
        assert exc.numeric_imag_part == 0.0

        bounds = exc.bounding_integers()
        for expected in (QuadraticInteger(-1, 0, r), QuadraticInteger(-2, 0, r), QuadraticInteger(0, -1, r)):
            assert expected in bounds

    def test_golden(self):
        """sqrt(5) / ((15 - 3*sqrt(5))/2) = (1 + sqrt(5))/6"""
        r = ring(5)
        exc = self.catch(QuadraticInteger(0, 1, r), QuadraticInteger(15, -3, r, 2))
        assert exc.fractions == (Fraction(1, 6), Fraction(1, 6))
        assert QuadraticInteger.from_phi(0, 1) in exc.bounding_integers()

    def test_payload(self):
        """The dividend and divisor ride along"""
        r = ring(-2)
        x = QuadraticInteger(14, 1, r)
        exc = self.catch(x, 14)
        assert exc.dividend == x
        assert exc.divisor == QuadraticInteger(14, 0, r)
        assert exc.ring == r
