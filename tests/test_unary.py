from fractions import Fraction

import pytest

from sympy import Symbol

from quadint import NotDivisibleException, QuadraticInteger, UnaryInteger, Z, ring


class UnaryIntTests:
    """Support data for testing UnaryInteger"""

    def setup_method(self, _):
        """Setup some test data"""
        self.values = [UnaryInteger(n) for n in (-7, -2, 0, 1, 3, 10)]
        self.gaussian = ring(-1)


class TestArithmetic(UnaryIntTests):
    """Tests for +, -, * and ** against plain ints"""

    def test_main(self):
        """Same as int arithmetic"""
        for x in self.values:
            for y in self.values:
                assert x + y == UnaryInteger(x.value + y.value)
                assert x - y == UnaryInteger(x.value - y.value)
                assert x * y == UnaryInteger(x.value * y.value)

    def test_int(self):
        """Plain ints on either side"""
        x = UnaryInteger(5)
        assert x + 2 == UnaryInteger(7)
        assert 2 + x == UnaryInteger(7)
        assert 2 - x == UnaryInteger(-3)
        assert 3 * x == UnaryInteger(15)
        assert x ** 3 == UnaryInteger(125)
        assert -x == UnaryInteger(-5)

    def test_quadratic(self):
        """A quadratic operand makes the result quadratic"""
        x = UnaryInteger(3)
        y = QuadraticInteger(1, 1, self.gaussian)
        assert x + y == QuadraticInteger(4, 1, self.gaussian)
        assert y + x == QuadraticInteger(4, 1, self.gaussian)
        assert x - y == QuadraticInteger(2, -1, self.gaussian)
        assert x * y == QuadraticInteger(3, 3, self.gaussian)
        assert UnaryInteger(2) / y == QuadraticInteger(1, -1, self.gaussian)

    def test_float(self):
        """Floats are not accepted"""
        with pytest.raises(TypeError):
            _ = UnaryInteger(1) + 1.5


class TestDivision(UnaryIntTests):
    """Tests for /, // and %"""

    def test_exact(self):
        """Exact division"""
        assert UnaryInteger(12) / 4 == UnaryInteger(3)
        assert UnaryInteger(12) / UnaryInteger(-3) == UnaryInteger(-4)
        assert 12 / UnaryInteger(6) == UnaryInteger(2)

    def test_not_divisible(self):
        """7 / 2"""
        with pytest.raises(NotDivisibleException) as exc:
            _ = UnaryInteger(7) / 2

        assert exc.value.fractions == (Fraction(7, 2),)
        assert exc.value.ring == Z
        assert exc.value.round_towards_zero() == UnaryInteger(3)
        assert exc.value.round_away_from_zero() == UnaryInteger(4)

    def test_quadratic_not_divisible(self):
        """3 / (1 + i) fails in Z[i] but still reports the UnaryInteger that was divided"""
        x = UnaryInteger(3)
        y = QuadraticInteger(1, 1, self.gaussian)
        with pytest.raises(NotDivisibleException) as exc:
            _ = x / y

        assert exc.value.dividend == x
        assert exc.value.divisor == y
        assert exc.value.ring == self.gaussian
        assert exc.value.fractions == (Fraction(3, 2), Fraction(-3, 2))

    def test_zero(self):
        """Division by zero"""
        with pytest.raises(ZeroDivisionError):
            _ = UnaryInteger(7) / 0

        with pytest.raises(ZeroDivisionError):
            divmod(UnaryInteger(7), 0)

    def test_divmod(self):
        """Nearest integer quotient, ties away from zero"""
        assert divmod(UnaryInteger(7), 2) == (UnaryInteger(4), UnaryInteger(-1))
        assert divmod(UnaryInteger(-7), 2) == (UnaryInteger(-4), UnaryInteger(1))
        assert divmod(UnaryInteger(7), -2) == (UnaryInteger(-4), UnaryInteger(-1))
        assert UnaryInteger(8) % 3 == UnaryInteger(-1)
        assert UnaryInteger(8) // 3 == UnaryInteger(3)

        for x in self.values:
            for y in self.values:
                if not y:
                    continue
                q, r = divmod(x, y)
                assert q * y + r == x
                assert 2 * abs(r.value) <= abs(y.value)


class TestQueries(UnaryIntTests):
    """Tests for degree, norm, trace and friends"""

    def test_main(self):
        """Queries over Q"""
        x = UnaryInteger(-6)
        assert x.ring == Z
        assert x.algebraic_degree == 1
        assert UnaryInteger(0).algebraic_degree == 0
        assert x.norm() == -6
        assert x.trace() == -6
        assert x.conjugate() == x
        assert x.min_polynomial_coeffs() == (6, 1)
        assert x.min_polynomial(Symbol("x")).as_expr() == Symbol("x") + 6
        assert x.to_sympy() == -6
        assert x.is_purely_real()

    def test_numeric(self):
        """Numeric values"""
        x = UnaryInteger(-6)
        assert x.real_part_numeric == -6.0
        assert x.imag_part_numeric == 0.0
        assert x.abs() == 6.0
        assert x.angle() == pytest.approx(3.141592653589793)
        assert int(x) == -6
        assert float(x) == -6.0

    def test_ordering(self):
        """Totally ordered, against ints too"""
        assert UnaryInteger(1) < UnaryInteger(2)
        assert UnaryInteger(1) <= 1
        assert UnaryInteger(3) > 2
        assert sorted(self.values, reverse=True)[0] == UnaryInteger(10)

    def test_overflow(self):
        """norm() and trace() are 64-bit"""
        x = UnaryInteger(2 ** 63)
        with pytest.raises(OverflowError):
            x.norm()

        with pytest.raises(OverflowError):
            x.trace()

        assert x.full_norm() == 2 ** 63

    def test_eq(self):
        """Equal by value, not equal to quadratic integers or ints"""
        assert UnaryInteger(3) == UnaryInteger(3)
        assert UnaryInteger(3) != QuadraticInteger(3, 0, self.gaussian)
        assert UnaryInteger(3) != 3
        assert len({UnaryInteger(3), UnaryInteger(3), UnaryInteger(4)}) == 2
