from functools import cache

from sympy import factorint


@cache
def _factor(n: int) -> dict[int, int]:
    """Prime factorization of abs(n), cached since the same radicands come up over and over."""
    return {int(p): int(e) for p, e in factorint(abs(n)).items()}


def is_squarefree(n: int) -> bool:
    """
    True iff no prime square divides n.

    Sign is ignored, so -1 and 1 count as squarefree. 0 is divisible by every square.
    """
    n = int(n)
    if n == 0:
        return False

    return all(e == 1 for e in _factor(n).values())


def round_div_ties_away_from_zero(a: int, b: int) -> int:
    """Round a/b to nearest integer; ties go away from zero. b must be > 0."""
    if b <= 0:
        raise ValueError("b must be > 0")

    if a >= 0:
        return (a + (b // 2)) // b

    # a < 0
    return -((-a + (b // 2)) // b)
