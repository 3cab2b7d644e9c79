from quadint.exceptions import AlgebraicDegreeOverflowException, NotDivisibleException, UnsupportedNumberDomainException
from quadint.quad import QuadraticInteger, UnaryInteger, integer
from quadint.ring import ImaginaryQuadraticRing, PowerBasis, QuadraticRing, RealQuadraticRing, UnaryRing, Z, ring

__all__ = [
    "AlgebraicDegreeOverflowException",
    "ImaginaryQuadraticRing",
    "NotDivisibleException",
    "PowerBasis",
    "QuadraticInteger",
    "QuadraticRing",
    "RealQuadraticRing",
    "UnaryInteger",
    "UnaryRing",
    "UnsupportedNumberDomainException",
    "Z",
    "integer",
    "ring",
]
