"""
Greatest common divisors three ways: Euclid's method, consecutive integer
checking and the middle school procedure, plus the prime sieve and
factorization helpers they rely on.

Example:
    >>> from gcd_methods import gcd, gcd_with_algorithm, GCDAlgorithm
    >>> gcd(15, 25)
    5
    >>> gcd_with_algorithm(-17, 13, GCDAlgorithm.MIDDLE_SCHOOL)
    1
"""
from .services.gcd_calculator import (
    BezoutResult,
    GCDAlgorithm,
    consecutive_gcd,
    euclid_gcd,
    extended_euclid,
    gcd,
    gcd_with_algorithm,
    intersect_factors,
    middle_school_gcd,
    modular_inverse,
)
from .utils.errors import (
    GCDError,
    MismatchError,
    OutOfRangeError,
    PreconditionViolation,
    UndefinedError,
)
from .utils.number_utils import occurrences, prime_factors, prime_sieve, reconstruct

__version__ = "1.0.0"

__all__ = [
    "BezoutResult",
    "GCDAlgorithm",
    "GCDError",
    "MismatchError",
    "OutOfRangeError",
    "PreconditionViolation",
    "UndefinedError",
    "consecutive_gcd",
    "euclid_gcd",
    "extended_euclid",
    "gcd",
    "gcd_with_algorithm",
    "intersect_factors",
    "middle_school_gcd",
    "modular_inverse",
    "occurrences",
    "prime_factors",
    "prime_sieve",
    "reconstruct",
]
