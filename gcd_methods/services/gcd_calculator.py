"""
GCD Calculator Service

Three interchangeable ways of computing the greatest common divisor:
- Euclid's method (extended, so Bezout coefficients come for free)
- Consecutive integer checking
- Middle school procedure (intersection of prime factorizations)

gcd_with_algorithm normalizes signs and handles zero inputs before any
algorithm runs; gcd runs all three and refuses to answer if they disagree.
"""

import logging
from enum import Enum
from typing import Dict, NamedTuple, Union

from ..constants import (
    ALGORITHM_CONSECUTIVE,
    ALGORITHM_EUCLID,
    ALGORITHM_MIDDLE,
    UNDEFINED_MIDDLE_SCHOOL_MESSAGE,
)
from ..utils.errors import MismatchError, UndefinedError
from ..utils.number_utils import Factorization, prime_factors, reconstruct, validate_int64

logger = logging.getLogger(__name__)


class GCDAlgorithm(str, Enum):
    """Algorithms available to gcd_with_algorithm."""
    EUCLID = ALGORITHM_EUCLID
    CONSECUTIVE = ALGORITHM_CONSECUTIVE
    MIDDLE_SCHOOL = ALGORITHM_MIDDLE


class BezoutResult(NamedTuple):
    """GCD plus coefficients satisfying a*x + b*y == gcd."""
    gcd: int
    x: int
    y: int


def extended_euclid(a: int, b: int) -> BezoutResult:
    """
    Extended Euclidean algorithm.

    Runs the remainder sequence together with both coefficient sequences in
    lockstep. Each pair holds (current, previous) and steps as
    (current, previous) -> (previous, current - q * previous).

    Neither argument may be 0; that is the caller's responsibility and is
    not checked here.

    Args:
        a: First positive integer
        b: Second positive integer

    Returns:
        BezoutResult with the GCD and coefficients x, y

    Example:
        >>> extended_euclid(15, 25)
        BezoutResult(gcd=5, x=2, y=-1)
    """
    r_cur, r_prev = a, b
    s_cur, s_prev = 1, 0
    t_cur, t_prev = 0, 1

    while r_prev != 0:
        quotient = r_cur // r_prev

        r_cur, r_prev = r_prev, r_cur - quotient * r_prev
        s_cur, s_prev = s_prev, s_cur - quotient * s_prev
        t_cur, t_prev = t_prev, t_cur - quotient * t_prev

    if r_cur < 0:
        return BezoutResult(-r_cur, -s_cur, -t_cur)
    return BezoutResult(r_cur, s_cur, t_cur)


def euclid_gcd(a: int, b: int) -> int:
    """GCD by Euclid's method. Assumes neither argument is 0."""
    return extended_euclid(a, b).gcd


def modular_inverse(a: int, modulus: int) -> int:
    """
    Inverse of a modulo modulus, from the Bezout coefficients.

    Raises:
        ValueError: If modulus < 2 or a and modulus are not coprime
    """
    if modulus < 2:
        raise ValueError(f"Modulus must be at least 2, got {modulus}")

    residue = a % modulus
    if residue == 0:
        raise ValueError(f"{a} has no inverse modulo {modulus}")

    result = extended_euclid(residue, modulus)
    if result.gcd != 1:
        raise ValueError(f"{a} has no inverse modulo {modulus} (gcd is {result.gcd})")

    return result.x % modulus


def consecutive_gcd(a: int, b: int) -> int:
    """
    GCD by consecutive integer checking.

    Starts from the smaller input and counts down until a number divides both.
    Always terminates since 1 divides everything, but costs O(min(a, b))
    divisions.

    Raises:
        ZeroDivisionError: If either input is 0 (there is no fallback)
    """
    candidate = min(a, b)

    while True:
        if a % candidate == 0 and b % candidate == 0:
            return candidate
        candidate -= 1


def intersect_factors(factors_a: Factorization, factors_b: Factorization) -> Factorization:
    """
    Common part of two sorted factorizations.

    Two-pointer walk over both lists: advance whichever side has the smaller
    prime, and on a match keep the prime with the smaller exponent.
    """
    index_a = 0
    index_b = 0
    intersection = []

    while index_a < len(factors_a) and index_b < len(factors_b):
        prime_a, exponent_a = factors_a[index_a]
        prime_b, exponent_b = factors_b[index_b]

        if prime_a == prime_b:
            intersection.append((prime_a, min(exponent_a, exponent_b)))
            index_a += 1
            index_b += 1
        elif prime_a > prime_b:
            index_b += 1
        else:
            index_a += 1

    return intersection


def middle_school_gcd(a: int, b: int) -> int:
    """
    GCD by the middle school procedure.

    Factors both numbers, intersects the factorizations and multiplies the
    shared prime powers back together. Coprime inputs share nothing and give 1.
    Both inputs are sieved up to their own value, so this is only practical
    for small numbers.

    Raises:
        UndefinedError: If either input is 0
    """
    if a == 0 or b == 0:
        raise UndefinedError(UNDEFINED_MIDDLE_SCHOOL_MESSAGE)

    common = intersect_factors(prime_factors(a), prime_factors(b))
    return reconstruct(common)


def gcd_with_algorithm(a: int, b: int,
                       algorithm: Union[GCDAlgorithm, str] = GCDAlgorithm.EUCLID) -> int:
    """
    GCD of two signed 64-bit integers using the given algorithm.

    GCD(a, b) == GCD(|a|, |b|), so signs are dropped first. Zero inputs are
    handled here so that no algorithm ever sees one: GCD(0, 0) is undefined,
    and GCD(x, 0) is x.

    Args:
        a: First integer
        b: Second integer
        algorithm: GCDAlgorithm member or its string value

    Returns:
        The non-negative GCD

    Raises:
        UndefinedError: If both a and b are 0
        OutOfRangeError: If an input is outside the signed 64-bit range
        ValueError: If algorithm is not a known selector
    """
    validate_int64(a, "a")
    validate_int64(b, "b")
    algorithm = GCDAlgorithm(algorithm)

    a = abs(a)
    b = abs(b)

    if a == 0 and b == 0:
        raise UndefinedError()
    if a == 0 or b == 0:
        return max(a, b)

    logger.debug("Computing GCD(%d, %d) with %s", a, b, algorithm.value)

    if algorithm is GCDAlgorithm.EUCLID:
        return euclid_gcd(a, b)
    if algorithm is GCDAlgorithm.CONSECUTIVE:
        return consecutive_gcd(a, b)
    if algorithm is GCDAlgorithm.MIDDLE_SCHOOL:
        return middle_school_gcd(a, b)

    raise ValueError(f"Unhandled GCD algorithm: {algorithm}")


def gcd(a: int, b: int) -> int:
    """
    GCD of two signed 64-bit integers, cross-checked across all algorithms.

    Raises:
        UndefinedError: If both a and b are 0
        MismatchError: If the algorithms do not agree
        OutOfRangeError: If an input is outside the signed 64-bit range
        TypeError: If an input is not an int
    """
    results: Dict[str, int] = {
        algorithm.value: gcd_with_algorithm(a, b, algorithm)
        for algorithm in GCDAlgorithm
    }

    if len(set(results.values())) != 1:
        logger.error("GCD mismatch for (%d, %d): %s", a, b, results)
        raise MismatchError(results)

    return results[GCDAlgorithm.EUCLID.value]
