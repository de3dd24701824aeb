"""
Number utilities: input validation, the prime sieve and prime factorization.

The factorization helpers back the middle school GCD procedure and are kept
deliberately simple: prime_factors sieves all the way up to n, so memory use
grows linearly with the input.
"""
import logging
import math
import re
from typing import List, Sequence, Tuple

from ..constants import INT64_MAX, INT64_MIN, NON_FACTOR_PRIME_MESSAGE
from .errors import OutOfRangeError, PreconditionViolation

logger = logging.getLogger(__name__)

Factorization = List[Tuple[int, int]]


def validate_integer(number_str: str) -> bool:
    """Validate that string represents a (possibly signed) integer."""
    if not isinstance(number_str, str):
        return False

    # Optional sign followed by digits only
    if not re.match(r'^[+-]?\d+$', number_str):
        return False

    return True


def validate_int64(value: int, name: str = "value") -> int:
    """
    Check that value is an integer inside the signed 64-bit domain.

    Args:
        value: Integer to check
        name: Argument name used in error messages

    Returns:
        The value unchanged

    Raises:
        TypeError: If value is not an int
        OutOfRangeError: If value does not fit in a signed 64-bit integer
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")

    if value < INT64_MIN or value > INT64_MAX:
        raise OutOfRangeError(
            f"{name} is outside the signed 64-bit range: {value}"
        )

    return value


def prime_sieve(n: int) -> List[int]:
    """
    Sieve of Eratosthenes: all primes up to and including n.

    Works on a list indexed 0..n where every slot starts out holding its own
    index (0 and 1 are pre-marked as 0, i.e. not prime). Multiples of every
    surviving candidate up to sqrt(n) are zeroed, starting from the square of
    the candidate since smaller multiples were already removed by smaller
    primes. Whatever is still non-zero afterwards is prime.

    Args:
        n: Upper bound (inclusive)

    Returns:
        Ascending list of primes <= n; empty for n < 2

    Raises:
        ValueError: If n is negative

    Example:
        >>> prime_sieve(25)
        [2, 3, 5, 7, 11, 13, 17, 19, 23]
    """
    if n < 0:
        raise ValueError(f"Sieve bound must be non-negative, got {n}")
    if n < 2:
        return []

    candidates = [0, 0] + list(range(2, n + 1))

    for prime in range(2, math.isqrt(n) + 1):
        if candidates[prime] == 0:
            continue

        multiple = prime * prime
        while multiple <= n:
            candidates[multiple] = 0
            multiple += prime

    return [value for value in candidates if value != 0]


def occurrences(n: int, prime: int) -> int:
    """
    Exponent of prime in the factorization of n.

    The caller must pass a prime that divides n. Anything else is a broken
    contract and raises PreconditionViolation instead of returning 0, so a
    wrong factorization can never be built silently.

    Args:
        n: Number being factored (non-zero)
        prime: Prime factor of n

    Returns:
        How many times prime divides n (always >= 1)

    Raises:
        PreconditionViolation: If prime does not divide n, n is 0 or prime < 2

    Example:
        >>> occurrences(60, 2)
        2
    """
    if n == 0 or prime < 2:
        raise PreconditionViolation(
            f"occurrences requires n != 0 and prime >= 2, got n={n}, prime={prime}"
        )
    if n % prime != 0:
        raise PreconditionViolation(f"{NON_FACTOR_PRIME_MESSAGE} (n={n}, prime={prime})")

    count = 1
    remainder = n // prime

    while remainder % prime == 0:
        count += 1
        remainder //= prime

    return count


def prime_factors(n: int) -> Factorization:
    """
    Prime factorization of n as (prime, exponent) pairs.

    Sieves every prime up to n, keeps the ones dividing n and pairs each with
    its exponent. Primes come out ascending because the sieve output is.

    Example:
        >>> prime_factors(60)
        [(2, 2), (3, 1), (5, 1)]
    """
    factors = [(prime, occurrences(n, prime)) for prime in prime_sieve(n) if n % prime == 0]
    logger.debug("Factored %d into %d distinct primes", n, len(factors))
    return factors


def reconstruct(factors: Sequence[Tuple[int, int]]) -> int:
    """Multiply a factorization back out (empty factorization gives 1)."""
    product = 1
    for prime, exponent in factors:
        product *= prime ** exponent
    return product
