"""
Unit tests for number utility functions.

Tests cover:
- Prime sieve
- Prime occurrence counting
- Prime factorization and reconstruction
- Integer validation
"""
import pytest

from gcd_methods.utils.errors import OutOfRangeError, PreconditionViolation
from gcd_methods.utils.number_utils import (
    occurrences,
    prime_factors,
    prime_sieve,
    reconstruct,
    validate_int64,
    validate_integer,
)


def is_prime_by_trial_division(n: int) -> bool:
    if n < 2:
        return False
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 1
    return True


class TestPrimeSieve:
    """Tests for the sieve of Eratosthenes."""

    def test_primes_up_to_25(self):
        assert prime_sieve(25) == [2, 3, 5, 7, 11, 13, 17, 19, 23]

    def test_empty_for_zero_and_one(self):
        """No primes below 2."""
        assert prime_sieve(0) == []
        assert prime_sieve(1) == []

    def test_bound_is_inclusive(self):
        assert prime_sieve(2) == [2]
        assert prime_sieve(3) == [2, 3]
        assert prime_sieve(23)[-1] == 23

    def test_perfect_square_bound(self):
        """Composite squares at the bound must be removed."""
        assert 49 not in prime_sieve(49)
        assert prime_sieve(49)[-1] == 47

    def test_matches_trial_division(self):
        """Every returned value is prime, strictly increasing, and none is omitted."""
        primes = prime_sieve(1000)
        assert primes == sorted(set(primes))
        assert primes == [n for n in range(1001) if is_prime_by_trial_division(n)]
        assert len(primes) == 168

    def test_negative_bound_raises(self):
        with pytest.raises(ValueError, match="non-negative"):
            prime_sieve(-5)


class TestOccurrences:
    """Tests for prime occurrence counting."""

    def test_known_exponents(self):
        assert occurrences(60, 2) == 2
        assert occurrences(60, 3) == 1
        assert occurrences(60, 5) == 1

    def test_prime_power(self):
        assert occurrences(1024, 2) == 10
        assert occurrences(3 ** 7, 3) == 7

    def test_number_equal_to_prime(self):
        assert occurrences(13, 13) == 1

    def test_non_factor_prime_fails(self):
        """A prime that does not divide n is a contract violation."""
        with pytest.raises(PreconditionViolation, match="non-factor prime"):
            occurrences(60, 7)

    def test_violation_is_not_a_domain_error(self):
        """Caller bugs surface as assertion failures."""
        with pytest.raises(AssertionError):
            occurrences(10, 3)

    def test_degenerate_inputs_fail(self):
        """Zero n or a prime below 2 would never terminate."""
        with pytest.raises(PreconditionViolation):
            occurrences(0, 2)
        with pytest.raises(PreconditionViolation):
            occurrences(10, 1)
        with pytest.raises(PreconditionViolation):
            occurrences(10, 0)


class TestPrimeFactors:
    """Tests for prime factorization."""

    def test_factor_sixty(self):
        factors = prime_factors(60)
        assert factors == [(2, 2), (3, 1), (5, 1)]
        assert 2 ** 2 * 3 ** 1 * 5 ** 1 == 60

    def test_prime_input(self):
        assert prime_factors(97) == [(97, 1)]

    def test_prime_power_input(self):
        assert prime_factors(2 ** 12) == [(2, 12)]

    def test_zero_and_one_have_no_factors(self):
        assert prime_factors(0) == []
        assert prime_factors(1) == []

    def test_primes_ascending_exponents_positive(self):
        factors = prime_factors(2 * 3 * 3 * 7 * 11 * 11 * 11)
        primes = [prime for prime, _ in factors]
        assert primes == sorted(primes)
        assert all(exponent >= 1 for _, exponent in factors)

    def test_reconstruction_round_trip(self):
        """Folding prime^exponent gives back n for every n >= 2."""
        for n in range(2, 600):
            assert reconstruct(prime_factors(n)) == n, f"round trip failed for {n}"


class TestReconstruct:
    """Tests for multiplying factorizations back out."""

    def test_empty_is_one(self):
        assert reconstruct([]) == 1

    def test_product(self):
        assert reconstruct([(2, 3), (5, 2)]) == 200


class TestValidateInteger:
    """Tests for integer string validation."""

    def test_valid_integers(self):
        assert validate_integer("0")
        assert validate_integer("15")
        assert validate_integer("-25")
        assert validate_integer("+7")
        assert validate_integer("007")

    def test_invalid_integers(self):
        assert not validate_integer("abc")
        assert not validate_integer("3.14")
        assert not validate_integer("1e10")
        assert not validate_integer("")
        assert not validate_integer("-")
        assert not validate_integer("--5")

    def test_non_string_input(self):
        assert not validate_integer(123)
        assert not validate_integer(None)


class TestValidateInt64:
    """Tests for the signed 64-bit domain check."""

    def test_bounds_accepted(self):
        assert validate_int64(2 ** 63 - 1) == 2 ** 63 - 1
        assert validate_int64(-(2 ** 63)) == -(2 ** 63)
        assert validate_int64(0) == 0

    def test_out_of_range(self):
        with pytest.raises(OutOfRangeError, match="signed 64-bit"):
            validate_int64(2 ** 63)
        with pytest.raises(OutOfRangeError):
            validate_int64(-(2 ** 63) - 1)

    def test_out_of_range_is_overflow_error(self):
        with pytest.raises(OverflowError):
            validate_int64(2 ** 64, "b")

    def test_non_integers_rejected(self):
        with pytest.raises(TypeError, match="must be an integer"):
            validate_int64(1.5)
        with pytest.raises(TypeError):
            validate_int64("15")
        with pytest.raises(TypeError):
            validate_int64(True)
