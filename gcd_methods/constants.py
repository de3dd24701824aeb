"""
Shared constants for the GCD library.

This module centralizes the numeric domain bounds, algorithm names and
user-facing error messages so every caller reports them the same way.
"""

from typing import List

# Signed 64-bit input domain
INT64_MIN: int = -(2 ** 63)
INT64_MAX: int = 2 ** 63 - 1

# Algorithm selector values accepted by gcd_with_algorithm and the CLI
ALGORITHM_EUCLID = "euclid"
ALGORITHM_CONSECUTIVE = "consecutive"
ALGORITHM_MIDDLE = "middle"
# Runs every algorithm and cross-checks the results
ALGORITHM_ALL = "all"

ALGORITHM_CHOICES: List[str] = [
    ALGORITHM_EUCLID,
    ALGORITHM_CONSECUTIVE,
    ALGORITHM_MIDDLE,
    ALGORITHM_ALL,
]

# Error messages
UNDEFINED_GCD_MESSAGE = "GCD is undefined for input 0 and 0."
UNDEFINED_MIDDLE_SCHOOL_MESSAGE = "Middle school procedure is undefined for input 0."
MISMATCH_MESSAGE = "GCD does not match across all algorithms."
NON_FACTOR_PRIME_MESSAGE = "Cannot find number of occurrences for non-factor prime."
