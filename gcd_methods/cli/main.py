#!/usr/bin/env python3
"""
gcd-methods command line entry point.

Usage:
    gcd-methods 15 25
    gcd-methods --algorithm middle --show-factors 60 -84
    python -m gcd_methods --config gcd.yaml 17 13
"""
import logging
import sys
from typing import List, Optional

import yaml
from pydantic import ValidationError

from ..config import Settings, load_settings
from ..constants import ALGORITHM_ALL, ALGORITHM_CONSECUTIVE, ALGORITHM_MIDDLE
from ..services.gcd_calculator import extended_euclid, gcd, gcd_with_algorithm
from ..utils.errors import GCDError, MismatchError, OutOfRangeError
from ..utils.number_utils import Factorization, prime_factors, validate_int64
from .arg_parser import OperandError, parse_args, parse_operands
from .user_output import UserOutput

logger = logging.getLogger(__name__)


def setup_logging(settings: Settings, verbose: bool = False) -> None:
    """Set up logging configuration."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, settings.log_level),
        format=settings.log_format
    )


def format_factorization(factors: Factorization) -> str:
    """Render [(2, 2), (3, 1)] as '2^2 * 3'."""
    if not factors:
        return "(no prime factors)"
    return " * ".join(
        f"{prime}^{exponent}" if exponent > 1 else str(prime)
        for prime, exponent in factors
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    output = UserOutput(quiet=args.quiet, logger=logger)

    try:
        settings = load_settings(args.config)
    except (FileNotFoundError, ValueError, ValidationError, yaml.YAMLError) as e:
        output.error(f"Invalid configuration: {e}", log=False)
        return 1

    setup_logging(settings, args.verbose)

    try:
        a, b = parse_operands(args.operands)
    except OperandError as e:
        output.notice(str(e), log=False)
        return 0

    try:
        validate_int64(a, "a")
        validate_int64(b, "b")
    except OutOfRangeError as e:
        output.notice(str(e))
        return 0

    algorithm = args.algorithm or settings.default_algorithm
    largest = max(abs(a), abs(b))
    needs_sieve = algorithm in (ALGORITHM_MIDDLE, ALGORITHM_ALL) or args.show_factors
    if needs_sieve and largest > settings.max_sieve_bound:
        output.error(
            f"{largest} exceeds the factorization bound {settings.max_sieve_bound}; "
            f"use --algorithm euclid or raise max_sieve_bound",
            log=False
        )
        return 0

    # Consecutive checking counts down from the smaller magnitude
    smallest = min(abs(a), abs(b))
    if algorithm == ALGORITHM_CONSECUTIVE and smallest > settings.max_sieve_bound:
        output.error(
            f"{smallest} exceeds the consecutive checking bound {settings.max_sieve_bound}; "
            f"use --algorithm euclid or raise max_sieve_bound",
            log=False
        )
        return 0

    try:
        if algorithm == ALGORITHM_ALL:
            value = gcd(a, b)
        else:
            value = gcd_with_algorithm(a, b, algorithm)
    except MismatchError as e:
        logger.error("Algorithm results: %s", e.results)
        output.notice(str(e))
        return 1
    except GCDError as e:
        output.notice(str(e))
        return 0

    output.result(value)

    if args.show_factors:
        output.section("Prime factorization")
        output.item(str(abs(a)), format_factorization(prime_factors(abs(a))))
        output.item(str(abs(b)), format_factorization(prime_factors(abs(b))))

    if args.bezout:
        if a == 0 or b == 0:
            output.warning("Bezout coefficients need two non-zero operands", log=False)
        else:
            coefficients = extended_euclid(abs(a), abs(b))
            # Carry the operand signs over so a*x + b*y holds for the signed inputs
            x = coefficients.x if a > 0 else -coefficients.x
            y = coefficients.y if b > 0 else -coefficients.y
            output.section("Bezout coefficients")
            output.item("x", x)
            output.item("y", y)
            output.item("check", f"{a}*{x} + {b}*{y} = {a * x + b * y}")

    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
