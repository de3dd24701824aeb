"""
Argument parsing for the gcd-methods command line.
"""
import argparse
from typing import List, Optional, Tuple

from ..constants import ALGORITHM_CHOICES
from ..utils.number_utils import validate_integer


class OperandError(ValueError):
    """Command line operands are missing, too many, or not integers."""


def parse_signed_int(value: str) -> int:
    """
    Parse a signed decimal integer operand.

    Examples:
        "15" -> 15
        "-25" -> -25
        "+7" -> 7

    Raises:
        OperandError: If value is not a decimal integer
    """
    stripped = value.strip()
    if not validate_integer(stripped):
        raise OperandError(f"Invalid integer: {value!r}")
    return int(stripped)


def parse_operands(values: List[str]) -> Tuple[int, int]:
    """
    Turn the positional arguments into the two GCD operands.

    Raises:
        OperandError: With the message to show the user
    """
    if not values:
        raise OperandError("Must pass two integers to get GCD")
    if len(values) != 2:
        raise OperandError(f"Expected exactly two integers, got {len(values)}")

    return parse_signed_int(values[0]), parse_signed_int(values[1])


def create_gcd_parser() -> argparse.ArgumentParser:
    """Create argument parser for the GCD command line."""
    parser = argparse.ArgumentParser(
        prog='gcd-methods',
        description='Greatest common divisor by Euclid, consecutive integer checking '
                    'or the middle school procedure'
    )

    # Operands are validated by parse_operands so malformed input gets a message, not exit 2
    parser.add_argument('operands', nargs='*', metavar='N',
                        help='Two integers (negative values allowed)')

    parser.add_argument('--algorithm', '-a', choices=ALGORITHM_CHOICES,
                        help='Algorithm to use; "all" runs every algorithm and cross-checks '
                             '(default: from configuration)')
    parser.add_argument('--config', help='YAML configuration file (NAME.local.yaml beside it overrides it)')

    parser.add_argument('--show-factors', action='store_true',
                        help='Also print the prime factorization of both operands')
    parser.add_argument('--bezout', action='store_true',
                        help='Also print Bezout coefficients x, y with a*x + b*y = gcd')

    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
    parser.add_argument('--quiet', '-q', action='store_true', help='Only print the result and errors')

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return create_gcd_parser().parse_args(argv)
