"""
User Output Abstraction

Separates user-facing messages (results, status, errors) from debug
logging, so the CLI can be silenced or redirected without touching the
logging configuration.
"""

import logging
import sys
from typing import Any, Optional, TextIO


class UserOutput:
    """
    Unified handler for user-facing output.

    Usage:
        output = UserOutput()
        output.result(5)
        output.error("GCD is undefined for input 0 and 0.")

        output.section("Factorization")
        output.item("60", "2^2 * 3 * 5")
    """

    def __init__(
        self,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        quiet: bool = False,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize output handler.

        Args:
            stdout: Output stream for normal messages (default: sys.stdout)
            stderr: Output stream for errors (default: sys.stderr)
            quiet: If True, suppress everything except results and errors
            logger: Optional logger for mirrored messages
        """
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.quiet = quiet
        self.logger = logger or logging.getLogger(__name__)

    def result(self, value: Any) -> None:
        """Print a computed result on its own line (shown even in quiet mode)."""
        print(value, file=self.stdout)

    def notice(self, message: str, log: bool = True) -> None:
        """Print a message verbatim to stdout, even in quiet mode."""
        print(message, file=self.stdout)
        if log:
            self.logger.info(message)

    def info(self, message: str, log: bool = False) -> None:
        """
        Print informational message to user.

        Args:
            message: Message to display
            log: If True, also log to info logger
        """
        if not self.quiet:
            print(message, file=self.stdout)
        if log:
            self.logger.info(message)

    def warning(self, message: str, log: bool = True) -> None:
        """Print warning message to user."""
        if not self.quiet:
            print(f"Warning: {message}", file=self.stdout)
        if log:
            self.logger.warning(message)

    def error(self, message: str, log: bool = True) -> None:
        """
        Print error message to user (always shown, even in quiet mode).

        Args:
            message: Error message to display
            log: If True, also log to error logger
        """
        print(f"Error: {message}", file=self.stderr)
        if log:
            self.logger.error(message)

    def section(self, title: str) -> None:
        """Print a section header."""
        if not self.quiet:
            print(f"\n{title}", file=self.stdout)

    def item(self, label: str, value: Any, indent: int = 2) -> None:
        """
        Print a labeled item (key-value pair).

        Args:
            label: Item label
            value: Item value
            indent: Number of spaces to indent
        """
        if not self.quiet:
            prefix = " " * indent
            print(f"{prefix}{label}: {value}", file=self.stdout)
