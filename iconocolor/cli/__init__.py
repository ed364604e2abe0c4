"""Iconocolor CLI.

Re-exports the Click ``cli`` group so ``iconocolor.cli:cli`` works as the
console-script entry point.
"""

from iconocolor.cli.main import cli  # noqa: F401
