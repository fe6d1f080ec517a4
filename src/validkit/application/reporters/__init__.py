"""Reporters for validation failures."""

from validkit.application.reporters.console import ConsoleConfig, ConsoleReporter

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
]
