"""Public fluent API."""

from validkit.presentation.api.validator import Validator, to_rule_name

v = Validator()
"""Chain entry point bound to the process-wide default factory."""

__all__ = ["Validator", "to_rule_name", "v"]
