"""
Errors raised while building rules.
"""


class RuleConfigError(ValueError):
    """Raised when a rule cannot be built from the given name or parameters."""
    pass
