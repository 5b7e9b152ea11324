"""
ValidationRule model pairing a predicate over a value with failure messaging.
"""

from typing import Any, Callable

from pydantic import BaseModel


class ValidationRule(BaseModel):
    """
    An immutable validation rule.

    Attributes:
        name: Identifier used in diagnostics ("email", "min_length")
        predicate: Pure function returning True when the value passes
        message: Static failure text
        dynamic_message: Optional function building the failure text from the
            value; takes precedence over ``message`` when set
    """

    name: str | None = None
    predicate: Callable[[Any], bool]
    message: str
    dynamic_message: Callable[[Any], str] | None = None

    class Config:
        frozen = True

    def check(self, value: Any) -> bool:
        """Return True if ``value`` satisfies this rule."""
        return bool(self.predicate(value))

    def failure_message(self, value: Any) -> str:
        """Message reported when ``value`` fails this rule."""
        if self.dynamic_message is not None:
            return self.dynamic_message(value)
        return self.message

    def __repr__(self) -> str:
        return f"ValidationRule(name={self.name!r}, message={self.message!r})"
