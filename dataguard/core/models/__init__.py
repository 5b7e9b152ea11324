"""
Core data models for dataguard.

Both models use Pydantic and are frozen once constructed.
"""

from .validation_result import ValidationResult
from .validation_rule import ValidationRule

__all__ = [
    "ValidationRule",
    "ValidationResult",
]
