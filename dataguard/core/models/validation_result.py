"""
ValidationResult model representing the outcome of evaluating one value (ephemeral).
"""

from typing import List, Tuple

from pydantic import BaseModel, field_validator


class ValidationResult(BaseModel):
    """
    Outcome of evaluating a value against an ordered rule list.

    Attributes:
        is_valid: True exactly when no rule failed
        errors: One message per failing rule, in rule order (read-only tuple)
    """

    is_valid: bool
    errors: Tuple[str, ...] = ()

    @field_validator('errors')
    @classmethod
    def check_valid_consistency(cls, v, info):
        """Validate that is_valid matches the presence of errors."""
        is_valid = info.data.get('is_valid')
        if is_valid and v:
            raise ValueError("is_valid=True but errors is not empty")
        if is_valid is False and not v:
            raise ValueError("is_valid=False but errors is empty")
        return v

    @classmethod
    def from_errors(cls, errors: List[str]) -> "ValidationResult":
        """Build a result whose validity is derived from ``errors``."""
        return cls(is_valid=not errors, errors=tuple(errors))

    class Config:
        frozen = True
        validate_default = True
        json_schema_extra = {
            "example": {
                "is_valid": False,
                "errors": [
                    "Minimum length is 8 characters",
                    "String contains potentially unsafe SQL patterns"
                ]
            }
        }
