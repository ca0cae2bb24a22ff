"""Validation of stylesheet source trees before generation."""

from bemgen.validation.validator import ValidationError, validate, validate_or_raise

__all__ = ["ValidationError", "validate", "validate_or_raise"]
