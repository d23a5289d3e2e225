"""
Custom Exception Classes for the Token API Schemas

This module defines the exceptions raised by the schema package. Validation
failures are normally returned as values from ``safe_validate``; the exceptions
below exist for callers that prefer the raising style (``parse``) and for
configuration problems detected at import time.

Exception Categories:
- Validation Errors: an input did not satisfy a payload schema
- Configuration Errors: environment settings are missing or invalid

Usage:
    Catch ``PayloadValidationError`` around ``parse`` calls and inspect
    ``errors`` to build a user-facing response.
"""


class ConfigurationError(Exception):
    """Raised when there are configuration-related errors."""


class PayloadValidationError(Exception):
    """Raised by ``parse`` when the input does not satisfy a payload schema."""

    def __init__(self, schema_name: str, errors):
        self.schema_name = schema_name
        self.errors = list(errors)
        summary = "; ".join(str(failure) for failure in self.errors)
        super().__init__(f"{schema_name} validation failed: {summary}")
