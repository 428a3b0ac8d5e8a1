#!/usr/bin/env python3
"""
Custom exceptions for the scoring engines.

The scoring functions themselves are total and never raise for missing data;
these exceptions are raised only at the boundary (settings resolution,
record parsing, CLI arguments).
"""


class ScoringException(Exception):
    """Base exception for scoring engine errors."""
    pass


class InvalidSettingsError(ScoringException):
    """Raised when quality settings cannot be resolved into a usable config."""
    pass


class InvalidTimeRangeError(ScoringException):
    """Raised when an unknown analytics time range is requested."""
    pass


class InputValidationError(ScoringException):
    """Raised when an upstream record does not match the expected shape."""

    def __init__(self, record_kind: str, index: int, message: str):
        self.record_kind = record_kind
        self.index = index
        super().__init__(f"Invalid {record_kind} at index {index}: {message}")
