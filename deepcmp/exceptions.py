"""Custom exceptions for deepcmp."""


class DeepCmpError(Exception):
    """Base exception for deepcmp errors."""
    pass


class ConfigError(DeepCmpError):
    """Raised when a comparison configuration is invalid."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class FixtureError(DeepCmpError):
    """Raised when a fixture file cannot be used."""
    def __init__(self, path: str, reason: str):
        super().__init__(f"Invalid fixture '{path}': {reason}")
        self.path = path
        self.reason = reason


class DiffAssertionError(DeepCmpError, AssertionError):
    """Raised by assert_equal when two values differ."""
    def __init__(self, diffs: list, msg: str = None):
        lines = [msg or f"Values differ ({len(diffs)} difference(s)):"]
        lines.extend(f"  {d}" for d in diffs)
        super().__init__("\n".join(lines))
        self.diffs = list(diffs)
