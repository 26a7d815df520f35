"""
Shared exception types for recursion_exercises.
"""


class RecursionExerciseError(Exception):
    """Base class for errors raised by this package"""
    pass


class InvalidArgumentError(RecursionExerciseError, ValueError):
    """An argument is outside the domain a function accepts"""
    pass


class ConfigError(RecursionExerciseError):
    """Configuration file could not be read or parsed"""
    pass


__all__ = ["RecursionExerciseError", "InvalidArgumentError", "ConfigError"]
