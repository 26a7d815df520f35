from .errors import ConfigError, InvalidArgumentError, RecursionExerciseError
from .fibonacci import fibonacci, fibonacci_sequence
from .palindrome import check_palindrome, is_palindrome
from .reverse import reverse, reverse_sequence

__version__ = "0.1.0"

__all__ = [
    "fibonacci",
    "fibonacci_sequence",
    "is_palindrome",
    "check_palindrome",
    "reverse_sequence",
    "reverse",
    "RecursionExerciseError",
    "InvalidArgumentError",
    "ConfigError",
]
