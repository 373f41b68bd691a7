"""Utility modules."""

from .colors import Colors
from .config import Config, ConfigValidationError, ConfigValidationWarning

__all__ = [
    'Colors',
    'Config',
    'ConfigValidationError',
    'ConfigValidationWarning',
]
