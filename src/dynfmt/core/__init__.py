"""Core functionality for dynfmt.

This module contains the error taxonomy and call configuration.
"""

from dynfmt.core.config import DEFAULT_CONFIG
from dynfmt.core.config import FormatConfig
from dynfmt.core.errors import FormatError
from dynfmt.core.errors import KeyValidationError
from dynfmt.core.errors import MissingArgumentError
from dynfmt.core.errors import ParseError
from dynfmt.core.errors import TypeMismatchError
from dynfmt.core.errors import UnsupportedPositionError

__all__ = [
    "DEFAULT_CONFIG",
    "FormatConfig",
    "FormatError",
    "KeyValidationError",
    "MissingArgumentError",
    "ParseError",
    "TypeMismatchError",
    "UnsupportedPositionError",
]
