"""Registry of the built-in placeholder dialects."""

from dynfmt.dialects.curly import SimpleCurlyFormat
from dynfmt.dialects.printf import PythonFormat
from dynfmt.enums import Dialect
from dynfmt.types import FormatDialect

__all__ = [
    "PythonFormat",
    "SimpleCurlyFormat",
    "get_dialect",
]


def get_dialect(dialect: Dialect | str) -> FormatDialect:
    """Get the implementation of a dialect.

    Args:
        dialect: Dialect selector or its string value

    Returns:
        Dialect instance

    Raises:
        ValueError: When the dialect is not supported

    """
    match dialect:
        case Dialect.SIMPLE_CURLY:
            return SimpleCurlyFormat()
        case Dialect.PYTHON_PRINTF:
            return PythonFormat()
    msg = f"Unsupported dialect: {dialect!s}"
    raise ValueError(msg)
