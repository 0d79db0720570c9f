"""Public entry points: ``format`` and ``scan``."""

from collections.abc import Iterator

from dynfmt.arguments import ArgumentSpec
from dynfmt.core.config import DEFAULT_CONFIG
from dynfmt.core.config import FormatConfig
from dynfmt.dialects import get_dialect
from dynfmt.driver import substitute
from dynfmt.enums import Dialect
from dynfmt.observability import format_with_observability


def format(
    dialect: Dialect | str,
    template: str,
    args: object,
    *,
    config: FormatConfig | None = None,
) -> str:
    """Format a template in the given dialect.

    Args:
        dialect: ``Dialect.SIMPLE_CURLY`` or ``Dialect.PYTHON_PRINTF``
        template: Template string
        args: Positional sequence, or named mapping / pydantic model
        config: Optional call configuration

    Returns:
        Formatted string

    Raises:
        ValueError: When the dialect is not supported
        FormatError: When a placeholder cannot be parsed, resolved or rendered

    """
    config = config or DEFAULT_CONFIG
    if config.trace:
        return format_with_observability(dialect, template, args, config)
    return substitute(get_dialect(dialect), template, args, config)


def scan(
    dialect: Dialect | str,
    template: str,
    *,
    config: FormatConfig | None = None,
) -> Iterator[ArgumentSpec]:
    """Lazily parse the placeholders of a template without resolving them.

    A malformed placeholder raises ``ParseError`` once iteration reaches it.

    Raises:
        TypeError: When template is not a string
        ValueError: When the dialect is not supported

    """
    if not isinstance(template, str):
        msg = f"Format template must be str, got {type(template).__name__}"
        raise TypeError(msg)
    return get_dialect(dialect).iter_args(template, config or DEFAULT_CONFIG)
