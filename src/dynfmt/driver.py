"""Substitution driver shared by all dialects."""

import logging

from dynfmt.arguments import ArgumentSpec
from dynfmt.arguments import WidthKind
from dynfmt.core.config import DEFAULT_CONFIG
from dynfmt.core.config import FormatConfig
from dynfmt.sources import ArgumentResolver
from dynfmt.sources import to_source
from dynfmt.types import FormatDialect

logger = logging.getLogger(__name__)


def substitute(
    dialect: FormatDialect,
    template: str,
    args: object,
    config: FormatConfig = DEFAULT_CONFIG,
) -> str:
    """Render ``template`` by replacing every placeholder span.

    Text outside placeholder spans is copied unchanged. The first error raised
    by the scanner, the resolver or the renderer aborts the call.

    Args:
        dialect: Dialect providing the scanner and renderer
        template: Template string
        args: Positional sequence or named mapping of values
        config: Call configuration

    Returns:
        Formatted string

    Raises:
        TypeError: When ``template`` is not a string or ``args`` is neither a
            sequence nor a mapping
        FormatError: When a placeholder cannot be parsed, resolved or rendered

    """
    if not isinstance(template, str):
        msg = f"Format template must be str, got {type(template).__name__}"
        raise TypeError(msg)

    resolver = ArgumentResolver(to_source(args))
    parts: list[str] = []
    last = 0
    count = 0

    for spec in dialect.iter_args(template, config):
        parts.append(template[last : spec.start])
        parts.append(_replacement(dialect, spec, resolver, config))
        last = spec.end
        count += 1

    logger.debug(
        "Formatted %d placeholder(s) with %s", count, type(dialect).__name__
    )
    if not count:
        return template

    parts.append(template[last:])
    return "".join(parts)


def _replacement(
    dialect: FormatDialect,
    spec: ArgumentSpec,
    resolver: ArgumentResolver,
    config: FormatConfig,
) -> str:
    if spec.is_literal:
        return spec.literal

    # A "*" width is read before the value so it takes the earlier argument.
    width: int | None = None
    match spec.width.kind:
        case WidthKind.LITERAL:
            width = spec.width.value
        case WidthKind.ARGUMENT:
            width = resolver.next_width()

    value = resolver.resolve(spec.position)
    return dialect.render(spec, value, width, config)
