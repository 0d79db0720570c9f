"""Simple curly-brace dialect.

This syntax is the subset of Python's ``str.format`` without format specs:

1. ``{}`` refers to the next positional argument.
2. ``{0}`` refers to the argument at index ``0``.
3. ``{name}`` refers to the named argument ``"name"``.

Every argument renders in display mode. ``{{`` and ``}}`` stand for literal
braces.
"""

from collections.abc import Iterator
import re

from dynfmt.arguments import ArgumentSpec
from dynfmt.arguments import Auto
from dynfmt.arguments import Index
from dynfmt.arguments import Key
from dynfmt.arguments import Position
from dynfmt.core.config import DEFAULT_CONFIG
from dynfmt.core.config import FormatConfig
from dynfmt.core.errors import ParseError
from dynfmt.driver import substitute
from dynfmt.values import render_display

_TOKEN_RE = re.compile(r"\{\{|\}\}|\{(?P<key>\w*)\}|[{}]")


def parse_position(key: str) -> Position:
    """Map a placeholder body to its position."""
    if not key:
        return Auto()
    if key.isascii() and key.isdigit():
        return Index(value=int(key))
    return Key(name=key)


class SimpleCurlyFormat:
    """Format implementation for ``{}``-style templates."""

    def iter_args(
        self, template: str, config: FormatConfig = DEFAULT_CONFIG
    ) -> Iterator[ArgumentSpec]:
        """Lazily yield the placeholders of ``template``.

        Args:
            template: Template string
            config: Call configuration (escape handling)

        Yields:
            One spec per placeholder or escaped brace

        Raises:
            ParseError: On a brace that starts no valid placeholder

        """
        for match in _TOKEN_RE.finditer(template):
            start, end = match.span()
            token = match.group()
            key = match.group("key")

            if key is not None:
                spec = ArgumentSpec(start=start, end=end)
                yield spec.with_position(parse_position(key))
            elif token in ("{{", "}}") and config.escapes:
                yield ArgumentSpec.escape(start, end, token[0])
            elif token[0] == "{":
                raise ParseError(start, "unmatched '{' in format string")
            else:
                raise ParseError(start, "single '}' encountered in format string")

    def render(
        self,
        spec: ArgumentSpec,
        value: object,
        width: int | None,
        config: FormatConfig = DEFAULT_CONFIG,
    ) -> str:
        """Render a value in display mode; curly placeholders carry no width."""
        return render_display(value)

    def format(
        self,
        template: str,
        args: object,
        config: FormatConfig | None = None,
    ) -> str:
        """Format ``template`` with ``args``.

        Example:
            ```python
            SimpleCurlyFormat().format("hello, {}", ["world"])  # "hello, world"
            ```

        """
        return substitute(self, template, args, config or DEFAULT_CONFIG)
