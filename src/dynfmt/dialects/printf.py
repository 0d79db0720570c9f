"""Python printf-style dialect.

Placeholders follow the grammar of Python's ``%`` operator, restricted to the
conversions below:

    %[(name)][#0-]*[*|digits]<conversion>

===========  ==============================
Conversion   Rendering
===========  ==============================
``s``        display text
``r``        repr text (``#`` pretty-prints)
``o``        octal (``#`` adds ``0o``)
``x``/``X``  hexadecimal (``#`` adds ``0x``/``0X``)
``e``/``E``  scientific notation
===========  ==============================

``%%`` stands for a literal percent sign.
"""

from collections.abc import Iterator

from dynfmt.arguments import NO_WIDTH
from dynfmt.arguments import ArgumentSpec
from dynfmt.arguments import Auto
from dynfmt.arguments import Key
from dynfmt.arguments import Width
from dynfmt.core.config import DEFAULT_CONFIG
from dynfmt.core.config import FormatConfig
from dynfmt.core.errors import ParseError
from dynfmt.driver import substitute
from dynfmt.enums import Conversion
from dynfmt.rendering import render_printf

_FLAGS = {"#": "alternate", "0": "zero_pad", "-": "left_align"}
_DIGITS = "0123456789"


def parse_placeholder(
    template: str, start: int, config: FormatConfig = DEFAULT_CONFIG
) -> ArgumentSpec:
    """Parse the placeholder whose ``%`` sits at ``start``.

    Args:
        template: Template string
        start: Offset of the ``%`` character
        config: Call configuration (escape handling)

    Returns:
        Spec covering the whole placeholder

    Raises:
        ParseError: When the placeholder is incomplete or its conversion
            character is not supported

    """
    length = len(template)
    pos = start + 1

    if pos < length and template[pos] == "%" and config.escapes:
        return ArgumentSpec.escape(start, pos + 1, "%")

    position: Auto | Key = Auto()
    if pos < length and template[pos] == "(":
        close = template.find(")", pos + 1)
        if close == -1:
            raise ParseError(start, "unterminated argument name")
        position = Key(name=template[pos + 1 : close])
        pos = close + 1

    flags: set[str] = set()
    while pos < length and template[pos] in _FLAGS:
        flags.add(_FLAGS[template[pos]])
        pos += 1

    width = NO_WIDTH
    if pos < length and template[pos] == "*":
        width = Width.from_argument()
        pos += 1
    else:
        digits_end = pos
        while digits_end < length and template[digits_end] in _DIGITS:
            digits_end += 1
        if digits_end > pos:
            width = Width.literal(int(template[pos:digits_end]))
            pos = digits_end

    if pos >= length:
        raise ParseError(start, "incomplete format: missing conversion character")

    char = template[pos]
    try:
        conversion = Conversion(char)
    except ValueError as e:
        raise ParseError(start, f"unsupported format character {char!r}") from e

    spec = ArgumentSpec(
        start=start,
        end=pos + 1,
        alternate="alternate" in flags,
        zero_pad="zero_pad" in flags,
        left_align="left_align" in flags,
    )
    return spec.with_position(position).with_conversion(conversion).with_width(width)


class PythonFormat:
    """Format implementation for ``%``-style templates."""

    def iter_args(
        self, template: str, config: FormatConfig = DEFAULT_CONFIG
    ) -> Iterator[ArgumentSpec]:
        """Lazily yield the placeholders of ``template``.

        Raises:
            ParseError: When the scan reaches a malformed placeholder

        """
        start = template.find("%")
        while start != -1:
            spec = parse_placeholder(template, start, config)
            yield spec
            start = template.find("%", spec.end)

    def render(
        self,
        spec: ArgumentSpec,
        value: object,
        width: int | None,
        config: FormatConfig = DEFAULT_CONFIG,
    ) -> str:
        """Render a value with the spec's conversion, width and flags."""
        return render_printf(spec, value, width, config)

    def format(
        self,
        template: str,
        args: object,
        config: FormatConfig | None = None,
    ) -> str:
        """Format ``template`` with ``args``.

        Example:
            ```python
            PythonFormat().format("hello, %#x!", [42])  # "hello, 0x2a!"
            ```

        """
        return substitute(self, template, args, config or DEFAULT_CONFIG)
