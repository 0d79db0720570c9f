"""Value model for format arguments.

Plain Python values stand in for the closed set of argument kinds: ``str``,
``bool``, ``int``, ``float``, non-string sequences and string-keyed mappings.
A pydantic model is accepted wherever a mapping is, through ``model_dump()``.
Mappings always render with their keys sorted so output is reproducible.
"""

from collections.abc import Mapping
from collections.abc import Sequence
from decimal import Decimal
import math

from pydantic import BaseModel

from dynfmt.core.errors import TypeMismatchError
from dynfmt.enums import Conversion
from dynfmt.enums import ValueKind

type Value = str | bool | int | float | Sequence[Value] | Mapping[str, Value]

_RADIX: dict[Conversion, tuple[str, str]] = {
    Conversion.OCTAL: ("o", "0o"),
    Conversion.LOWER_HEX: ("x", "0x"),
    Conversion.UPPER_HEX: ("X", "0X"),
}


def value_kind(value: object) -> ValueKind:
    """Classify a Python object as one of the supported value kinds.

    Args:
        value: Object passed as a format argument

    Returns:
        The kind of value

    Raises:
        TypeMismatchError: When the object is not a supported value

    """
    match value:
        case str():
            return ValueKind.STRING
        case bool():
            return ValueKind.BOOLEAN
        case int():
            return ValueKind.INTEGER
        case float():
            return ValueKind.FLOAT
        case BaseModel() | Mapping():
            return ValueKind.MAPPING
        case bytes() | bytearray():
            pass
        case Sequence():
            return ValueKind.SEQUENCE
    raise TypeMismatchError("format value", type(value).__name__)


def render_display(value: object) -> str:
    """Render the plain textual form of a value.

    Strings are returned verbatim. Composites use the compact form, in which
    nested strings are quoted.
    """
    if isinstance(value, str):
        return value
    return _render(value, pretty=False, indent=0, level=0)


def render_repr(value: object, pretty: bool = False, indent: int = 2) -> str:
    """Render the quoted debug form of a value.

    Args:
        value: Value to render
        pretty: Render composites over multiple lines
        indent: Spaces per nesting level in pretty mode

    Returns:
        Repr text, single-line unless ``pretty`` is set

    """
    return _render(value, pretty=pretty, indent=indent, level=0)


def render_radix(value: object, conversion: Conversion, *, alternate: bool) -> str:
    """Render an integer in octal or hexadecimal.

    Args:
        value: Integer value (booleans are rejected)
        conversion: One of OCTAL, LOWER_HEX or UPPER_HEX
        alternate: Prefix the digits with ``0o``, ``0x`` or ``0X``

    Returns:
        Digits of the magnitude, preceded by ``-`` for negative values

    Raises:
        TypeMismatchError: When the value is not an integer

    """
    kind = value_kind(value)
    if kind is not ValueKind.INTEGER:
        raise TypeMismatchError(ValueKind.INTEGER, kind)

    spec, prefix = _RADIX[conversion]
    sign = "-" if value < 0 else ""
    digits = format(abs(value), spec)
    return f"{sign}{prefix if alternate else ''}{digits}"


def render_exponent(value: object, *, upper: bool) -> str:
    """Render a number in scientific notation.

    The mantissa holds the shortest digits that round-trip the value, with the
    point after the first digit. The exponent carries no ``+`` sign and no
    zero-padding, so ``4.2`` renders as ``4.2e0``.

    Raises:
        TypeMismatchError: When the value is not a float or an integer

    """
    kind = value_kind(value)
    if kind is ValueKind.FLOAT:
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "inf" if value > 0 else "-inf"
        number = Decimal(repr(value))
    elif kind is ValueKind.INTEGER:
        number = Decimal(value)
    else:
        raise TypeMismatchError(ValueKind.FLOAT, kind)

    sign, digits, _ = number.as_tuple()
    significant = "".join(str(d) for d in digits).lstrip("0").rstrip("0")
    if significant:
        exponent = number.adjusted()
    else:
        significant = "0"
        exponent = 0

    mantissa = significant[0]
    if len(significant) > 1:
        mantissa += "." + significant[1:]
    marker = "E" if upper else "e"
    return f"{'-' if sign else ''}{mantissa}{marker}{exponent}"


def _render(value: object, *, pretty: bool, indent: int, level: int) -> str:
    match value_kind(value):
        case ValueKind.STRING:
            return f'"{value}"'
        case ValueKind.BOOLEAN:
            return "true" if value else "false"
        case ValueKind.INTEGER:
            return str(value)
        case ValueKind.FLOAT:
            return _float_text(value)
        case ValueKind.SEQUENCE:
            parts = [
                _render(item, pretty=pretty, indent=indent, level=level + 1)
                for item in value
            ]
            return _join("[", "]", parts, pretty=pretty, indent=indent, level=level)
        case ValueKind.MAPPING:
            sep = ": " if pretty else ":"
            parts = [
                f'"{key}"{sep}'
                + _render(item, pretty=pretty, indent=indent, level=level + 1)
                for key, item in sorted_items(value)
            ]
            return _join("{", "}", parts, pretty=pretty, indent=indent, level=level)


def sorted_items(value: object) -> list[tuple[str, object]]:
    """Return the entries of a mapping value ordered by key.

    Raises:
        TypeMismatchError: When a key is not a string

    """
    data = value.model_dump() if isinstance(value, BaseModel) else value
    for key in data:
        if not isinstance(key, str):
            raise TypeMismatchError("string mapping key", type(key).__name__)
    return sorted(data.items(), key=lambda item: item[0])


def _float_text(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    # repr is the shortest round-tripping form and always has "." or "e"
    text = repr(value)
    mantissa, sep, exponent = text.partition("e")
    if not sep:
        return text
    return f"{mantissa}e{int(exponent)}"


def _join(
    open_: str,
    close: str,
    parts: list[str],
    *,
    pretty: bool,
    indent: int,
    level: int,
) -> str:
    if not parts:
        return open_ + close
    if not pretty:
        return open_ + ",".join(parts) + close

    inner = " " * (indent * (level + 1))
    outer = " " * (indent * level)
    body = ",\n".join(inner + part for part in parts)
    return f"{open_}\n{body}\n{outer}{close}"
