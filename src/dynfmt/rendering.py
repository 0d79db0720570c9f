"""Conversion and padding rules of the printf dialect."""

from dynfmt.arguments import ArgumentSpec
from dynfmt.core.config import DEFAULT_CONFIG
from dynfmt.core.config import FormatConfig
from dynfmt.enums import Conversion
from dynfmt.values import render_display
from dynfmt.values import render_exponent
from dynfmt.values import render_radix
from dynfmt.values import render_repr


def render_conversion(
    conversion: Conversion,
    value: object,
    *,
    alternate: bool = False,
    config: FormatConfig = DEFAULT_CONFIG,
) -> str:
    """Render a value with one conversion, before any padding.

    Args:
        conversion: Render directive
        value: Resolved argument value
        alternate: Alternate form flag (``#``)
        config: Call configuration, used for the pretty repr indent

    Returns:
        Base text of the replacement

    Raises:
        TypeMismatchError: When the conversion does not accept the value

    """
    match conversion:
        case Conversion.DISPLAY:
            return render_display(value)
        case Conversion.REPR:
            return render_repr(value, pretty=alternate, indent=config.indent)
        case Conversion.OCTAL | Conversion.LOWER_HEX | Conversion.UPPER_HEX:
            return render_radix(value, conversion, alternate=alternate)
        case Conversion.LOWER_EXP:
            return render_exponent(value, upper=False)
        case Conversion.UPPER_EXP:
            return render_exponent(value, upper=True)

    msg = f"Unsupported conversion: {conversion!s}"
    raise ValueError(msg)


def pad(
    text: str,
    width: int | None,
    *,
    zero_pad: bool = False,
    left_align: bool = False,
) -> str:
    """Pad ``text`` to ``width`` characters; longer text is never truncated.

    Left alignment wins over zero padding: the text is followed by spaces.
    """
    if width is None or len(text) >= width:
        return text
    if left_align:
        return text.ljust(width)
    return text.rjust(width, "0" if zero_pad else " ")


def render_printf(
    spec: ArgumentSpec,
    value: object,
    width: int | None,
    config: FormatConfig = DEFAULT_CONFIG,
) -> str:
    """Render a printf placeholder: conversion first, then padding.

    A negative width, which can only come from a ``*`` argument, left-aligns
    the text within its absolute value.
    """
    text = render_conversion(
        spec.conversion, value, alternate=spec.alternate, config=config
    )
    left_align = spec.left_align
    if width is not None and width < 0:
        left_align = True
        width = -width
    return pad(text, width, zero_pad=spec.zero_pad, left_align=left_align)
