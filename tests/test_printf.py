"""Tests for the Python printf dialect."""

from collections.abc import Mapping
from collections.abc import Sequence

import pytest

from dynfmt.arguments import Auto
from dynfmt.arguments import Key
from dynfmt.arguments import Width
from dynfmt.arguments import WidthKind
from dynfmt.core.config import FormatConfig
from dynfmt.core.errors import ParseError
from dynfmt.core.errors import TypeMismatchError
from dynfmt.core.errors import UnsupportedPositionError
from dynfmt.dialects.printf import PythonFormat
from dynfmt.dialects.printf import parse_placeholder
from dynfmt.enums import Conversion


def fmt(template: str, args: Sequence[object] | Mapping[str, object]) -> str:
    """Format with the printf dialect."""
    return PythonFormat().format(template, args)


class TestParsePlaceholder:
    """Test the placeholder grammar."""

    def test_plain(self) -> None:
        """Test a bare conversion."""
        spec = parse_placeholder("%s", 0)
        assert (spec.start, spec.end) == (0, 2)
        assert spec.position == Auto()
        assert spec.conversion is Conversion.DISPLAY

    def test_everything(self) -> None:
        """Test name, flags, width and conversion together."""
        spec = parse_placeholder("x %(name)#-012X y", 2)
        assert (spec.start, spec.end) == (2, 15)
        assert spec.position == Key(name="name")
        assert spec.alternate and spec.left_align and spec.zero_pad
        assert spec.width == Width.literal(12)
        assert spec.conversion is Conversion.UPPER_HEX

    def test_repeated_flags(self) -> None:
        """Test repeating a flag is the same as giving it once."""
        spec = parse_placeholder("%##x", 0)
        assert spec.alternate
        assert spec.end == 4

    def test_star_width(self) -> None:
        """Test width taken from the arguments."""
        spec = parse_placeholder("%*s", 0)
        assert spec.width.kind is WidthKind.ARGUMENT

    def test_escape(self) -> None:
        """Test a doubled percent sign."""
        spec = parse_placeholder("%%", 0)
        assert spec.literal == "%"
        assert spec.end == 2

    @pytest.mark.parametrize(
        ("template", "reason"),
        [
            ("%", "missing conversion"),
            ("%5", "missing conversion"),
            ("%d", "unsupported format character 'd'"),
            ("%(name", "unterminated argument name"),
            ("%-%", "unsupported format character '%'"),
        ],
    )
    def test_malformed(self, template: str, reason: str) -> None:
        """Test malformed placeholders report the offset of their percent."""
        with pytest.raises(ParseError, match=reason) as exc_info:
            parse_placeholder(template, 0)

        assert exc_info.value.offset == 0

    def test_escape_disabled(self) -> None:
        """Test %% is an error when escapes are off."""
        with pytest.raises(ParseError):
            parse_placeholder("%%", 0, FormatConfig(escapes=False))


class TestScanner:
    """Test placeholder scanning."""

    def test_offsets(self) -> None:
        """Test placeholder spans across a template."""
        specs = list(PythonFormat().iter_args("a %s b %5r c %%"))
        assert [(s.start, s.end) for s in specs] == [(2, 4), (7, 10), (13, 15)]

    def test_error_offset(self) -> None:
        """Test the error offset points at the bad placeholder."""
        with pytest.raises(ParseError) as exc_info:
            list(PythonFormat().iter_args("ok %s then %q"))

        assert exc_info.value.offset == 11

    def test_braces_are_text(self) -> None:
        """Test curly placeholders are not part of this dialect."""
        assert list(PythonFormat().iter_args("{0}")) == []


class TestDisplay:
    """Test %s rendering."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("world", "hello, world!"),
            (42, "hello, 42!"),
            (-42, "hello, -42!"),
            (4.2, "hello, 4.2!"),
            (True, "hello, true!"),
            ([1, 2, 3], "hello, [1,2,3]!"),
            ({"foo": "bar"}, 'hello, {"foo":"bar"}!'),
        ],
    )
    def test_values(self, value: object, expected: str) -> None:
        """Test display rendering of every value kind."""
        assert fmt("hello, %s!", [value]) == expected


class TestRepr:
    """Test %r rendering."""

    def test_string(self) -> None:
        """Test strings are quoted."""
        assert fmt("hello, %r!", ["world"]) == 'hello, "world"!'

    def test_sequence(self) -> None:
        """Test compact sequences."""
        assert fmt("hello, %r!", [[1, 2, 3]]) == "hello, [1,2,3]!"

    def test_mapping(self) -> None:
        """Test compact mappings."""
        assert fmt("hello, %r!", [{"foo": "bar"}]) == 'hello, {"foo":"bar"}!'

    def test_alternate_is_pretty(self) -> None:
        """Test the alternate flag pretty-prints composites."""
        assert fmt("hello, %#r!", [[1, 2, 3]]) == "hello, [\n  1,\n  2,\n  3\n]!"

    def test_pretty_indent_from_config(self) -> None:
        """Test the pretty indent follows the configuration."""
        result = PythonFormat().format("%#r", [[1]], FormatConfig(indent=4))
        assert result == "[\n    1\n]"


class TestNumeric:
    """Test numeric conversions."""

    @pytest.mark.parametrize(
        ("template", "expected"),
        [
            ("hello, %o!", "hello, 52!"),
            ("hello, %#o!", "hello, 0o52!"),
            ("hello, %x!", "hello, 2a!"),
            ("hello, %#x!", "hello, 0x2a!"),
            ("hello, %X!", "hello, 2A!"),
            ("hello, %#X!", "hello, 0X2A!"),
        ],
    )
    def test_radix(self, template: str, expected: str) -> None:
        """Test octal and hexadecimal conversions."""
        assert fmt(template, [42]) == expected

    def test_lower_exp(self) -> None:
        """Test lower-case scientific notation."""
        assert fmt("hello, %e!", [4.2]) == "hello, 4.2e0!"

    def test_upper_exp(self) -> None:
        """Test upper-case scientific notation."""
        assert fmt("hello, %E!", [4.2]) == "hello, 4.2E0!"

    def test_hex_of_string(self) -> None:
        """Test strings are never coerced into numbers."""
        with pytest.raises(TypeMismatchError):
            fmt("%x", ["42"])

    def test_exp_of_list(self) -> None:
        """Test composites are never coerced into numbers."""
        with pytest.raises(TypeMismatchError):
            fmt("%e", [[4.2]])


class TestWidth:
    """Test width, padding and alignment."""

    def test_right_aligned(self) -> None:
        """Test default right alignment."""
        assert fmt("hello, %5s!", [42]) == "hello,    42!"

    def test_left_aligned(self) -> None:
        """Test the left-align flag."""
        assert fmt("hello, %-5s!", [42]) == "hello, 42   !"

    def test_zero_padding(self) -> None:
        """Test the zero-pad flag."""
        assert fmt("hello, %05s!", [42]) == "hello, 00042!"

    def test_left_align_wins_over_zero_pad(self) -> None:
        """Test left alignment pads with spaces when both flags are set."""
        assert fmt("[%-05s]", [42]) == "[42   ]"
        assert fmt("[%0-5s]", [42]) == "[42   ]"

    def test_larger_than_content(self) -> None:
        """Test padding a short string."""
        assert fmt("hello, %5s!", ["abc"]) == "hello,   abc!"

    def test_smaller_than_content(self) -> None:
        """Test long text is not truncated."""
        assert fmt("hello, %3s!", ["abcdef"]) == "hello, abcdef!"

    def test_single_character(self) -> None:
        """Test a one-character value in a bracketed field."""
        assert fmt("[%5s]", ["A"]) == "[    A]"

    def test_from_argument(self) -> None:
        """Test the width is taken from the preceding argument."""
        assert fmt("hello, %*s!", [4, 42]) == "hello,   42!"

    def test_negative_argument_width(self) -> None:
        """Test a negative star width left-aligns."""
        assert fmt("[%*s]", [-4, 42]) == "[42  ]"

    def test_width_on_numeric_conversions(self) -> None:
        """Test widths apply to every conversion."""
        assert fmt("[%#6x]", [42]) == "[  0x2a]"
        assert fmt("[%08e]", [4.2]) == "[0004.2e0]"
        assert fmt("[%-6r]", ["a"]) == '["a"   ]'

    def test_mixed(self) -> None:
        """Test several widths in one template."""
        result = fmt("Width: %5s, Left: %-5s, Zero: %05s", ["abc", "def", "42"])
        assert result == "Width:   abc, Left: def  , Zero: 00042"

    def test_star_width_against_mapping(self) -> None:
        """Test star widths need positional arguments."""
        with pytest.raises(UnsupportedPositionError):
            fmt("%(name)*s", {"name": "x"})

    def test_star_width_not_integer(self) -> None:
        """Test star widths must be integers."""
        with pytest.raises(TypeMismatchError):
            fmt("%*s", ["4", 42])


class TestNamed:
    """Test named placeholders."""

    def test_by_name(self) -> None:
        """Test a named placeholder with a mapping."""
        assert fmt("hello, %(name)s!", {"name": "world"}) == "hello, world!"

    def test_named_with_flags(self) -> None:
        """Test flags and width apply to named values."""
        assert fmt("%(n)#06x", {"n": 42}) == "000x2a"

    def test_auto_against_mapping(self) -> None:
        """Test unnamed placeholders need a list."""
        with pytest.raises(UnsupportedPositionError):
            fmt("%s", {"name": "world"})


class TestEscapes:
    """Test %% handling."""

    def test_percent(self) -> None:
        """Test a doubled percent renders one percent sign."""
        assert fmt("100%%", []) == "100%"

    def test_percent_does_not_consume(self) -> None:
        """Test escapes do not advance the argument cursor."""
        assert fmt("%s%% of %s", [50, "x"]) == "50% of x"
