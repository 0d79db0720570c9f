"""Placeholder position and argument specifier models.

Scanners turn every placeholder they find into an immutable ``ArgumentSpec``;
the substitution driver consumes them in scan order.
"""

from enum import StrEnum
from typing import Annotated
from typing import Literal
from typing import Self

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import model_validator

from dynfmt.enums import Conversion


class Auto(BaseModel):
    """Refers to the next positional argument not yet claimed by ``Auto``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["auto"] = "auto"

    def __str__(self) -> str:
        """Describe the position for error messages."""
        return "next argument"


class Index(BaseModel):
    """Refers to a positional argument by zero-based index."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["index"] = "index"
    value: int = Field(ge=0)

    def __str__(self) -> str:
        """Describe the position for error messages."""
        return f"index {self.value}"


class Key(BaseModel):
    """Refers to a named argument."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["key"] = "key"
    name: str

    def __str__(self) -> str:
        """Describe the position for error messages."""
        return f"key {self.name!r}"


Position = Annotated[Auto | Index | Key, Field(discriminator="kind")]


class WidthKind(StrEnum):
    """Where the field width of a placeholder comes from."""

    NONE = "none"
    LITERAL = "literal"
    ARGUMENT = "argument"


class Width(BaseModel):
    """Field width of a placeholder.

    ``value`` is set only for literal widths; ``ARGUMENT`` widths are read from
    the next positional argument at format time.
    """

    model_config = ConfigDict(frozen=True)

    kind: WidthKind = WidthKind.NONE
    value: int | None = Field(default=None, ge=0)

    @classmethod
    def literal(cls, value: int) -> Self:
        """Create a fixed width."""
        return cls(kind=WidthKind.LITERAL, value=value)

    @classmethod
    def from_argument(cls) -> Self:
        """Create a width taken from the argument list (``*``)."""
        return cls(kind=WidthKind.ARGUMENT)


NO_WIDTH = Width()


class ArgumentSpec(BaseModel):
    """Result of parsing one placeholder.

    Attributes:
        start: Character offset of the first character of the placeholder.
        end: Character offset just past the placeholder, delimiters
            included. Offsets index the template as a Python ``str``, so
            they count code points rather than UTF-8 bytes.
        position: How the value argument is selected. ``None`` for escape
            sequences, which carry their replacement in ``literal``.
        conversion: Render directive for the value.
        width: Field width source.
        zero_pad: Pad with ``0`` instead of spaces.
        left_align: Put padding after the text.
        alternate: Alternate form (``0x`` prefixes, pretty repr).
        literal: Replacement text of an escape sequence such as ``%%``.

    """

    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=0)
    end: int = Field(ge=0)
    position: Position | None = Field(default_factory=Auto)
    conversion: Conversion = Conversion.DISPLAY
    width: Width = NO_WIDTH
    zero_pad: bool = False
    left_align: bool = False
    alternate: bool = False
    literal: str | None = None

    @model_validator(mode="after")
    def check_span(self) -> Self:
        """Reject inverted spans and specs with nothing to substitute."""
        if self.start > self.end:
            msg = f"Span start {self.start} is past its end {self.end}"
            raise ValueError(msg)
        if self.position is None and self.literal is None:
            msg = "Argument spec needs a position or literal text"
            raise ValueError(msg)
        return self

    @classmethod
    def escape(cls, start: int, end: int, literal: str) -> Self:
        """Create a spec for an escape sequence replaced by ``literal``."""
        return cls(start=start, end=end, position=None, literal=literal)

    @property
    def is_literal(self) -> bool:
        """Whether this spec is an escape sequence rather than an argument."""
        return self.literal is not None

    def with_position(self, position: Position) -> Self:
        """Return a copy that selects its value through ``position``."""
        return self.model_copy(update={"position": position})

    def with_conversion(self, conversion: Conversion) -> Self:
        """Return a copy rendered with ``conversion``."""
        return self.model_copy(update={"conversion": conversion})

    def with_width(self, width: Width) -> Self:
        """Return a copy padded to ``width``."""
        return self.model_copy(update={"width": width})
