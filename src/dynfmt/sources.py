"""Argument sources and position resolution.

A format call reads its values either from a positional list or from a named
mapping, never both. ``ArgumentResolver`` holds the call-scoped cursor used by
``Auto`` positions.
"""

from collections.abc import Mapping
from collections.abc import Sequence

from pydantic import BaseModel

from dynfmt.arguments import Auto
from dynfmt.arguments import Index
from dynfmt.arguments import Key
from dynfmt.arguments import Position
from dynfmt.core.errors import MissingArgumentError
from dynfmt.core.errors import TypeMismatchError
from dynfmt.core.errors import UnsupportedPositionError
from dynfmt.enums import ValueKind
from dynfmt.values import value_kind


class PositionalArguments:
    """Argument source backed by a sequence; resolves ``Auto`` and ``Index``."""

    required = "list"

    def __init__(self, values: Sequence[object]) -> None:
        """Initialize with the positional values."""
        self.values = values

    def __len__(self) -> int:
        """Return the number of positional values."""
        return len(self.values)

    def get_index(self, index: int) -> object:
        """Return the value at ``index``.

        Raises:
            MissingArgumentError: When the index is out of range

        """
        if 0 <= index < len(self.values):
            return self.values[index]
        raise MissingArgumentError(index)

    def get_key(self, name: str) -> object:
        """Reject named lookups."""
        raise UnsupportedPositionError(Key(name=name), "mapping")


class NamedArguments:
    """Argument source backed by a mapping; resolves ``Key`` only."""

    required = "mapping"

    def __init__(self, values: Mapping[str, object]) -> None:
        """Initialize with the named values."""
        self.values = values

    def __len__(self) -> int:
        """Return the number of named values."""
        return len(self.values)

    def get_index(self, index: int) -> object:
        """Reject positional lookups."""
        raise UnsupportedPositionError(Index(value=index), "list")

    def get_key(self, name: str) -> object:
        """Return the value stored under ``name``.

        Raises:
            MissingArgumentError: When the key is absent

        """
        try:
            return self.values[name]
        except KeyError as e:
            raise MissingArgumentError(name) from e


type ArgumentSource = PositionalArguments | NamedArguments


def to_source(args: object) -> ArgumentSource:
    """Wrap caller-supplied arguments in the matching source.

    Args:
        args: A non-string sequence, a mapping, a pydantic model, or an
            already wrapped source

    Returns:
        Positional source for sequences, named source otherwise

    Raises:
        TypeError: When ``args`` is neither a sequence nor a mapping

    """
    match args:
        case PositionalArguments() | NamedArguments():
            return args
        case BaseModel():
            return NamedArguments(args.model_dump())
        case Mapping():
            return NamedArguments(args)
        case str() | bytes() | bytearray():
            pass
        case Sequence():
            return PositionalArguments(args)

    msg = (
        "Format arguments must be a sequence or mapping, "
        f"got {type(args).__name__}"
    )
    raise TypeError(msg)


class ArgumentResolver:
    """Resolves positions against one source for the length of one call."""

    def __init__(self, source: ArgumentSource) -> None:
        """Initialize with the source and a cursor at 0."""
        self.source = source
        self._cursor = 0

    @property
    def cursor(self) -> int:
        """Index the next ``Auto`` position will read."""
        return self._cursor

    def resolve(self, position: Position) -> object:
        """Return the value selected by ``position``.

        ``Auto`` reads the value under the cursor and then advances it, so the
        n-th ``Auto`` of a call always reads argument n-1 whatever explicit
        indices or keys come in between.

        Raises:
            MissingArgumentError: When the index is out of range or the key
                is absent
            UnsupportedPositionError: When the position kind does not fit the
                source

        """
        match position:
            case Auto():
                if isinstance(self.source, NamedArguments):
                    raise UnsupportedPositionError(position, "list")
                value = self.source.get_index(self._cursor)
                self._cursor += 1
                return value
            case Index(value=index):
                return self.source.get_index(index)
            case Key(name=name):
                return self.source.get_key(name)

        msg = f"Unknown position: {position!r}"
        raise TypeError(msg)

    def next_width(self) -> int:
        """Consume the next ``Auto`` argument as a field width.

        Raises:
            TypeMismatchError: When the argument is not an integer

        """
        value = self.resolve(Auto())
        kind = value_kind(value)
        if kind is not ValueKind.INTEGER:
            raise TypeMismatchError(f"{ValueKind.INTEGER} width", kind)
        return value
