"""Custom exceptions for dynfmt.

Every error aborts the whole format call; no partial output is returned.
"""


class FormatError(Exception):
    """Base exception for format-string errors."""


class ParseError(FormatError, ValueError):
    """Raised when a placeholder in the template is malformed.

    Attributes:
        offset: Character offset into the template where the bad placeholder
            starts. It counts code points, not UTF-8 bytes.
        reason: Human readable description of what was wrong.

    """

    def __init__(self, offset: int, reason: str) -> None:
        """Initialize with the offending offset and a reason."""
        self.offset = offset
        self.reason = reason
        super().__init__(f"Invalid format string at offset {offset}: {reason}")


class MissingArgumentError(FormatError, LookupError):
    """Raised when a placeholder refers to an argument that was not supplied.

    Attributes:
        position: The index or key that could not be resolved.

    """

    def __init__(self, position: int | str) -> None:
        """Initialize with the unresolved index or key."""
        self.position = position
        super().__init__(f"Missing argument: {position!r}")


class UnsupportedPositionError(FormatError, TypeError):
    """Raised when a placeholder position does not fit the argument source.

    This occurs when:
    - A named placeholder is used with a positional argument list
    - An automatic or indexed placeholder is used with a mapping
    """

    def __init__(self, position: object, required: str) -> None:
        """Initialize with the rejected position and the source it needs."""
        self.position = position
        self.required = required
        super().__init__(
            f"Format requires a {required} of arguments for {position!s}"
        )


class TypeMismatchError(FormatError, TypeError):
    """Raised when a value cannot be rendered with the requested conversion."""

    def __init__(self, expected: str, got: str) -> None:
        """Initialize with the expected and the actual kind of value."""
        self.expected = expected
        self.got = got
        super().__init__(f"Expected {expected}, got {got}")


class KeyValidationError(FormatError, ValueError):
    """Raised when named arguments do not match a template's keys exactly.

    Attributes:
        missing: Keys the template uses that were not provided.
        extra: Provided keys the template never uses.

    """

    def __init__(self, missing: frozenset[str], extra: frozenset[str]) -> None:
        """Initialize with the missing and the unused keys."""
        self.missing = missing
        self.extra = extra
        parts = []
        if missing:
            parts.append(f"Missing keys: {', '.join(sorted(missing))}")
        if extra:
            parts.append(f"Extra keys: {', '.join(sorted(extra))}")
        super().__init__("; ".join(parts))
