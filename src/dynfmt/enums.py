"""Type-safe enumerations for dynfmt."""

from enum import StrEnum


class Dialect(StrEnum):
    """Built-in placeholder dialects."""

    SIMPLE_CURLY = "curly"
    PYTHON_PRINTF = "printf"


class Conversion(StrEnum):
    """Render directives, keyed by their printf conversion character."""

    DISPLAY = "s"
    REPR = "r"
    OCTAL = "o"
    LOWER_HEX = "x"
    UPPER_HEX = "X"
    LOWER_EXP = "e"
    UPPER_EXP = "E"


class ValueKind(StrEnum):
    """Kinds of values accepted as format arguments."""

    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
