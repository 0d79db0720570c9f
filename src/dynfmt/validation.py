"""Template inspection and argument validation utilities."""

from collections.abc import Mapping

from dynfmt.arguments import Auto
from dynfmt.arguments import Index
from dynfmt.arguments import Key
from dynfmt.arguments import WidthKind
from dynfmt.core.errors import KeyValidationError
from dynfmt.dialects import get_dialect
from dynfmt.enums import Dialect


def collect_keys(template: object, dialect: Dialect | str) -> set[str]:
    """Extract the names used by named placeholders.

    Args:
        template: Template string
        dialect: Dialect the template is written in

    Returns:
        Set of argument names found in the template

    Raises:
        TypeError: When template is not a string
        ParseError: When the template contains a malformed placeholder

    """
    if not isinstance(template, str):
        msg = f"Cannot collect keys from {type(template).__name__}"
        raise TypeError(msg)

    return {
        spec.position.name
        for spec in get_dialect(dialect).iter_args(template)
        if isinstance(spec.position, Key)
    }


def count_positional(template: object, dialect: Dialect | str) -> int:
    """Return how many positional arguments the template needs at least.

    ``*`` widths count as positional arguments. Explicit indices require the
    list to reach them.

    Raises:
        TypeError: When template is not a string
        ParseError: When the template contains a malformed placeholder

    """
    if not isinstance(template, str):
        msg = f"Cannot count arguments of {type(template).__name__}"
        raise TypeError(msg)

    auto = 0
    highest = 0
    for spec in get_dialect(dialect).iter_args(template):
        if spec.width.kind is WidthKind.ARGUMENT:
            auto += 1
        match spec.position:
            case Auto():
                auto += 1
            case Index(value=index):
                highest = max(highest, index + 1)
    return max(auto, highest)


def validate_keys(
    template: object, dialect: Dialect | str, provided: Mapping[str, object]
) -> None:
    """Check that ``provided`` holds exactly the keys the template uses.

    Args:
        template: Template string
        dialect: Dialect the template is written in
        provided: Named arguments intended for the template

    Raises:
        KeyValidationError: When keys are missing or unused, with both sets
            attached
        ParseError: When the template contains a malformed placeholder

    """
    required = collect_keys(template, dialect)
    names = set(provided)
    missing = frozenset(required - names)
    extra = frozenset(names - required)
    if missing or extra:
        raise KeyValidationError(missing, extra)
