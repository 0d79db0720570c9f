"""Core types and protocols for dialects."""

from collections.abc import Iterator
from typing import Protocol

from dynfmt.arguments import ArgumentSpec
from dynfmt.core.config import DEFAULT_CONFIG
from dynfmt.core.config import FormatConfig


class FormatDialect(Protocol):
    """Protocol for placeholder dialects.

    A dialect owns its placeholder grammar and its rendering rules; the
    substitution driver only sees the ``ArgumentSpec`` values it yields.
    """

    def iter_args(
        self, template: str, config: FormatConfig = DEFAULT_CONFIG
    ) -> Iterator[ArgumentSpec]:
        """Lazily yield one spec per placeholder, left to right."""
        ...

    def render(
        self,
        spec: ArgumentSpec,
        value: object,
        width: int | None,
        config: FormatConfig = DEFAULT_CONFIG,
    ) -> str:
        """Produce the replacement text for a resolved placeholder."""
        ...
