"""Configuration for format calls.

This module provides the options shared by both dialects: escape handling,
pretty-printing indentation and tracing.
"""

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class FormatConfig(BaseModel):
    """Configuration for a format call.

    Attributes:
        indent: Spaces per nesting level used by the pretty repr form
            (``%#r``). Default is 2.
        escapes: Whether ``{{``/``}}`` and ``%%`` are read as escaped
            literal characters. When disabled they are parse errors.
        trace: Whether to wrap the call in an OpenTelemetry span.

    """

    model_config = ConfigDict(frozen=True)

    indent: int = Field(default=2, ge=0, le=16)
    escapes: bool = Field(default=True)
    trace: bool = Field(default=False)


DEFAULT_CONFIG = FormatConfig()
