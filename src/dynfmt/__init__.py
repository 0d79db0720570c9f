"""dynfmt - format strings resolved at runtime.

This package parses templates in one of two placeholder dialects, resolves each
placeholder against a positional list or a named mapping, and renders the
result:

- Simple-Curly: ``{}``, ``{0}``, ``{name}``
- Python-Printf: ``%s``, ``%r``, ``%#x``, ``%05s``, ``%*s``, ``%(name)s``
"""

from dynfmt.api import format
from dynfmt.api import scan
from dynfmt.arguments import ArgumentSpec
from dynfmt.arguments import Auto
from dynfmt.arguments import Index
from dynfmt.arguments import Key
from dynfmt.arguments import Position
from dynfmt.arguments import Width
from dynfmt.arguments import WidthKind
from dynfmt.core import DEFAULT_CONFIG
from dynfmt.core import FormatConfig
from dynfmt.core import FormatError
from dynfmt.core import KeyValidationError
from dynfmt.core import MissingArgumentError
from dynfmt.core import ParseError
from dynfmt.core import TypeMismatchError
from dynfmt.core import UnsupportedPositionError
from dynfmt.dialects import PythonFormat
from dynfmt.dialects import SimpleCurlyFormat
from dynfmt.dialects import get_dialect
from dynfmt.enums import Conversion
from dynfmt.enums import Dialect
from dynfmt.enums import ValueKind
from dynfmt.project_info import ProjectInfo
from dynfmt.project_info import get_project_info
from dynfmt.templates import FormatTemplate
from dynfmt.templates import from_template
from dynfmt.types import FormatDialect
from dynfmt.validation import collect_keys
from dynfmt.validation import count_positional
from dynfmt.validation import validate_keys
from dynfmt.values import render_display
from dynfmt.values import render_repr

# Public API - supports both direct and module imports
__all__ = [
    "DEFAULT_CONFIG",
    "ArgumentSpec",
    "Auto",
    "Conversion",
    "Dialect",
    "FormatConfig",
    "FormatDialect",
    "FormatError",
    "FormatTemplate",
    "Index",
    "Key",
    "KeyValidationError",
    "MissingArgumentError",
    "ParseError",
    "Position",
    "ProjectInfo",
    "PythonFormat",
    "SimpleCurlyFormat",
    "TypeMismatchError",
    "UnsupportedPositionError",
    "ValueKind",
    "Width",
    "WidthKind",
    "collect_keys",
    "count_positional",
    "format",
    "from_template",
    "get_dialect",
    "get_project_info",
    "render_display",
    "render_repr",
    "scan",
    "validate_keys",
]
__version__ = get_project_info().version
