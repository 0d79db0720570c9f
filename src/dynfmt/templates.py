"""Reusable templates bound to a dialect and an optional input model."""

from collections.abc import Mapping
from collections.abc import Sequence
from functools import cached_property

from pydantic import BaseModel

from dynfmt.api import format as format_string
from dynfmt.core.config import DEFAULT_CONFIG
from dynfmt.core.config import FormatConfig
from dynfmt.enums import Dialect
from dynfmt.validation import collect_keys
from dynfmt.validation import count_positional
from dynfmt.validation import validate_keys


class FormatTemplate[TIn: BaseModel]:
    """Format template with a fixed dialect and optional structured input."""

    def __init__(
        self,
        *,
        template: str,
        dialect: Dialect | str,
        input_model: type[TIn] | None = None,
        config: FormatConfig | None = None,
    ) -> None:
        """Initialize a format template.

        Args:
            template: Template string
            dialect: Dialect the template is written in
            input_model: Optional pydantic model providing named arguments
            config: Optional call configuration

        Raises:
            TypeError: When template is not a string
            ValueError: When the dialect is not supported

        """
        if not isinstance(template, str):
            msg = f"Format template must be str, got {type(template).__name__}"
            raise TypeError(msg)

        self.template = template
        self.dialect = Dialect(dialect)
        self.input_model = input_model
        self.config = config or DEFAULT_CONFIG

    @cached_property
    def keys(self) -> frozenset[str]:
        """Names used by the template's named placeholders."""
        return frozenset(collect_keys(self.template, self.dialect))

    @cached_property
    def positional_count(self) -> int:
        """Minimum number of positional arguments the template needs."""
        return count_positional(self.template, self.dialect)

    def render(
        self, input: TIn | None = None, extra: Mapping[str, object] | None = None
    ) -> str:
        """Render the template with named arguments.

        Args:
            input: Input model instance providing arguments
            extra: Optional extra arguments not in the model

        Returns:
            Formatted string

        Raises:
            TypeError: When input is not an instance of the input model
            FormatError: When formatting fails

        """
        data: dict[str, object] = {}
        if input is not None:
            if self.input_model is not None and not isinstance(
                input, self.input_model
            ):
                msg = (
                    f"Expected {self.input_model.__name__} input, "
                    f"got {type(input).__name__}"
                )
                raise TypeError(msg)
            data = input.model_dump()
        if extra:
            data = {**data, **extra}
        return format_string(self.dialect, self.template, data, config=self.config)

    def render_positional(self, args: Sequence[object]) -> str:
        """Render the template with a positional argument list."""
        return format_string(self.dialect, self.template, args, config=self.config)

    def validate(self, provided: Mapping[str, object]) -> None:
        """Check that ``provided`` has exactly the template's keys.

        Raises:
            KeyValidationError: When keys are missing or extra

        """
        validate_keys(self.template, self.dialect, provided)


def from_template[TIn: BaseModel](
    template: str,
    *,
    dialect: Dialect | str,
    input_model: type[TIn] | None = None,
    config: FormatConfig | None = None,
) -> FormatTemplate[TIn]:
    """Create a format template from a template string.

    Args:
        template: Template string
        dialect: Dialect the template is written in
        input_model: Optional pydantic model providing named arguments
        config: Optional call configuration

    Returns:
        Configured format template instance

    """
    return FormatTemplate(
        template=template,
        dialect=dialect,
        input_model=input_model,
        config=config,
    )
