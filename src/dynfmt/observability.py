"""OpenTelemetry tracing for format calls."""

from collections.abc import Sized
import hashlib
import time

from opentelemetry import trace

from dynfmt.core.config import DEFAULT_CONFIG
from dynfmt.core.config import FormatConfig
from dynfmt.core.errors import ParseError
from dynfmt.dialects import get_dialect
from dynfmt.driver import substitute
from dynfmt.enums import Dialect
from dynfmt.validation import collect_keys

tracer = trace.get_tracer(__name__)


def format_with_observability(
    dialect: Dialect | str,
    template: str,
    args: object,
    config: FormatConfig = DEFAULT_CONFIG,
) -> str:
    """Format a template inside a ``dynfmt.format`` span.

    Args:
        dialect: Dialect the template is written in
        template: Template string
        args: Positional sequence or named mapping of values
        config: Call configuration

    Returns:
        Formatted string

    Raises:
        FormatError: Recorded on the span, then re-raised

    """
    impl = get_dialect(dialect)
    with tracer.start_as_current_span("dynfmt.format") as span:
        start_time = time.perf_counter()

        span.set_attribute("dynfmt.dialect", str(dialect))
        span.set_attribute("dynfmt.template_hash", _hash_template(template))
        span.set_attribute(
            "dynfmt.argument_count", len(args) if isinstance(args, Sized) else 0
        )

        if isinstance(template, str):
            try:
                keys = collect_keys(template, dialect)
                span.set_attribute("dynfmt.keys", ",".join(sorted(keys)))
            except ParseError as e:
                span.set_attribute("dynfmt.parse_error_offset", e.offset)

        result = substitute(impl, template, args, config)

        render_ms = (time.perf_counter() - start_time) * 1000
        span.set_attribute("dynfmt.render_ms", render_ms)
        span.set_attribute("dynfmt.result_length", len(result))

        return result


def _hash_template(template: object) -> str:
    """Generate hash of template for telemetry."""
    template_str = str(template)[:500]
    return hashlib.sha256(template_str.encode()).hexdigest()[:16]
