"""OpenTelemetry instrumentation and observability utilities."""

from tasty_bites_api.observability.config import configure_logging, setup_observability
from tasty_bites_api.observability.decorators import traced

__all__ = ["setup_observability", "configure_logging", "traced"]
