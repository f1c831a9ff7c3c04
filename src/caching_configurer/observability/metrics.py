"""
OpenTelemetry metrics for caching configuration resolution.

Exports counters for resolution outcomes so that startup wiring of the
caching layer can be monitored alongside runtime cache metrics.
"""

from collections.abc import Mapping
from typing import Any

from opentelemetry import metrics as otel_metrics

from ..protocols import CachingConfigurer

OUTCOME_DEFAULT = "default"
OUTCOME_CUSTOMIZED = "customized"


class OpenTelemetryResolutionHooks:
    """ResolutionHooks implementation backed by OpenTelemetry.

    Exported metrics:
    - caching.resolutions (counter): successful resolutions by outcome
      ("default" when no collaborator was overridden, "customized" otherwise)
    - caching.resolution_errors (counter): failed resolutions by error type

    Example:
        ```python
        from opentelemetry import metrics
        from opentelemetry.sdk.metrics import MeterProvider

        metrics.set_meter_provider(MeterProvider())
        resolver = CachingConfigurationResolver(hooks=OpenTelemetryResolutionHooks())
        ```
    """

    def __init__(self, meter_name: str = "caching_configurer") -> None:
        """Initialize OpenTelemetry instruments.

        Args:
            meter_name: Meter name used to group the metrics
        """
        meter = otel_metrics.get_meter(meter_name)

        self._resolutions_counter = meter.create_counter(
            "caching.resolutions",
            description="Number of successful caching configuration resolutions",
            unit="1",
        )
        self._errors_counter = meter.create_counter(
            "caching.resolution_errors",
            description="Number of failed caching configuration resolutions",
            unit="1",
        )

    def on_metadata_captured(self, class_name: str, attributes: Mapping[str, Any]) -> None:
        pass

    def on_configurer_selected(self, class_name: str, configurer: CachingConfigurer | None) -> None:
        pass

    def on_resolved(self, class_name: str, configuration: Any) -> None:
        """Count a successful resolution."""
        outcome = OUTCOME_CUSTOMIZED if getattr(configuration, "is_customized", False) else OUTCOME_DEFAULT
        self._resolutions_counter.add(1, {"class_name": class_name, "outcome": outcome})

    def on_resolution_error(self, class_name: str, error: Exception) -> None:
        """Count a failed resolution."""
        self._errors_counter.add(1, {"class_name": class_name, "error_type": type(error).__name__})
