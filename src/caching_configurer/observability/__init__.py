"""
Observability hooks and metrics for configuration resolution.

This module provides:
- Hook implementations for resolution events
- OpenTelemetry counters for resolution outcomes
"""

from .hooks import (
    CompositeResolutionHooks,
    DefaultResolutionHooks,
    SilentResolutionHooks,
)
from .metrics import OpenTelemetryResolutionHooks

__all__ = [
    # Hook implementations
    "DefaultResolutionHooks",
    "SilentResolutionHooks",
    "CompositeResolutionHooks",
    # Metrics
    "OpenTelemetryResolutionHooks",
]
