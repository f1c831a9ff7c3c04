"""
Default resolution hooks implementation.

Provides basic implementations of the ResolutionHooks protocol for
common observability patterns and logging integration.
"""

import logging
from collections.abc import Mapping
from typing import Any

from ..protocols import CachingConfigurer, ResolutionHooks

logger = logging.getLogger(__name__)


class DefaultResolutionHooks:
    """Default implementation of ResolutionHooks protocol.

    Logs every resolution event. Can be used as-is or as a base class
    for custom hook implementations.
    """

    def __init__(self, log_level: int = logging.DEBUG) -> None:
        """Initialize hooks with configurable log level.

        Args:
            log_level: Log level for resolution events (default: DEBUG)
        """
        self._log_level = log_level

    def on_metadata_captured(self, class_name: str, attributes: Mapping[str, Any]) -> None:
        """Log captured directive attributes.

        Args:
            class_name: Importing class name
            attributes: Captured directive attributes
        """
        logger.log(self._log_level, "Caching directive on %s declares %s", class_name, sorted(attributes))

    def on_configurer_selected(self, class_name: str, configurer: CachingConfigurer | None) -> None:
        """Log configurer selection.

        Args:
            class_name: Importing class name
            configurer: Selected configurer, None when defaults are kept
        """
        if configurer is None:
            logger.log(self._log_level, "No CachingConfigurer for %s, using defaults", class_name)
        else:
            logger.log(self._log_level, "CachingConfigurer %s selected for %s", type(configurer).__name__, class_name)

    def on_resolved(self, class_name: str, configuration: Any) -> None:
        """Log successful resolution.

        Args:
            class_name: Importing class name
            configuration: Resolved configuration
        """
        logger.log(
            self._log_level,
            "Caching configuration resolved for %s (customized: %s)",
            class_name,
            getattr(configuration, "is_customized", False),
        )

    def on_resolution_error(self, class_name: str, error: Exception) -> None:
        """Log resolution failure.

        Args:
            class_name: Importing class name
            error: Error that aborted resolution
        """
        logger.error("Caching configuration FAILED for %s: %s (%s)", class_name, str(error), type(error).__name__)


class SilentResolutionHooks:
    """Silent implementation that performs no operations."""

    def on_metadata_captured(self, class_name: str, attributes: Mapping[str, Any]) -> None:
        pass

    def on_configurer_selected(self, class_name: str, configurer: CachingConfigurer | None) -> None:
        pass

    def on_resolved(self, class_name: str, configuration: Any) -> None:
        pass

    def on_resolution_error(self, class_name: str, error: Exception) -> None:
        pass


class CompositeResolutionHooks:
    """Composite hooks that delegate to multiple hook implementations.

    Example:
        hooks = CompositeResolutionHooks([
            DefaultResolutionHooks(),
            OpenTelemetryResolutionHooks(),
        ])
    """

    def __init__(self, hooks: list[ResolutionHooks]) -> None:
        """Initialize composite hooks.

        Args:
            hooks: List of hook implementations to delegate to
        """
        self._hooks = hooks

    def on_metadata_captured(self, class_name: str, attributes: Mapping[str, Any]) -> None:
        """Delegate metadata capture to all hooks."""
        for hook in self._hooks:
            try:
                hook.on_metadata_captured(class_name, attributes)
            except Exception as e:
                # Hook errors must not break startup wiring
                logger.warning("Hook error in on_metadata_captured for %s: %s", class_name, e)

    def on_configurer_selected(self, class_name: str, configurer: CachingConfigurer | None) -> None:
        """Delegate configurer selection to all hooks."""
        for hook in self._hooks:
            try:
                hook.on_configurer_selected(class_name, configurer)
            except Exception as e:
                logger.warning("Hook error in on_configurer_selected for %s: %s", class_name, e)

    def on_resolved(self, class_name: str, configuration: Any) -> None:
        """Delegate successful resolution to all hooks."""
        for hook in self._hooks:
            try:
                hook.on_resolved(class_name, configuration)
            except Exception as e:
                logger.warning("Hook error in on_resolved for %s: %s", class_name, e)

    def on_resolution_error(self, class_name: str, error: Exception) -> None:
        """Delegate resolution failure to all hooks."""
        for hook in self._hooks:
            try:
                hook.on_resolution_error(class_name, error)
            except Exception as e:
                logger.warning("Hook error in on_resolution_error for %s: %s", class_name, e)

    def add_hook(self, hook: ResolutionHooks) -> None:
        """Add a new hook to the composite.

        Args:
            hook: Hook implementation to add
        """
        self._hooks.append(hook)

    def remove_hook(self, hook: ResolutionHooks) -> bool:
        """Remove a hook from the composite.

        Args:
            hook: Hook implementation to remove

        Returns:
            True if hook was found and removed, False otherwise
        """
        try:
            self._hooks.remove(hook)
            return True
        except ValueError:
            return False
