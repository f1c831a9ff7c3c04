"""
Option resolution for the caching directive.

Reads the standard directive options (proxy_target_class, mode, order)
following the precedence rules:

1. Explicit directive attribute (highest precedence)
2. Environment variable
3. Default value (lowest precedence)
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .attributes import EnableAttributes
from .constants import (
    ATTR_MODE,
    ATTR_ORDER,
    ATTR_PROXY_TARGET_CLASS,
    DEFAULT_ADVICE_MODE,
    DEFAULT_PROXY_TARGET_CLASS,
    ENV_ADVICE_MODE,
    ENV_FALSE_VALUES,
    ENV_ORDER,
    ENV_PROXY_TARGET_CLASS,
    ENV_TRUE_VALUES,
    ERROR_ENV_INVALID,
    LOWEST_PRECEDENCE,
)
from .exceptions import InvalidAttributeError


class AdviceMode(Enum):
    """How caching advice is applied to the target."""

    PROXY = "proxy"
    ASPECTJ = "aspectj"


@dataclass(frozen=True)
class CachingOptions:
    """Immutable view of the directive options."""

    proxy_target_class: bool
    mode: AdviceMode
    order: int


class CachingOptionsConfig:
    """Resolves directive options with environment variable support.

    The attribute mapping itself is never modified; options are derived
    from it on demand.
    """

    @classmethod
    def resolve(cls, attributes: Mapping[str, Any]) -> CachingOptions:
        """Resolve all options from the captured directive attributes.

        Args:
            attributes: Captured directive attributes

        Returns:
            Resolved options

        Raises:
            InvalidAttributeError: If an attribute or environment value is invalid
        """
        enable_attributes = EnableAttributes.from_map(attributes)
        return CachingOptions(
            proxy_target_class=cls.resolve_proxy_target_class(enable_attributes),
            mode=cls.resolve_mode(enable_attributes),
            order=cls.resolve_order(enable_attributes),
        )

    @classmethod
    def resolve_proxy_target_class(cls, attributes: EnableAttributes) -> bool:
        """Resolve proxy_target_class following precedence rules."""
        if ATTR_PROXY_TARGET_CLASS in attributes:
            return attributes.get_bool(ATTR_PROXY_TARGET_CLASS)

        env_value = os.getenv(ENV_PROXY_TARGET_CLASS)
        if env_value:
            return cls._parse_bool(ENV_PROXY_TARGET_CLASS, env_value, ATTR_PROXY_TARGET_CLASS)

        return DEFAULT_PROXY_TARGET_CLASS

    @classmethod
    def resolve_mode(cls, attributes: EnableAttributes) -> AdviceMode:
        """Resolve advice mode following precedence rules."""
        if ATTR_MODE in attributes:
            return attributes.get_enum(ATTR_MODE, AdviceMode)

        env_value = os.getenv(ENV_ADVICE_MODE)
        if env_value:
            try:
                return AdviceMode(env_value.strip().lower())
            except ValueError:
                allowed = ", ".join(mode.value for mode in AdviceMode)
                raise InvalidAttributeError(
                    ERROR_ENV_INVALID.format(env=ENV_ADVICE_MODE, value=env_value, reason=f"expected one of {allowed}"),
                    attribute=ATTR_MODE,
                ) from None

        return AdviceMode(DEFAULT_ADVICE_MODE)

    @classmethod
    def resolve_order(cls, attributes: EnableAttributes) -> int:
        """Resolve advisor order following precedence rules."""
        if ATTR_ORDER in attributes:
            return attributes.get_int(ATTR_ORDER)

        env_value = os.getenv(ENV_ORDER)
        if env_value:
            try:
                return int(env_value)
            except ValueError:
                raise InvalidAttributeError(
                    ERROR_ENV_INVALID.format(env=ENV_ORDER, value=env_value, reason="expected an integer"),
                    attribute=ATTR_ORDER,
                ) from None

        return LOWEST_PRECEDENCE

    @staticmethod
    def _parse_bool(env_name: str, value: str, attribute: str) -> bool:
        normalized = value.strip().lower()
        if normalized in ENV_TRUE_VALUES:
            return True
        if normalized in ENV_FALSE_VALUES:
            return False
        raise InvalidAttributeError(
            ERROR_ENV_INVALID.format(env=env_name, value=value, reason="expected a boolean"),
            attribute=attribute,
        )
