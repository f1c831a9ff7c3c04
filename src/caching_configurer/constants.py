"""
Constants for caching configuration.

Defines the directive name, option names, environment variables and
error message templates shared by the resolver and option resolution.
"""

# Fully-qualified name of the enabling directive
ENABLE_CACHING_ANNOTATION = "caching_configurer.EnableCaching"

# Directive option names
ATTR_PROXY_TARGET_CLASS = "proxy_target_class"
ATTR_MODE = "mode"
ATTR_ORDER = "order"

# Environment variables (override defaults, never explicit attributes)
ENV_PROXY_TARGET_CLASS = "CACHING_PROXY_TARGET_CLASS"
ENV_ADVICE_MODE = "CACHING_ADVICE_MODE"
ENV_ORDER = "CACHING_ORDER"

# Default values
DEFAULT_PROXY_TARGET_CLASS = False
DEFAULT_ADVICE_MODE = "proxy"
LOWEST_PRECEDENCE = 2**31 - 1  # Advisor runs last unless ordered explicitly

# Truthy/falsy spellings accepted from environment variables
ENV_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
ENV_FALSE_VALUES = frozenset({"0", "false", "no", "off"})

# Error message templates
ERROR_ATTRIBUTE_MISSING = "Attribute '{name}' not found in attributes for annotation [{annotation}]"
ERROR_ATTRIBUTE_TYPE = (
    "Attribute '{name}' is of type {actual}, but {expected} was expected "
    "in attributes for annotation [{annotation}]"
)
ERROR_ATTRIBUTE_ENUM = "Attribute '{name}' has value {value!r}, expected one of {allowed} for annotation [{annotation}]"
ERROR_ENV_INVALID = "Environment variable {env} has invalid value {value!r}: {reason}"
ERROR_ALREADY_RESOLVED = "Caching configuration for {class_name} has already been resolved (or failed)"
