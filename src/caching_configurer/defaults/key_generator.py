"""
Default key generator implementation.

Implements the KeyGenerator protocol used when no CachingConfigurer
overrides it. Keys are derived from the invocation arguments only.
"""

from collections.abc import Hashable
from typing import Any


def _freeze(obj: Any) -> Hashable:
    """Convert containers into hashable equivalents, recursively.

    Other unhashable values are reduced to their type, so equal values
    still hash alike; equality of keys is always decided on the params.
    """
    if isinstance(obj, (list, tuple)):
        return tuple(_freeze(item) for item in obj)
    if isinstance(obj, dict):
        return frozenset((key, _freeze(value)) for key, value in obj.items())
    if isinstance(obj, (set, frozenset)):
        return frozenset(_freeze(item) for item in obj)
    if isinstance(obj, bytearray):
        return bytes(obj)
    try:
        hash(obj)
    except TypeError:
        return ("<unhashable>", type(obj).__module__, type(obj).__qualname__)
    return obj


class SimpleKey:
    """Hashable key wrapping the full tuple of invocation arguments.

    Equality and hash are structural: two keys built from equal
    arguments are interchangeable as cache keys.
    """

    EMPTY: "SimpleKey"

    __slots__ = ("_params", "_hash")

    def __init__(self, *params: Any) -> None:
        self._params = params
        self._hash = hash(_freeze(params))

    @property
    def params(self) -> tuple[Any, ...]:
        """Arguments this key was built from."""
        return self._params

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SimpleKey):
            return NotImplemented
        return self._params == other._params

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        return f"SimpleKey{self._params!r}"


SimpleKey.EMPTY = SimpleKey()


class DefaultKeyGenerator:
    """Key generator based on invocation arguments.

    - No arguments: SimpleKey.EMPTY
    - A single hashable, non-sequence argument: the argument itself
    - Anything else: a SimpleKey of all arguments

    Stateless and thread-safe. The target and method are ignored, so
    callers are expected to keep one cache per cached operation.
    """

    def generate(self, target: Any, method: Any, *params: Any) -> Any:
        """Generate a key for the invocation.

        Args:
            target: Target instance (unused)
            method: Invoked method (unused)
            *params: Invocation arguments

        Returns:
            Hashable cache key
        """
        if not params:
            return SimpleKey.EMPTY
        if len(params) == 1:
            param = params[0]
            if param is not None and not isinstance(param, (list, tuple)) and self._is_hashable(param):
                return param
        return SimpleKey(*params)

    @staticmethod
    def _is_hashable(value: Any) -> bool:
        try:
            hash(value)
        except TypeError:
            return False
        return True
