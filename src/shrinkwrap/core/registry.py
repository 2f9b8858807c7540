"""Arbitrary Registry for looking up base arbitraries by name or type."""

from typing import Any

from shrinkwrap.core.arbitrary import (
    Arbitrary,
    BoolArbitrary,
    CharArbitrary,
    FloatArbitrary,
    IntegralArbitrary,
    TextArbitrary,
)
from shrinkwrap.core.integral import IntegralType
from shrinkwrap.logging import get_logger

logger = get_logger(__name__)


class ArbitraryRegistry:
    """Registry for base arbitraries.

    Base arbitraries are the payload generators that modifiers wrap. They
    are registered under a name and optionally a Python type, so callers
    can write Positive over ``int`` instead of building an instance.
    """

    def __init__(self):
        self._by_name: dict[str, Arbitrary[Any]] = {}
        self._by_type: dict[type, str] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register the default base arbitraries."""
        for itype in IntegralType:
            self.register(itype.value, IntegralArbitrary(itype))

        self.register("int", IntegralArbitrary(IntegralType.INT64), python_type=int)
        self.register("float", FloatArbitrary(), python_type=float)
        self.register("bool", BoolArbitrary(), python_type=bool)
        self.register("char", CharArbitrary())
        self.register("text", TextArbitrary(), python_type=str)

    def register(
        self,
        name: str,
        arbitrary: Arbitrary[Any],
        python_type: type | None = None,
    ) -> None:
        """Register a base arbitrary.

        Args:
            name: Lookup name
            arbitrary: The arbitrary instance
            python_type: Optional Python type that resolves to this arbitrary
        """
        self._by_name[name] = arbitrary
        if python_type is not None:
            self._by_type[python_type] = name
        logger.debug("Registered base arbitrary %s -> %r", name, arbitrary)

    def get(self, key: str | type) -> Arbitrary[Any] | None:
        """Get an arbitrary by name or Python type.

        Args:
            key: Registered name or Python type

        Returns:
            The arbitrary or None if not found
        """
        if isinstance(key, type):
            name = self._by_type.get(key)
            if name is None:
                return None
            key = name
        return self._by_name.get(key)

    def resolve(self, base: Arbitrary[Any] | str | type) -> Arbitrary[Any]:
        """Turn a name, type or instance into an arbitrary instance.

        Raises:
            KeyError: If the name or type is not registered
        """
        if isinstance(base, Arbitrary):
            return base

        arbitrary = self.get(base)
        if arbitrary is None:
            label = base.__name__ if isinstance(base, type) else base
            available = ", ".join(self.list_names())
            raise KeyError(f"No base arbitrary for '{label}'. Available: {available}")
        return arbitrary

    def list_names(self) -> list[str]:
        """List all registered names."""
        return list(self._by_name.keys())

    def unregister(self, name: str) -> bool:
        """Remove an arbitrary from the registry.

        Returns:
            True if removed, False if not found
        """
        if name not in self._by_name:
            return False
        del self._by_name[name]
        self._by_type = {t: n for t, n in self._by_type.items() if n != name}
        return True

    def __contains__(self, key: str | type) -> bool:
        return self.get(key) is not None

    def __len__(self) -> int:
        return len(self._by_name)


_global_registry: ArbitraryRegistry | None = None


def get_global_arbitrary_registry() -> ArbitraryRegistry:
    """Get the global arbitrary registry singleton."""
    global _global_registry
    if _global_registry is None:
        _global_registry = ArbitraryRegistry()
    return _global_registry


def resolve_base(base: Arbitrary[Any] | str | type) -> Arbitrary[Any]:
    """Resolve a base against the global registry."""
    return get_global_arbitrary_registry().resolve(base)
