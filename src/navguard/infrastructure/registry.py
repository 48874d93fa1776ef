"""
Guard Registry with Entry Points Discovery.

Provides named leaf-guard lookup via Python entry points (navguard.guards group).
Host packages can register their guards in their pyproject.toml:

    [project.entry-points."navguard.guards"]
    AuthGuard = "myapp.guards:AuthGuard"

Policy documents then refer to those guards by name.
"""

import logging
import warnings
from collections.abc import Callable
from importlib.metadata import entry_points
from typing import Any

from navguard.domain.interfaces import GuardInterface

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "navguard.guards"

GuardFactory = Callable[..., GuardInterface]


class GuardRegistry:
    """
    Registry of leaf guard factories (usually GuardInterface subclasses).

    Discovers guards via the 'navguard.guards' entry point group.
    Uses lazy loading - entry points are only loaded on first access.

    Example usage:
        GuardRegistry.register("AuthGuard", AuthGuard)
        guard = GuardRegistry.create("RedirectGuard", path="/login")
    """

    _guards: dict[str, GuardFactory] = {}
    _loaded: bool = False

    @classmethod
    def _load_entry_points(cls) -> None:
        """Load guards from entry points (lazy, called once)."""
        if cls._loaded:
            return

        loaded = 0
        for ep in entry_points(group=ENTRY_POINT_GROUP):
            try:
                factory = ep.load()
            except Exception as e:
                warnings.warn(
                    f"Failed to load guard '{ep.name}' from entry point: {e}",
                    stacklevel=2,
                )
                continue
            # Manual registrations take precedence over discovered ones
            cls._guards.setdefault(ep.name, factory)
            loaded += 1

        logger.info("Discovered %d guard(s) from entry points", loaded)
        cls._loaded = True

    @classmethod
    def register(cls, name: str, factory: GuardFactory) -> None:
        """
        Manually register a guard factory.

        Args:
            name: Guard identifier used in policy documents
            factory: Class or callable returning a GuardInterface
        """
        cls._guards[name] = factory

    @classmethod
    def get(cls, name: str) -> GuardFactory:
        """
        Get a guard factory by name.

        Raises:
            KeyError: If guard not found
        """
        cls._load_entry_points()
        if name not in cls._guards:
            available = ", ".join(sorted(cls._guards)) or "(none)"
            raise KeyError(f"Guard '{name}' not found. Available guards: {available}")
        return cls._guards[name]

    @classmethod
    def create(cls, name: str, **config: Any) -> GuardInterface:
        """
        Create a guard instance by name.

        Args:
            name: Guard identifier
            **config: Keyword arguments passed to the factory

        Raises:
            KeyError: If guard not found
            TypeError: If the factory does not return a GuardInterface, or
                config doesn't match its signature
        """
        guard = cls.get(name)(**config)
        if not isinstance(guard, GuardInterface):
            raise TypeError(
                f"Guard factory '{name}' returned {type(guard).__name__}, "
                "expected a GuardInterface"
            )
        return guard

    @classmethod
    def available(cls) -> list[str]:
        """List registered guard names."""
        cls._load_entry_points()
        return sorted(cls._guards)

    @classmethod
    def clear(cls) -> None:
        """
        Clear all registered guards (useful for testing).

        Also resets the loaded flag so entry points can be reloaded.
        """
        cls._guards.clear()
        cls._loaded = False
