"""Plugin registry - discovers transformations via entry points."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import lru_cache
from importlib.metadata import entry_points

from ..application.transformations import Transformation, builtin_table
from ..config import TRANSFORMATION_ENTRY_POINT_GROUP
from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class PluginRegistry:
    """Registry for discovering transformation plugins.

    Uses entry points for plugin discovery. Third-party packages can
    register transformations:

    [project.entry-points."imagehost.transformations"]
    watermark = "my_package:Watermark"

    Every lookup returns a new table, so callers can trim or extend it
    without affecting other dispatchers.
    """

    GROUP = TRANSFORMATION_ENTRY_POINT_GROUP

    @classmethod
    @lru_cache(maxsize=1)
    def _discover_plugins(cls) -> tuple[tuple[str, type], ...]:
        plugins = []

        for ep in entry_points(group=cls.GROUP):
            try:
                plugin = ep.load()
            except Exception as e:
                logger.warning(f"Failed to load transformation {ep.name}: {e}")
                continue

            if not (isinstance(plugin, type) and issubclass(plugin, Transformation)):
                logger.warning(f"Ignoring transformation {ep.name}: not a Transformation subclass")
                continue

            plugins.append((ep.name, plugin))
            logger.debug(f"Discovered transformation: {ep.name}")

        return tuple(plugins)

    @classmethod
    def discover_transformations(cls) -> dict[str, type[Transformation]]:
        """Discover all available transformations.

        Built-ins win over plugins registered under the same name.

        Returns:
            Dict mapping transformation names to classes
        """
        table: dict[str, type[Transformation]] = dict(cls._discover_plugins())
        table.update(builtin_table())
        return table

    @classmethod
    def build_table(
        cls,
        names: Iterable[str] | None = None
    ) -> dict[str, type[Transformation]]:
        """Build a dispatcher table.

        Args:
            names: Transformations to include (None for all)

        Returns:
            Dict mapping names to classes

        Raises:
            ConfigurationError: If a requested name is not available
        """
        available = cls.discover_transformations()

        if names is None:
            return available

        table = {}
        for name in names:
            if name not in available:
                raise ConfigurationError(
                    f"Unknown transformation: {name}. Available: {', '.join(sorted(available))}",
                    config_key=name
                )
            table[name] = available[name]
        return table

    @classmethod
    def list_available(cls) -> list[str]:
        """List available transformation names."""
        return sorted(cls.discover_transformations())
