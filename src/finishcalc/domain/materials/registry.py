"""Material calculator registry.

Maps material category names to calculator plugins and dispatches metrics
and parameters to the plugin handling a category. Adding a material type
means registering a new plugin; the dispatcher never changes.
"""

from __future__ import annotations

import logging
from typing import Mapping

from ..exceptions import UnknownCategoryError
from ..value_objects import MaterialResult
from .protocol import MaterialCalculator, SurfaceMetrics

logger = logging.getLogger(__name__)


class MaterialCalculatorRegistry:
    """Registry of material calculator plugins keyed by category.

    Registering a category that already exists replaces the previous plugin
    (last write wins), which lets tests and hosts hot-swap a calculator.
    Registries are plain instances: build one at application start and pass
    it to the services that need it.

    Example:
        registry = MaterialCalculatorRegistry()
        registry.register("tile", TileCalculator())

        result = registry.calculate("tile", metrics, {"tile_width": "30", ...})
    """

    def __init__(self) -> None:
        self._plugins: dict[str, MaterialCalculator] = {}

    def register(self, category: str, plugin: MaterialCalculator) -> None:
        """Register a plugin for a category, replacing any previous one.

        Args:
            category: Category name the plugin handles (e.g. "paint").
            plugin: Object implementing the MaterialCalculator protocol.

        Raises:
            ValueError: If the category name is empty.
        """
        if not category or not category.strip():
            raise ValueError("Material category must be a non-empty string")
        if category in self._plugins:
            logger.warning(f"Overwriting existing calculator for category '{category}'")
            # re-insert so listing order reflects the latest registration
            del self._plugins[category]
        self._plugins[category] = plugin
        logger.debug(f"Registered calculator '{category}': {type(plugin).__name__}")

    def unregister(self, category: str) -> None:
        """Remove a category. Unknown categories are ignored."""
        if self._plugins.pop(category, None) is not None:
            logger.debug(f"Unregistered calculator '{category}'")

    def get(self, category: str) -> MaterialCalculator:
        """Get the plugin for a category.

        Raises:
            UnknownCategoryError: If no plugin is registered for the category.
        """
        if category not in self._plugins:
            raise UnknownCategoryError(category, self.list_categories())
        return self._plugins[category]

    def is_registered(self, category: str) -> bool:
        """Check whether a category has a plugin."""
        return category in self._plugins

    def list_categories(self) -> list[str]:
        """Registered categories in registration order."""
        return list(self._plugins)

    def calculate(
        self,
        category: str,
        metrics: SurfaceMetrics,
        params: Mapping[str, str],
    ) -> MaterialResult | None:
        """Dispatch to the plugin for ``category`` and return its result unmodified.

        Raises:
            UnknownCategoryError: If no plugin is registered for the category.
        """
        plugin = self.get(category)
        return plugin.compute_result(metrics, params)

    def clear(self) -> None:
        """Remove all plugins.

        This is primarily useful for testing.
        """
        self._plugins.clear()

    def __contains__(self, category: object) -> bool:
        return category in self._plugins

    def __len__(self) -> int:
        return len(self._plugins)
