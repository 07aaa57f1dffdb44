"""Material calculator plugins and their registry.

- MaterialCalculator: Protocol every plugin implements
- BaseMaterialCalculator: Shared parsing/rounding helpers for built-ins
- MaterialCalculatorRegistry: Category -> plugin mapping and dispatch
- create_default_registry: Registry pre-populated with the built-in plugins
"""

from .base import BaseMaterialCalculator
from .drywall import DrywallCalculator
from .flooring import FlooringCalculator
from .paint import PaintCalculator
from .plaster import PlasterCalculator, PuttyCalculator, ScreedCalculator
from .protocol import MaterialCalculator, SurfaceMetrics
from .registry import MaterialCalculatorRegistry
from .skirting import SkirtingCalculator
from .tile import TileCalculator
from .wallpaper import WallpaperCalculator

BUILTIN_CALCULATORS: tuple[type[BaseMaterialCalculator], ...] = (
    PlasterCalculator,
    PuttyCalculator,
    PaintCalculator,
    WallpaperCalculator,
    TileCalculator,
    FlooringCalculator,
    ScreedCalculator,
    SkirtingCalculator,
    DrywallCalculator,
)


def create_default_registry() -> MaterialCalculatorRegistry:
    """Create a registry with all built-in calculators registered."""
    registry = MaterialCalculatorRegistry()
    for calculator_cls in BUILTIN_CALCULATORS:
        registry.register(calculator_cls.category, calculator_cls())
    return registry


__all__ = [
    "BUILTIN_CALCULATORS",
    "BaseMaterialCalculator",
    "DrywallCalculator",
    "FlooringCalculator",
    "MaterialCalculator",
    "MaterialCalculatorRegistry",
    "PaintCalculator",
    "PlasterCalculator",
    "PuttyCalculator",
    "ScreedCalculator",
    "SkirtingCalculator",
    "SurfaceMetrics",
    "TileCalculator",
    "WallpaperCalculator",
    "create_default_registry",
]
