"""Abstract base class for the built-in material calculators."""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from typing import ClassVar, Mapping

from ..exceptions import CalculationError
from ..parsing import parse_decimal
from ..value_objects import MaterialResult
from .protocol import SurfaceMetrics

logger = logging.getLogger(__name__)

SURFACES: tuple[str, ...] = ("walls", "floor", "ceiling")


class BaseMaterialCalculator(ABC):
    """All built-in material calculators inherit from this.

    Subclasses implement :meth:`_compute`. Parameters arrive as the raw text
    the user typed; the helpers below parse them leniently. Quantities are
    always rounded up to the next purchasable unit.
    """

    category: ClassVar[str]
    name: ClassVar[str] = ""
    description: ClassVar[str] = ""
    # Suggested starting values, merged under user params by the caller
    default_params: ClassVar[dict[str, str]] = {}
    # Non-numeric parameters and their allowed values
    choice_params: ClassVar[dict[str, tuple[str, ...]]] = {}

    def compute_result(
        self, metrics: SurfaceMetrics, params: Mapping[str, str]
    ) -> MaterialResult | None:
        """Compute the result, converting arithmetic failures to CalculationError."""
        try:
            return self._compute(metrics, params)
        except (ArithmeticError, ValueError) as e:
            logger.warning(f"{self.category} calculation failed: {e}")
            raise CalculationError(
                f"Cannot calculate {self.category}: {e}"
            ) from e

    @abstractmethod
    def _compute(
        self, metrics: SurfaceMetrics, params: Mapping[str, str]
    ) -> MaterialResult | None:
        """Compute the result from parsed inputs, or None if not computable."""

    # --- Helper methods for all calculators ---

    def number(self, params: Mapping[str, str], key: str, default: float = 0.0) -> float:
        """Parse a numeric parameter. Missing or unparseable reads as ``default``."""
        return parse_decimal(params.get(key), default)

    def positive(self, params: Mapping[str, str], key: str, default: float) -> float:
        """Parse a parameter that must be positive, using ``default`` otherwise."""
        value = self.number(params, key)
        return value if value > 0 else default

    def choice(self, params: Mapping[str, str], key: str) -> str | None:
        """Return a choice parameter if it is one of the allowed values."""
        value = str(params.get(key, "")).strip().lower()
        allowed = self.choice_params.get(key, ())
        return value if value in allowed else None

    def surface_area(
        self, metrics: SurfaceMetrics, params: Mapping[str, str], default: str = "walls"
    ) -> float:
        """Pick the area of the surface named by the ``surface`` parameter."""
        surface = self.choice(params, "surface") or default
        if surface == "floor":
            return metrics.floor_area
        if surface == "ceiling":
            return metrics.ceiling_area
        return metrics.net_wall_area

    def margin_factor(self, margin_percent: float) -> float:
        """Multiplier for a waste margin given in percent."""
        return 1 + margin_percent / 100

    def round_up(self, quantity: float) -> int:
        """Round UP to the next whole unit.

        The value is first rounded to 9 decimals so that float noise such as
        ``40.000000000000007`` does not buy an extra unit.
        """
        return math.ceil(round(quantity, 9))

    def money(self, amount: float) -> str:
        """Format a monetary amount."""
        return f"{amount:.2f}"

    def make_result(
        self,
        quantity: str,
        cost: float,
        details: dict[str, str],
        show_note: bool,
    ) -> MaterialResult:
        """Build a MaterialResult for this calculator's category."""
        return MaterialResult(
            category=self.category,
            quantity=quantity,
            cost=round(cost, 2),
            details=details,
            show_note=show_note,
        )
