"""Calculator settings schema.

Settings are plain Pydantic models so they can be loaded from a JSON file,
built from a dict, or constructed directly in code and tests.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from finishcalc.domain.value_objects import Unit


class LimitsConfig(BaseModel):
    """Upper bounds used by the validation schemas. Lengths in meters.

    Attributes:
        max_room_length: Largest accepted room length or width.
        max_room_height: Largest accepted room height.
        max_opening_width: Largest accepted door/window width.
        max_opening_height: Largest accepted door/window height.
        max_element_size: Largest accepted niche/protrusion width or depth.
        max_column_diameter: Largest accepted column diameter.
        max_count: Largest accepted count of identical items.
        max_name_length: Longest accepted room/material name.
    """

    model_config = ConfigDict(extra="forbid")

    max_room_length: float = Field(default=100.0, gt=0)
    max_room_height: float = Field(default=10.0, gt=0)
    max_opening_width: float = Field(default=10.0, gt=0)
    max_opening_height: float = Field(default=5.0, gt=0)
    max_element_size: float = Field(default=10.0, gt=0)
    max_column_diameter: float = Field(default=2.0, gt=0)
    max_count: int = Field(default=20, ge=1)
    max_name_length: int = Field(default=100, ge=1)


class CalculatorSettings(BaseModel):
    """Top-level settings for the estimation engine.

    Attributes:
        default_unit: Display/input unit applied to rooms that do not carry one.
        precision: Decimal places used when exporting numbers.
        currency: Currency label shown next to costs.
        limits: Validation bounds.
        material_defaults: Category -> default params merged under user params.
        debounce_delay: Seconds to wait before recalculating after rapid edits.
    """

    model_config = ConfigDict(extra="forbid")

    default_unit: Unit = Unit.M
    precision: int = Field(default=2, ge=0, le=6)
    currency: str = "RUB"
    limits: LimitsConfig = Field(default_factory=LimitsConfig)
    material_defaults: dict[str, dict[str, str]] = Field(default_factory=dict)
    debounce_delay: float = Field(default=0.3, ge=0)

    @field_validator("material_defaults")
    @classmethod
    def validate_material_defaults(
        cls, v: dict[str, dict[str, str]]
    ) -> dict[str, dict[str, str]]:
        """Reject empty category names."""
        for category in v:
            if not category.strip():
                raise ValueError("Material default categories must be non-empty")
        return v

    def defaults_for(self, category: str) -> dict[str, str]:
        """Configured default params for a category (empty if none)."""
        return dict(self.material_defaults.get(category, {}))
