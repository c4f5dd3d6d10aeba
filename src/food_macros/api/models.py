"""Pydantic models for the macro calculation endpoint."""

from pydantic import BaseModel, Field

from food_macros.domain.macros import MacroResult, VolumeItem


class Volume(BaseModel):
    """Estimated volume for one recognized object."""

    object_name: str
    volume_cups: float = Field(allow_inf_nan=False)
    uncertainty_cups: float | None = None

    def to_domain(self) -> VolumeItem:
        """Convert to the domain volume item."""
        return VolumeItem(object_name=self.object_name, volume_cups=self.volume_cups)


class VolumeRequestData(BaseModel):
    """Frame identifier and its volume estimates."""

    frame_id: str | None = None
    volumes: list[Volume] = Field(default_factory=list)


class VolumeRequest(BaseModel):
    """Request body for macro calculation."""

    data: VolumeRequestData = Field(default_factory=VolumeRequestData)


class Macros(BaseModel):
    """Macronutrient totals."""

    calories: float
    carbs: float
    fat: float
    protein: float


class MacroData(BaseModel):
    """Macro calculation result for one volume."""

    found: bool
    macros: Macros | None = None
    requested_food: str
    requested_volume: float
    calculated_weight: float | None = None

    @classmethod
    def from_result(cls, result: MacroResult) -> "MacroData":
        """Build the response payload from a domain result."""
        macros = None
        if result.macros is not None:
            macros = Macros(
                calories=result.macros.calories,
                carbs=result.macros.carbs,
                fat=result.macros.fat,
                protein=result.macros.protein,
            )
        return cls(
            found=result.found,
            macros=macros,
            requested_food=result.requested_food,
            requested_volume=result.requested_volume,
            calculated_weight=result.calculated_weight,
        )


class MacroResponse(BaseModel):
    """Response body for macro calculation."""

    data: list[MacroData]
