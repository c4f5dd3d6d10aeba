"""Macro calculation domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class VolumeItem:
    """A recognized food instance with its estimated volume."""

    object_name: str
    volume_cups: float


@dataclass(frozen=True)
class MacroProfile:
    """Macronutrient totals for a computed weight."""

    calories: float = 0.0
    protein: float = 0.0
    fat: float = 0.0
    carbs: float = 0.0


@dataclass(frozen=True)
class MacroResult:
    """Outcome of converting one volume item into macros."""

    found: bool
    requested_food: str
    requested_volume: float
    calculated_weight: float | None = None
    macros: MacroProfile | None = None

    @classmethod
    def not_found(cls, object_name: str, volume_cups: float) -> "MacroResult":
        """Build a result that only echoes the request."""
        return cls(
            found=False,
            requested_food=object_name,
            requested_volume=volume_cups,
        )
