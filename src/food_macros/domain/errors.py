"""Errors raised while resolving a food volume into macros."""


class FoodLookupError(Exception):
    """Base error for a volume item that could not be converted."""

    kind = "lookup_error"

    def __init__(self, object_name: str, message: str) -> None:
        super().__init__(message)
        self.object_name = object_name


class UnrecognizedFoodError(FoodLookupError):
    """Object name is not in the recognized set."""

    kind = "unrecognized_food"

    def __init__(self, object_name: str) -> None:
        super().__init__(object_name, f"unknown food: {object_name}")


class RecordNotFoundError(FoodLookupError):
    """The store has no record for the canonical description."""

    kind = "record_not_found"

    def __init__(self, object_name: str, description: str) -> None:
        super().__init__(object_name, f"no matching food found for: {description}")
        self.description = description


class StoreUnavailableError(FoodLookupError):
    """The store query failed."""

    kind = "store_unavailable"

    def __init__(self, object_name: str, description: str) -> None:
        super().__init__(object_name, f"query failed for: {description}")
        self.description = description


class NoConversionAvailableError(FoodLookupError):
    """The record has no usable cup or fallback portion."""

    kind = "no_conversion"

    def __init__(self, object_name: str) -> None:
        super().__init__(object_name, f"no cup measurement found for {object_name}")


class NonFiniteResultError(FoodLookupError):
    """The scaled weight or macros overflowed to a non-finite value."""

    kind = "non_finite_result"

    def __init__(self, object_name: str, volume_cups: float) -> None:
        super().__init__(
            object_name, f"volume {volume_cups} for {object_name} is out of range"
        )
        self.volume_cups = volume_cups
