"""Error types shared by the layout core, render backends and the API."""

from __future__ import annotations

from typing import Any


class SealForgeError(Exception):
    """Base class for every error raised by SealForge."""


class DesignValidationError(SealForgeError, ValueError):
    """A SealDesign violates a bound. Raised before any geometry is computed."""

    kind = "validation_error"

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "field": self.field, "message": str(self)}


class ValueOutOfRange(DesignValidationError):
    kind = "value_out_of_range"

    def __init__(self, field: str, min: float, max: float, actual: float) -> None:
        super().__init__(field, f"{field} must be within [{min}, {max}], got {actual}")
        self.min = min
        self.max = max
        self.actual = actual

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update({"min": self.min, "max": self.max, "actual": self.actual})
        return data


class EmptyField(DesignValidationError):
    kind = "empty_field"

    def __init__(self, field: str) -> None:
        super().__init__(field, f"{field} must not be empty")


class MissingRequiredField(DesignValidationError):
    kind = "missing_required_field"

    def __init__(self, field: str) -> None:
        super().__init__(field, f"{field} is required")


class InvalidColor(DesignValidationError):
    kind = "invalid_color"

    def __init__(self, field: str, actual: str) -> None:
        super().__init__(field, f"{field} is not a valid color: {actual!r}")
        self.actual = actual

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["actual"] = self.actual
        return data


class InvalidChoice(DesignValidationError):
    kind = "invalid_choice"

    def __init__(self, field: str, actual: str, choices: list[str]) -> None:
        super().__init__(field, f"{field} must be one of {choices}, got {actual!r}")
        self.actual = actual
        self.choices = choices

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update({"actual": self.actual, "choices": self.choices})
        return data


class NonFiniteValue(DesignValidationError):
    kind = "non_finite_value"

    def __init__(self, field: str, actual: float) -> None:
        super().__init__(field, f"{field} must be a finite number, got {actual}")
        self.actual = actual

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        # NaN and infinity have no JSON form
        data["actual"] = str(self.actual)
        return data


class RingTooSmall(DesignValidationError):
    """A text ring would sit at or past the seal center."""

    kind = "ring_too_small"

    def __init__(self, field: str, radius: float) -> None:
        super().__init__(
            field,
            f"{field} leaves no room for its text ring (radius {radius:.1f}); "
            "use a larger diameter or a smaller font",
        )
        self.radius = radius

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["radius"] = self.radius
        return data


class RenderFailure(SealForgeError):
    """The drawing surface or a font resource failed. Not retried."""
