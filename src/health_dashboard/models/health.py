"""Health metric input and daily insight models."""

import math
from dataclasses import dataclass, field, fields

from ..errors import ValidationError

Number = int | float


def coerce_number(value, name: str) -> Number | None:
    """Turn a raw form value into a number; blank values become None.

    Integral text such as ``"8000"`` stays an ``int`` so it goes over the
    wire as ``8000`` rather than ``8000.0``.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValidationError(f"{name} must be a number, got {value!r}")
    if isinstance(value, (int, float)):
        number = value
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            number = int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError as e:
                raise ValidationError(f"{name} must be a number, got {text!r}", e) from e
    if isinstance(number, float) and not math.isfinite(number):
        raise ValidationError(f"{name} must be a finite number")
    return number


def _optional_number(data: dict, key: str) -> Number | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key} must be numeric, got {type(value).__name__}")
    return value


@dataclass
class HealthMetricInput:
    """Metrics typed in by the user for one submission.

    Values are kept as entered (usually strings) and only coerced when the
    payload is built.
    """

    steps: str | Number | None = None
    sleep_hours: str | Number | None = None
    heart_rate_avg: str | Number | None = None
    calories_in: str | Number | None = None
    calories_out: str | Number | None = None

    def to_payload(self, user_id: str) -> dict:
        """Build the sparse wire payload: user_id plus every non-blank metric."""
        payload: dict = {"user_id": user_id}
        for f in fields(self):
            number = coerce_number(getattr(self, f.name), f.name)
            if number is not None:
                payload[f.name] = number
        return payload

    def is_empty(self) -> bool:
        return all(
            getattr(self, f.name) is None or str(getattr(self, f.name)).strip() == ""
            for f in fields(self)
        )

    def clear(self) -> None:
        """Reset every field to empty after a confirmed submit."""
        for f in fields(self):
            setattr(self, f.name, None)


@dataclass
class DailyInsight:
    """Server-computed summary of one user's day."""

    steps: Number | None = None
    sleep_hours: Number | None = None
    heart_rate_avg: Number | None = None
    advice: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "steps": self.steps,
            "sleep_hours": self.sleep_hours,
            "heart_rate_avg": self.heart_rate_avg,
            "advice": list(self.advice),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DailyInsight":
        """Create from a decoded response body."""
        if not isinstance(data, dict):
            raise TypeError("daily insight must be a JSON object")
        advice = data.get("advice")
        if advice is None:
            advice = []
        elif not isinstance(advice, list):
            raise TypeError("advice must be a list")
        return cls(
            steps=_optional_number(data, "steps"),
            sleep_hours=_optional_number(data, "sleep_hours"),
            heart_rate_avg=_optional_number(data, "heart_rate_avg"),
            advice=[str(a) for a in advice],
        )
