"""Prayer times model."""

from dataclasses import dataclass, field
from datetime import date


@dataclass
class PrayerTimes:
    """Prayer times for one city on one date, in backend order."""

    city: str
    date: date
    times: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "city": self.city,
            "date": self.date.isoformat(),
            "times": dict(self.times),
        }

    @classmethod
    def from_dict(cls, data: dict, city: str, on: date) -> "PrayerTimes":
        """Create from a response body, falling back to the requested key."""
        if not isinstance(data, dict):
            raise TypeError("prayer times response must be a JSON object")
        times = data.get("times")
        if times is None:
            times = {}
        elif not isinstance(times, dict):
            raise TypeError("times must be a JSON object")
        raw_date = data.get("date")
        return cls(
            city=data.get("city") or city,
            date=date.fromisoformat(raw_date) if raw_date else on,
            times={str(name): str(value) for name, value in times.items()},
        )
