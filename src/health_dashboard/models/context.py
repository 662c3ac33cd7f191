"""Identity and context for the active dashboard session."""

from dataclasses import dataclass, field
from datetime import date


def _require_text(value: str, name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{name} must be a non-empty string")
    return value


@dataclass
class UserContext:
    """Who and where the dashboard is showing data for.

    ``day`` is fixed at creation (today, local calendar) unless set
    explicitly. Updating any field does not touch loaded datasets; the
    coordinator decides when to refetch.
    """

    user_id: str
    city: str
    day: date = field(default_factory=date.today)
    latitude: float = -6.200000
    longitude: float = 106.816666

    def __post_init__(self):
        _require_text(self.user_id, "user_id")
        _require_text(self.city, "city")

    def set_user_id(self, user_id: str) -> None:
        self.user_id = _require_text(user_id, "user_id")

    def set_city(self, city: str) -> None:
        self.city = _require_text(city, "city")

    def set_day(self, day: date) -> None:
        self.day = day

    def set_location(self, latitude: float, longitude: float) -> None:
        self.latitude = float(latitude)
        self.longitude = float(longitude)

    @property
    def day_str(self) -> str:
        """ISO calendar date used on the wire."""
        return self.day.isoformat()
