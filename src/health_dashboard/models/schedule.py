"""Schedule entry models."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum

from ..errors import ValidationError


class ScheduleType(str, Enum):
    """Kinds of schedule entries."""

    MEETING = "meeting"
    MEAL = "meal"
    WORKOUT = "workout"
    FASTING = "fasting"
    PRAYER = "prayer"
    OTHER = "other"


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, accepting a trailing ``Z``."""
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def to_utc(moment: datetime) -> datetime:
    """Normalize to an absolute UTC instant; naive values are local time."""
    if moment.tzinfo is None:
        moment = moment.astimezone()
    return moment.astimezone(timezone.utc)


@dataclass
class ScheduleEntryInput:
    """A new schedule entry as entered by the user."""

    type: ScheduleType = ScheduleType.MEETING
    title: str = ""
    start_time: datetime | str | None = None  # local time when naive
    location: str = ""

    def __post_init__(self):
        if not isinstance(self.type, ScheduleType):
            try:
                self.type = ScheduleType(self.type)
            except ValueError as e:
                raise ValidationError(f"unknown schedule type {self.type!r}", e) from e

    @property
    def effective_title(self) -> str:
        """Title to store; blank titles become "<type> plan"."""
        return (self.title or "").strip() or f"{self.type.value} plan"

    def start_time_utc(self) -> datetime:
        """Resolve the start time to UTC, or raise ValidationError."""
        value = self.start_time
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError("start_time is required")
        if isinstance(value, str):
            try:
                value = parse_timestamp(value)
            except ValueError as e:
                raise ValidationError(f"start_time is not a valid date/time: {value!r}", e) from e
        return to_utc(value)

    def to_payload(self, user_id: str) -> dict:
        """Build the wire payload for ``POST /schedule``."""
        payload = {
            "user_id": user_id,
            "type": self.type.value,
            "title": self.effective_title,
            "start_time": self.start_time_utc().isoformat(),
        }
        location = (self.location or "").strip()
        if location:
            payload["location"] = location
        return payload

    def clear(self) -> None:
        """Reset to a blank meeting entry after a confirmed submit."""
        self.type = ScheduleType.MEETING
        self.title = ""
        self.start_time = None
        self.location = ""


@dataclass
class ScheduleEntry:
    """A stored schedule entry as returned by the backend."""

    id: str
    type: ScheduleType
    title: str
    start_time: datetime  # aware, UTC
    location: str | None = None

    def to_dict(self) -> dict:
        return {
            "_id": self.id,
            "type": self.type.value,
            "title": self.title,
            "start_time": self.start_time.isoformat(),
            "location": self.location,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ScheduleEntry":
        """Create from one item of a ``GET /schedule`` response."""
        if not isinstance(data, dict):
            raise TypeError("schedule item must be a JSON object")
        raw_id = data.get("_id", data.get("id"))
        try:
            entry_type = ScheduleType(data.get("type") or "other")
        except ValueError:
            entry_type = ScheduleType.OTHER
        raw_start = data["start_time"]
        if not isinstance(raw_start, str):
            raise TypeError(f"start_time must be a string, got {type(raw_start).__name__}")
        start_time = parse_timestamp(raw_start)
        if start_time.tzinfo is None:
            start_time = start_time.replace(tzinfo=timezone.utc)
        return cls(
            id="" if raw_id is None else str(raw_id),
            type=entry_type,
            title=data.get("title") or "",
            start_time=start_time.astimezone(timezone.utc),
            location=data.get("location") or None,
        )


@dataclass
class DaySchedule:
    """All entries for one (user, day), in display order.

    Entries are sorted by start time; the sort is stable so entries with
    the same start time keep the order the backend returned them in.
    """

    day: date
    entries: list[ScheduleEntry] = field(default_factory=list)

    def __post_init__(self):
        self.entries = sorted(self.entries, key=lambda e: e.start_time)

    def by_id(self) -> dict[str, ScheduleEntry]:
        return {entry.id: entry for entry in self.entries}

    def __len__(self) -> int:
        return len(self.entries)

    @classmethod
    def from_dict(cls, data: dict, day: date) -> "DaySchedule":
        if not isinstance(data, dict):
            raise TypeError("schedule response must be a JSON object")
        items = data.get("items")
        if items is None:
            items = []
        elif not isinstance(items, list):
            raise TypeError("items must be a list")
        return cls(day=day, entries=[ScheduleEntry.from_dict(item) for item in items])
