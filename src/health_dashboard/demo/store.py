"""In-memory storage and insight rules for the demo backend."""

from dataclasses import dataclass, field
from datetime import date, datetime
from itertools import count

METRIC_FIELDS = ("steps", "sleep_hours", "heart_rate_avg", "calories_in", "calories_out")

STEP_GOAL = 8000

# Fixed demo timetable; a real backend would compute these per date
PRAYER_TIMETABLE: dict[str, dict[str, str]] = {
    "jakarta": {"Fajr": "04:30", "Dhuhr": "12:10", "Asr": "15:30", "Maghrib": "18:20", "Isha": "19:32"},
    "bandung": {"Fajr": "04:27", "Dhuhr": "12:06", "Asr": "15:28", "Maghrib": "18:16", "Isha": "19:29"},
    "surabaya": {"Fajr": "04:03", "Dhuhr": "11:38", "Asr": "15:01", "Maghrib": "17:50", "Isha": "19:03"},
    "makassar": {"Fajr": "04:37", "Dhuhr": "12:08", "Asr": "15:33", "Maghrib": "18:17", "Isha": "19:30"},
}


def _whole(value: float | None) -> float | int | None:
    if value is not None and float(value).is_integer():
        return int(value)
    return value


def build_advice(summary: dict) -> list[str]:
    """Simple rule-based advice for a day's metrics."""
    advice = []
    steps = summary.get("steps")
    if steps is not None:
        if steps < STEP_GOAL:
            advice.append(f"You are at {steps} steps; a 20-minute walk gets you closer to {STEP_GOAL}.")
        else:
            advice.append("Step goal reached, nice work.")
    sleep = summary.get("sleep_hours")
    if sleep is not None and sleep < 7:
        advice.append("Aim for 7-9 hours of sleep tonight.")
    heart_rate = summary.get("heart_rate_avg")
    if heart_rate is not None and heart_rate > 100:
        advice.append("Average heart rate is high; rest and stay hydrated.")
    calories_in = summary.get("calories_in")
    calories_out = summary.get("calories_out")
    if calories_in is not None and calories_out is not None and calories_in - calories_out > 500:
        advice.append("Calorie intake is well above what you burned today.")
    return advice


@dataclass
class DemoStore:
    """Metrics and schedule entries keyed by (user_id, day)."""

    metrics: dict[tuple[str, date], dict] = field(default_factory=dict)
    schedule: list[tuple[datetime, dict]] = field(default_factory=list)
    _ids: count = field(default_factory=lambda: count(1))

    def add_metrics(self, user_id: str, values: dict, day: date | None = None) -> None:
        """Merge submitted metrics into the user's day; later values win."""
        day = day or date.today()
        current = self.metrics.setdefault((user_id, day), {})
        for name in METRIC_FIELDS:
            if values.get(name) is not None:
                current[name] = values[name]

    def daily_insight(self, user_id: str, day: date) -> dict:
        summary = self.metrics.get((user_id, day), {})
        return {
            "user_id": user_id,
            "day": day.isoformat(),
            "steps": _whole(summary.get("steps")),
            "sleep_hours": summary.get("sleep_hours"),
            "heart_rate_avg": _whole(summary.get("heart_rate_avg")),
            "advice": build_advice(summary),
        }

    def add_entry(self, user_id: str, entry_type: str, title: str, start_time: datetime, location: str | None) -> dict:
        item = {
            "_id": str(next(self._ids)),
            "user_id": user_id,
            "type": entry_type,
            "title": title,
            "start_time": start_time.isoformat(),
            "location": location,
        }
        self.schedule.append((start_time, item))
        return item

    def entries_for(self, user_id: str, day: date) -> list[dict]:
        """Entries whose start falls on ``day`` in server-local time, in insertion order."""
        return [
            item
            for start_time, item in self.schedule
            if item["user_id"] == user_id and start_time.astimezone().date() == day
        ]

    def prayer_times(self, city: str, day: date) -> dict | None:
        times = PRAYER_TIMETABLE.get(city.strip().lower())
        if times is None:
            return None
        return {"city": city, "date": day.isoformat(), "times": dict(times)}
