"""Text rendering of dashboard tabs.

Every function here is a pure function of a ``DashboardView``. Nothing is
fetched or cached; a dataset that is not loaded yet gets a placeholder and a
failed dataset gets an inline notice while the rest of the tab renders.
"""

from datetime import tzinfo

import click

from .coordinator import DashboardView, DatasetState, LoadStatus, Tab
from .models.health import DailyInsight
from .models.prayer import PrayerTimes
from .models.schedule import DaySchedule

PLACEHOLDER = "Loading..."
UNKNOWN = "unknown"
NO_ADVICE = "No data yet. Add metrics in the Health tab."
NO_SCHEDULE = "Nothing scheduled for today yet."
NO_PRAYER_TIMES = "No prayer times for this city."
MAP_URL = "https://www.google.com/maps?q={lat},{lng}&z=14&output=embed"


def _heading(title: str) -> list[str]:
    return [click.style(title, bold=True), "-" * len(title)]


def _unavailable(state: DatasetState) -> str:
    reason = str(state.error) if state.error else "request failed"
    return click.style(f"[unavailable: {reason}]", fg="red")


def _pending(state: DatasetState) -> list[str] | None:
    """Lines to show instead of data, or None when the data can be rendered."""
    if state.status in (LoadStatus.NOT_LOADED, LoadStatus.LOADING):
        return [PLACEHOLDER]
    if state.status == LoadStatus.FAILED:
        return [_unavailable(state)]
    return None


def _value(value, suffix: str = "") -> str:
    if value is None:
        return UNKNOWN
    return f"{value}{suffix}"


def render_stats(state: DatasetState) -> list[str]:
    pending = _pending(state)
    if pending:
        return pending
    insight: DailyInsight = state.snapshot
    return [
        f"Steps:  {_value(insight.steps)}",
        f"Sleep:  {_value(insight.sleep_hours, ' h')}",
        f"HR avg: {_value(insight.heart_rate_avg, ' bpm')}",
    ]


def render_advice(state: DatasetState) -> list[str]:
    pending = _pending(state)
    if pending:
        return pending
    insight: DailyInsight = state.snapshot
    if not insight.advice:
        return [f"  - {NO_ADVICE}"]
    return [f"  - {advice}" for advice in insight.advice]


def render_agenda(state: DatasetState, tz: tzinfo | None = None, detailed: bool = False) -> list[str]:
    pending = _pending(state)
    if pending:
        return pending
    schedule: DaySchedule = state.snapshot
    if not schedule.entries:
        return [NO_SCHEDULE]

    lines = []
    for entry in schedule.entries:
        start = entry.start_time.astimezone(tz)
        when = start.strftime("%Y-%m-%d %H:%M") if detailed else start.strftime("%H:%M")
        lines.append(f"{when}  {entry.title} [{entry.type.value}]")
        if entry.location:
            lines.append(f"       @ {entry.location}")
    return lines


def render_prayer_times(state: DatasetState) -> list[str]:
    pending = _pending(state)
    if pending:
        return pending
    prayers: PrayerTimes = state.snapshot
    if not prayers.times:
        return [NO_PRAYER_TIMES]
    width = max(len(name) for name in prayers.times)
    return [f"{name.ljust(width)}  {time}" for name, time in prayers.times.items()]


def render_overview(view: DashboardView, tz: tzinfo | None = None) -> list[str]:
    lines = _heading("Today")
    lines += render_stats(view.insights)
    lines.append("")
    lines += _heading("Daily insight")
    lines += render_advice(view.insights)
    lines.append("")
    lines += _heading("Today's agenda")
    lines += render_agenda(view.schedule, tz)
    lines.append("")
    lines += _heading(f"Prayer times - {view.context.city}")
    lines += render_prayer_times(view.prayer)
    return lines


def render_schedule(view: DashboardView, tz: tzinfo | None = None) -> list[str]:
    lines = _heading(f"Agenda for {view.context.day_str}")
    lines += render_agenda(view.schedule, tz, detailed=True)
    return lines


def render_health(view: DashboardView, tz: tzinfo | None = None) -> list[str]:
    lines = _heading("Today's summary")
    lines += render_stats(view.insights)
    lines.append("")
    lines += _heading("Advice")
    lines += render_advice(view.insights)
    return lines


def render_prayer(view: DashboardView, tz: tzinfo | None = None) -> list[str]:
    lines = _heading(f"Prayer times - {view.context.city} ({view.context.day_str})")
    lines += render_prayer_times(view.prayer)
    return lines


def render_maps(view: DashboardView, tz: tzinfo | None = None) -> list[str]:
    lat, lng = view.context.latitude, view.context.longitude
    lines = _heading("Location & map")
    lines.append(f"Latitude:  {lat}")
    lines.append(f"Longitude: {lng}")
    lines.append(f"Map: {MAP_URL.format(lat=lat, lng=lng)}")
    return lines


RENDERERS = {
    Tab.OVERVIEW: render_overview,
    Tab.SCHEDULE: render_schedule,
    Tab.HEALTH: render_health,
    Tab.PRAYER: render_prayer,
    Tab.MAPS: render_maps,
}


def render_tab_bar(active: Tab) -> str:
    labels = []
    for tab in Tab:
        label = tab.value.capitalize()
        labels.append(click.style(f"[{label}]", fg="blue", bold=True) if tab == active else f" {label} ")
    return " ".join(labels)


def render_tab(view: DashboardView, tz: tzinfo | None = None) -> str:
    """Render the active tab of ``view`` with the tab bar on top."""
    lines = [render_tab_bar(view.active_tab), ""]
    lines += RENDERERS[view.active_tab](view, tz)
    return "\n".join(lines)
