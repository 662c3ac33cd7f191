"""Interactive forms for health metrics and schedule entries."""

import click
import questionary
from questionary import Style

from ..models.health import HealthMetricInput
from ..models.schedule import ScheduleEntryInput, ScheduleType

custom_style = Style(
    [
        ("qmark", "fg:#2563eb bold"),
        ("question", "bold"),
        ("answer", "fg:#4f46e5 bold"),
        ("pointer", "fg:#2563eb bold"),
        ("highlighted", "fg:#2563eb bold"),
        ("selected", "fg:#4f46e5"),
        ("separator", "fg:#6b7280"),
        ("instruction", ""),
        ("text", ""),
    ]
)

METRIC_QUESTIONS = [
    ("steps", "Steps"),
    ("sleep_hours", "Sleep (hours)"),
    ("heart_rate_avg", "Average heart rate (bpm)"),
    ("calories_in", "Calories in"),
    ("calories_out", "Calories out"),
]


def _answered(answer):
    """questionary returns None when the prompt is interrupted."""
    if answer is None:
        raise click.Abort()
    return answer


def _is_number_or_blank(text: str) -> bool | str:
    text = text.strip()
    if not text:
        return True
    try:
        float(text)
    except ValueError:
        return "Enter a number or leave blank"
    return True


async def prompt_metric() -> HealthMetricInput:
    """Ask for each metric; blank answers are left out of the submission."""
    click.echo("\n=== Add health metrics (leave blank to skip) ===\n")
    values = {}
    for name, label in METRIC_QUESTIONS:
        values[name] = _answered(
            await questionary.text(
                label,
                validate=_is_number_or_blank,
                style=custom_style,
            ).ask_async()
        )
    return HealthMetricInput(**values)


async def prompt_schedule(entry: ScheduleEntryInput | None = None) -> ScheduleEntryInput:
    """Fill in a schedule entry, using ``entry`` for the defaults."""
    entry = entry or ScheduleEntryInput()
    click.echo("\n=== New schedule entry ===\n")

    entry_type = _answered(
        await questionary.select(
            "Type",
            choices=[questionary.Choice(t.value, t) for t in ScheduleType],
            default=entry.type.value,
            style=custom_style,
        ).ask_async()
    )
    title = _answered(
        await questionary.text(
            f"Title (blank for '{entry_type.value} plan')",
            default=entry.title or "",
            style=custom_style,
        ).ask_async()
    )
    start_time = _answered(
        await questionary.text(
            "Start (YYYY-MM-DD HH:MM, local time)",
            default=entry.start_time if isinstance(entry.start_time, str) else "",
            validate=lambda text: bool(text.strip()) or "Start time is required",
            style=custom_style,
        ).ask_async()
    )
    location = _answered(
        await questionary.text(
            "Location (optional)",
            default=entry.location or "",
            style=custom_style,
        ).ask_async()
    )
    return ScheduleEntryInput(type=entry_type, title=title, start_time=start_time, location=location)
