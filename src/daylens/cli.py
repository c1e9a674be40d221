"""daylens CLI - schedule analytics."""

import json
import logging
import sys
from datetime import date, datetime

import click

from .adapters import JsonSnapshotAdapter, JsonTaskAdapter, SnapshotError
from .config import Config, load_config
from .core.calendar import Event
from .core.categories import categorize
from .core.gaps import find_gaps, format_break_suggestion, suggest_break
from .core.report import build_report, format_report_sections
from .core.tasks import (
    completion_streak,
    completions_by_weekday,
    filter_overdue,
    most_productive_day_insight,
)
from .ports import CalendarRepository, TaskRepository


@click.group()
@click.version_option(package_name="daylens")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, debug: bool):
    """daylens - schedule analytics for your calendar."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )
    ctx.obj = load_config()


def _now(config: Config, override: str | None) -> datetime:
    """Current time in the configured timezone, always timezone-aware."""
    tz = config.tzinfo
    if override:
        try:
            now = datetime.fromisoformat(override)
        except ValueError:
            raise click.BadParameter(f"not an ISO 8601 timestamp: {override}", param_hint="--now")
        if now.tzinfo is None:
            now = now.replace(tzinfo=tz) if tz else now.astimezone()
        return now
    return datetime.now(tz) if tz else datetime.now().astimezone()


def _load_events(config: Config, snapshot: str | None, now: datetime) -> list[Event]:
    repo: CalendarRepository = JsonSnapshotAdapter(snapshot or config.snapshot_path(), timezone=now.tzinfo)
    try:
        return repo.fetch_events()
    except SnapshotError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


snapshot_option = click.option(
    "--snapshot",
    type=click.Path(dir_okay=False),
    help="Calendar snapshot JSON (defaults to CALENDAR_SNAPSHOT)",
)
now_option = click.option("--now", "now_str", help="Override the current time (ISO 8601)")


@main.command()
@snapshot_option
@now_option
@click.option("--day", type=click.DateTime(formats=["%Y-%m-%d"]), help="Day for the break suggestion")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def report(config: Config, snapshot: str | None, now_str: str | None, day: datetime | None, as_json: bool):
    """Show the full analytics report."""
    now = _now(config, now_str)
    events = _load_events(config, snapshot, now)
    result = build_report(
        events,
        now,
        day=day.date() if day else None,
        settings=config.analytics_settings(),
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    sections = format_report_sections(result)
    titles = {
        "score": "Productivity Score",
        "breakdown": "Time Distribution",
        "trend": "Weekly Trends",
        "insights": "Insights",
        "break": "Break Suggestion",
        "stats": "Quick Stats",
    }
    blocks = [f"### {titles[key]}\n{body}" for key, body in sections.items()]
    click.echo("\n\n".join(blocks))


@main.command("categorize")
@click.argument("titles", nargs=-1, required=True)
def categorize_cmd(titles: tuple[str, ...]):
    """Show the category for each event title."""
    for title in titles:
        click.echo(f"{categorize(title).value:10} {title}")


@main.command()
@snapshot_option
@now_option
@click.option("--min-minutes", type=int, help="Minimum gap length (defaults to MIN_GAP_MINUTES)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def gaps(config: Config, snapshot: str | None, now_str: str | None, min_minutes: int | None, as_json: bool):
    """List idle gaps between timed events."""
    now = _now(config, now_str)
    events = _load_events(config, snapshot, now)
    found = find_gaps(events, min_gap_minutes=min_minutes or config.min_gap_minutes)

    if as_json:
        click.echo(
            json.dumps(
                [
                    {
                        "start": g.start.isoformat(),
                        "end": g.end.isoformat(),
                        "durationMinutes": g.duration_minutes(),
                    }
                    for g in found
                ],
                indent=2,
            )
        )
        return

    if not found:
        click.echo("No schedule gaps.")
        return

    for gap in found:
        click.echo(f"{gap.start.strftime('%a %b %d')}  {gap.format()}")


@main.command("break")
@snapshot_option
@now_option
@click.option("--day", type=click.DateTime(formats=["%Y-%m-%d"]), help="Day to plan (defaults to today)")
@click.pass_obj
def break_cmd(config: Config, snapshot: str | None, now_str: str | None, day: datetime | None):
    """Suggest the best break window for a day."""
    now = _now(config, now_str)
    events = _load_events(config, snapshot, now)
    settings = config.analytics_settings()
    target: date = day.date() if day else now.date()

    slot = suggest_break(
        events,
        target,
        work_start=settings.work_start,
        work_end=settings.work_end,
        min_break_minutes=settings.min_break_minutes,
        default_break=settings.default_break,
        tz=now.tzinfo,
    )
    if slot is None:
        click.echo(format_break_suggestion(slot))
    else:
        click.echo(f"Suggested break: {format_break_suggestion(slot)}")


@main.command()
@click.option("--file", "tasks_file", type=click.Path(dir_okay=False), help="Task list JSON (defaults to TASKS_FILE)")
@now_option
@click.pass_obj
def tasks(config: Config, tasks_file: str | None, now_str: str | None):
    """Show task completion streak and weekday chart."""
    now = _now(config, now_str)
    today = now.date()
    repo: TaskRepository = JsonTaskAdapter(tasks_file or config.tasks_path(), timezone=now.tzinfo)
    all_tasks = repo.get_all_tasks()

    streak = completion_streak(all_tasks, today)
    if streak > 0:
        click.echo(f"Streak: {streak} day{'s' if streak > 1 else ''}!")

    counts = completions_by_weekday(all_tasks)
    if any(counts.values()):
        for day, count in counts.items():
            click.echo(f"{day}  {'#' * count} {count}")
    else:
        click.echo("Complete a task to see your productivity analytics!")

    for task in filter_overdue(all_tasks, today):
        click.echo(f"OVERDUE: {task.text} (due {task.due_date})")

    click.echo(most_productive_day_insight(all_tasks))
