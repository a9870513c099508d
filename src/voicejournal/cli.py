"""Command line front end for VoiceJournal."""

from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

import click

from .config import BaseConfig
from .constants.palette import DEFAULT_MOOD, JOURNAL_COLORS
from .context import AppContext, create_app_context
from .errors import VoiceJournalError
from .logging_config import setup_logging
from .models.journal import JournalEntry
from .services import calendar_index, streaks

COLOR_CHOICE = click.Choice(sorted(JOURNAL_COLORS))
DAY_ABBREVIATIONS = ["Mo", "Tu", "We", "Th", "Fr", "Sa", "Su"]
MIN_ID_PREFIX = 4


def _app(ctx: click.Context) -> AppContext:
    return ctx.find_object(AppContext)


def _resolve_entry_id(app: AppContext, ref: str) -> UUID:
    """Accept a full UUID or a unique prefix of at least four characters."""
    ref = ref.strip().lower()
    try:
        return UUID(ref)
    except ValueError:
        pass
    if len(ref) < MIN_ID_PREFIX:
        raise click.BadParameter(
            f"use at least {MIN_ID_PREFIX} characters of the entry id", param_hint="ENTRY_REF"
        )
    matches = [entry.id for entry in app.journal.list_entries() if str(entry.id).startswith(ref)]
    if not matches:
        raise click.ClickException(f"No entry matches {ref!r}")
    if len(matches) > 1:
        raise click.ClickException(f"{ref!r} is ambiguous ({len(matches)} entries)")
    return matches[0]


def _format_entry(entry: JournalEntry) -> str:
    stamp = entry.created_at.strftime("%Y-%m-%d %H:%M")
    return f"{str(entry.id)[:8]}  {stamp}  {entry.mood}  {entry.title}"


class _Month(click.ParamType):
    name = "YYYY-MM"

    def convert(self, value, param, ctx):
        if isinstance(value, date):
            return value
        try:
            return datetime.strptime(value, "%Y-%m").date()
        except ValueError:
            self.fail(f"{value!r} is not a YYYY-MM month", param, ctx)


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Voice journal entries, streaks and calendar."""

    if ctx.obj is None:
        try:
            config = BaseConfig()
        except VoiceJournalError as exc:
            raise click.ClickException(str(exc)) from exc
        setup_logging(config)
        ctx.obj = create_app_context(config)
        ctx.call_on_close(ctx.obj.dispose)


@cli.command("add")
@click.argument("text")
@click.option("--mood", default=DEFAULT_MOOD, show_default=True, help="Mood emoji")
@click.option("--title", default="", help="Title (derived from the text when blank)")
@click.option("--color", "color_tag", type=COLOR_CHOICE, default=None, help="Color tag")
@click.pass_context
def add_entry(ctx: click.Context, text: str, mood: str, title: str, color_tag: str | None) -> None:
    """Save a new entry from transcribed TEXT."""

    try:
        saved = _app(ctx).journal.create_entry(text, mood=mood, title=title, color_tag=color_tag)
    except VoiceJournalError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"Saved {_format_entry(saved.entry)}")
    click.echo(f"Streak: {saved.streak.current_streak} day(s), longest {saved.streak.longest_streak}")


@cli.command("list")
@click.option("--date", "day", type=click.DateTime(["%Y-%m-%d"]), default=None, help="Only this day")
@click.pass_context
def list_entries(ctx: click.Context, day: datetime | None) -> None:
    """List entries, newest first."""

    journal = _app(ctx).journal
    entries = journal.entries_on(day.date()) if day else journal.list_entries()
    if not entries:
        click.echo("No entries.")
        return
    for entry in entries:
        click.echo(_format_entry(entry))


@cli.command("edit")
@click.argument("entry_ref")
@click.option("--title", default=None)
@click.option("--text", default=None)
@click.option("--mood", default=None)
@click.option("--color", "color_tag", type=COLOR_CHOICE, default=None)
@click.pass_context
def edit_entry(
    ctx: click.Context,
    entry_ref: str,
    title: str | None,
    text: str | None,
    mood: str | None,
    color_tag: str | None,
) -> None:
    """Edit an entry's title, text, mood or color."""

    app = _app(ctx)
    try:
        entry = app.journal.update_entry(
            _resolve_entry_id(app, entry_ref), title=title, body=text, mood=mood, color_tag=color_tag
        )
    except VoiceJournalError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"Updated {_format_entry(entry)}")


@cli.command("delete")
@click.argument("entry_ref")
@click.pass_context
def delete_entry(ctx: click.Context, entry_ref: str) -> None:
    """Delete an entry."""

    app = _app(ctx)
    try:
        state = app.journal.delete_entry(_resolve_entry_id(app, entry_ref))
    except VoiceJournalError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"Deleted. {state.number_of_entries} entries remain.")


@cli.command("streak")
@click.pass_context
def show_streak(ctx: click.Context) -> None:
    """Show the streak card numbers."""

    state = _app(ctx).journal.streak()
    snapshot = streaks.streak_snapshot(state)
    click.echo(f"Current streak: {state.current_streak}")
    click.echo(f"Longest streak: {state.longest_streak}")
    click.echo(f"Entries: {state.number_of_entries}")
    click.echo(f"Progress to best: {snapshot.progress:.0%}")


@cli.command("timeline")
@click.option("--days", type=click.IntRange(min=0), default=None, help="Trailing days to show")
@click.option("--all", "show_empty", is_flag=True, help="Include days without entries")
@click.pass_context
def show_timeline(ctx: click.Context, days: int | None, show_empty: bool) -> None:
    """Show entries grouped by day, newest first."""

    for bucket in _app(ctx).journal.timeline(days):
        if not bucket.has_entries and not show_empty:
            continue
        click.echo(bucket.day.isoformat())
        for entry in bucket.entries:
            click.echo(f"  {_format_entry(entry)}")


@cli.command("calendar")
@click.option("--month", type=_Month(), default=None, help="Month to show (default: current)")
@click.pass_context
def show_calendar(ctx: click.Context, month: date | None) -> None:
    """Print a month grid; days with entries are starred."""

    app = _app(ctx)
    today = app.clock.now()
    month = month or today.date()
    first_weekday = app.config.FIRST_WEEKDAY
    cells = calendar_index.month_overview(
        month, app.journal.list_entries(), today, first_weekday, app.config.TIMEZONE
    )

    click.echo(month.strftime("%B %Y").center(7 * 4))
    header = [DAY_ABBREVIATIONS[(first_weekday + i) % 7] for i in range(7)]
    click.echo(" ".join(f"{name:>3}" for name in header))
    for week_start in range(0, len(cells), 7):
        row = []
        for cell in cells[week_start:week_start + 7]:
            if cell is None:
                row.append("   ")
            else:
                marker = "*" if cell.has_entries else " "
                row.append(f"{cell.day.day:>2}{marker}")
        click.echo(" ".join(row))


def main() -> None:  # pragma: no cover - console entry point
    cli()


if __name__ == "__main__":  # pragma: no cover
    main()
