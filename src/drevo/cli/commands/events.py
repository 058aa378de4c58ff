from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from drevo.cli.utils import console, csv_option, json_option, load_store, media_option, write_json
from drevo.events import get_events

EVENT_LABELS = {
    "birthday": "День рождения",
    "memorial": "День памяти",
    "wedding": "Годовщина свадьбы",
}


def events_command(
    days: int = typer.Option(5, "--days", help="Look this many days ahead"),
    yesterday: bool = typer.Option(
        True,
        "--yesterday/--no-yesterday",
        help="Also show yesterday's events",
    ),
    csv: Optional[Path] = csv_option(),
    media: Optional[Path] = media_option(),
    as_json: bool = json_option(),
):
    """
    Upcoming birthdays, memorial days and wedding anniversaries.
    """
    store = load_store(csv, media)
    events = get_events(store, days=days, include_yesterday=yesterday)

    if as_json:
        write_json(events)
        return

    table = Table(title=f"Events in the next {days} day(s)")
    table.add_column("Date")
    table.add_column("In days", justify="right")
    table.add_column("Event")
    table.add_column("Name")
    table.add_column("Years", justify="right")
    for event in events:
        table.add_row(
            event.event_date,
            str(event.days_until),
            EVENT_LABELS.get(event.event_type, event.event_type),
            f"{event.last_name} {event.first_name}",
            str(event.years_count),
        )
    console.print(table)
