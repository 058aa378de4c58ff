from __future__ import annotations

from pathlib import Path
from typing import Optional

from rich.table import Table

from drevo.cli.utils import console, csv_option, json_option, load_store, media_option, write_json
from drevo.stats import get_stats


def stats_command(
    csv: Optional[Path] = csv_option(),
    media: Optional[Path] = media_option(),
    as_json: bool = json_option(),
):
    """
    Show population statistics.
    """
    store = load_store(csv, media)
    stats = get_stats(store)

    if as_json:
        write_json(stats)
        return

    table = Table(title="Population")
    table.add_column("Metric", style="bold")
    table.add_column("Count", justify="right")
    table.add_row("Persons", str(stats.total_persons))
    table.add_row("Male", str(stats.male_count))
    table.add_row("Female", str(stats.female_count))
    table.add_row("Alive", str(stats.alive_count))
    table.add_row("Deceased", str(stats.deceased_count))
    console.print(table)

    ages = Table(title="Age distribution")
    ages.add_column("Bucket", style="bold")
    ages.add_column("Count", justify="right")
    for bucket, count in stats.age_distribution.items():
        ages.add_row(bucket, str(count))
    console.print(ages)

    if stats.longest_lived:
        longest = Table(title="Longest lived")
        longest.add_column("ID", justify="right")
        longest.add_column("Name")
        longest.add_column("Age", justify="right")
        for brief in stats.longest_lived:
            longest.add_row(str(brief.id), f"{brief.last_name} {brief.first_name}", brief.age)
        console.print(longest)
