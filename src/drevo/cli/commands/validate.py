from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from drevo.cli.utils import console, csv_option, json_option, load_store, media_option, write_json
from drevo.validation import validate


def validate_command(
    csv: Optional[Path] = csv_option(),
    media: Optional[Path] = media_option(),
    as_json: bool = json_option(),
    limit: int = typer.Option(100, "--limit", help="Show at most this many issues"),
):
    """
    Check relation integrity (dangling ids, missing back-references, ...).
    """
    store = load_store(csv, media)
    result = validate(store)

    if as_json:
        write_json(result)
        return

    if not result.issues:
        console.print("[green]No issues found[/green]")
        return

    counts = Table(title="Issues by type")
    counts.add_column("Type", style="bold")
    counts.add_column("Count", justify="right")
    for issue_type, count in result.counts.items():
        counts.add_row(issue_type, str(count))
    console.print(counts)

    table = Table(title=f"Issues (showing {min(limit, len(result.issues))} of {len(result.issues)})")
    table.add_column("Person", justify="right")
    table.add_column("Type")
    table.add_column("Message")
    for issue in result.issues[:limit]:
        table.add_row(str(issue.person_id), issue.type, issue.message)
    console.print(table)
