from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from drevo.cli.utils import console, csv_option, json_option, load_store, media_option, write_json
from drevo.search import search


def search_command(
    query: str = typer.Argument(..., help="Name, id, place or date fragment"),
    csv: Optional[Path] = csv_option(),
    media: Optional[Path] = media_option(),
    as_json: bool = json_option(),
):
    """
    Search persons by id, name, address, birth place or dates.
    """
    store = load_store(csv, media)
    results = search(store, query)

    if as_json:
        write_json(results)
        return

    table = Table(title=f"Search: {query!r} ({len(results)} found)")
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Born")
    table.add_column("Died")
    table.add_column("Matched")
    for r in results:
        table.add_row(str(r.id), f"{r.last_name} {r.first_name}", r.birth_day, r.death_day, r.match_field)
    console.print(table)
