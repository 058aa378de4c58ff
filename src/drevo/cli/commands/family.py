from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from drevo.cli.utils import console, csv_option, json_option, load_store, media_option, not_found, write_json
from drevo.family import get_family


def family_command(
    person_id: int = typer.Argument(..., help="Person id"),
    csv: Optional[Path] = csv_option(),
    media: Optional[Path] = media_option(),
    as_json: bool = json_option(),
):
    """
    List parents, siblings, children, grandchildren and great-grandchildren.
    """
    store = load_store(csv, media)
    members = get_family(store, person_id)
    if not members:
        not_found(person_id)

    if as_json:
        write_json(members)
        return

    table = Table(title=f"Family of {person_id}")
    table.add_column("Category")
    table.add_column("Relation", style="bold")
    table.add_column("ID", justify="right")
    table.add_column("Name")
    for member in members:
        brief = member.person
        table.add_row(member.category, member.relation, str(brief.id), f"{brief.last_name} {brief.first_name}")
    console.print(table)
