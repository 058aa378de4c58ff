from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from drevo.cli.utils import console, csv_option, json_option, load_store, media_option, not_found, write_json
from drevo.dates import format_date_ru


def person_command(
    person_id: int = typer.Argument(..., help="Person id"),
    csv: Optional[Path] = csv_option(),
    media: Optional[Path] = media_option(),
    as_json: bool = json_option(),
):
    """
    Show the full card of one person.
    """
    store = load_store(csv, media)
    card = store.get_person_card(person_id)
    if card is None:
        not_found(person_id)

    if as_json:
        write_json(card)
        return

    person = card.person
    table = Table(title=f"{person.last_name} {person.first_name}", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("ID", str(person.id))
    table.add_row("Born", " ".join(filter(None, [format_date_ru(person.birth_day), person.birth_place])))
    if not person.is_alive:
        table.add_row("Died", " ".join(filter(None, [format_date_ru(person.death_day), person.death_place])))
    table.add_row("Age", card.age)
    table.add_row("Zodiac", card.zodiac)
    table.add_row("Address", person.address)
    for label, brief in (("Father", card.father), ("Mother", card.mother)):
        if brief:
            table.add_row(label, f"{brief.id} {brief.last_name} {brief.first_name}")
    for label, briefs in (("Spouses", card.spouses), ("Children", card.children)):
        if briefs:
            table.add_row(label, ", ".join(f"{b.id} {b.last_name} {b.first_name}" for b in briefs))
    table.add_row("Photos", ", ".join(card.photos))
    console.print(table)
