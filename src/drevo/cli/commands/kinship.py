from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from drevo.cli.utils import console, csv_option, json_option, load_store, media_option, write_json
from drevo.kinship import check_kinship


def kinship_command(
    first_id: int = typer.Argument(..., help="First person id"),
    second_id: int = typer.Argument(..., help="Second person id"),
    csv: Optional[Path] = csv_option(),
    media: Optional[Path] = media_option(),
    as_json: bool = json_option(),
):
    """
    Find the nearest common ancestor of two persons and name the relationship.
    """
    store = load_store(csv, media)
    result = check_kinship(store, first_id, second_id)
    if result is None:
        console.print(f"[red]Person {first_id} or {second_id} not found[/red]")
        raise typer.Exit(code=1)

    if as_json:
        write_json(result)
        return

    def chain(path):
        return " → ".join(f"{b.last_name} {b.first_name}" for b in path)

    console.print(f"[bold]{result.relationship}[/bold]")
    if result.common_ancestor:
        ancestor = result.common_ancestor
        console.print(f"Common ancestor: {ancestor.id} {ancestor.last_name} {ancestor.first_name}")
    console.print(f"Path 1: {chain(result.path_from_person1)}")
    console.print(f"Path 2: {chain(result.path_from_person2)}")
