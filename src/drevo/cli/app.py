from __future__ import annotations

import typer

from drevo.cli.commands import (
    events_command,
    export_csv_command,
    export_gedcom_command,
    family_command,
    kinship_command,
    person_command,
    search_command,
    stats_command,
    tree_command,
    validate_command,
)

app = typer.Typer(
    name="drevo",
    help="Family tree record store: browse, check and export",
    add_completion=False,
)

app.command("stats")(stats_command)
app.command("validate")(validate_command)
app.command("search")(search_command)
app.command("tree")(tree_command)
app.command("kinship")(kinship_command)
app.command("family")(family_command)
app.command("events")(events_command)
app.command("person")(person_command)
app.command("export-csv")(export_csv_command)
app.command("export-gedcom")(export_gedcom_command)


def main():
    app()


if __name__ == "__main__":
    main()
