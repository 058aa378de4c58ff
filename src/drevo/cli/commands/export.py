from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from drevo.cli.utils import csv_option, load_store, media_option, write_text


def export_csv_command(
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    csv: Optional[Path] = csv_option(),
    media: Optional[Path] = media_option(),
):
    """
    Re-export the population as semicolon CSV, sorted by id.
    """
    store = load_store(csv, media)
    write_text(store.export_to_csv(), out=out)


def export_gedcom_command(
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    csv: Optional[Path] = csv_option(),
    media: Optional[Path] = media_option(),
):
    """
    Export the population as GEDCOM 5.5.1.
    """
    store = load_store(csv, media)
    write_text(store.export_to_gedcom(), out=out)
