from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console

from drevo.config import get_config
from drevo.core.exceptions import StoreLoadError
from drevo.exporter import dumps
from drevo.logging import log_error, log_info, log_warning
from drevo.store import PersonStore

console = Console()


def csv_option() -> Any:
    return typer.Option(
        None,
        "--csv",
        help="Population CSV (defaults to paths.data_csv from config)",
    )


def media_option() -> Any:
    return typer.Option(
        None,
        "--media",
        help="Photo directory (defaults to paths.media_dir from config)",
    )


def json_option() -> Any:
    return typer.Option(
        False,
        "--json",
        help="Print JSON instead of a table",
    )


def load_store(csv: Optional[Path], media: Optional[Path]) -> PersonStore:
    """
    Build a store from explicit CLI paths, falling back to config.

    Exits with code 1 when the CSV cannot be read.
    """
    cfg = get_config()
    csv_path = csv or cfg.resolve_path("data_csv")
    if csv_path is None:
        console.print("[red]No population CSV given and paths.data_csv is not set[/red]")
        raise typer.Exit(code=1)

    try:
        store = PersonStore.from_csv(
            csv_path,
            favorites_path=cfg.resolve_path("favorites_csv"),
            media_path=media or cfg.resolve_path("media_dir"),
            info_path=cfg.resolve_path("info_dir"),
            favorites_capacity=cfg.favorites_capacity,
            tree_max_depth=cfg.tree_max_depth,
        )
    except StoreLoadError as exc:
        log_error("CLI could not load %s: %s", csv_path, exc)
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)

    count = store.get_person_count()
    if count == 0:
        log_warning("CLI loaded an empty population from %s", csv_path)
    else:
        log_info("CLI loaded %d person(s) from %s", count, csv_path)
    return store


def write_json(data: Any, *, out: Path | None = None) -> None:
    """Write JSON to stdout or file."""
    payload = dumps(data)
    if out:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(payload, encoding="utf-8")
        log_info("Wrote JSON to %s", out)
    else:
        typer.echo(payload)


def write_text(payload: str, *, out: Path | None = None) -> None:
    if out:
        out.write_text(payload, encoding="utf-8")
        console.print(f"Wrote {out}")
    else:
        typer.echo(payload)


def not_found(person_id: int) -> None:
    console.print(f"[red]Person {person_id} not found[/red]")
    raise typer.Exit(code=1)
