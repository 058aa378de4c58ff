"""
CLI command modules for drevo.

Each command module defines Typer-compatible command functions.
"""

from drevo.cli.commands.events import events_command
from drevo.cli.commands.export import export_csv_command, export_gedcom_command
from drevo.cli.commands.family import family_command
from drevo.cli.commands.kinship import kinship_command
from drevo.cli.commands.person import person_command
from drevo.cli.commands.search import search_command
from drevo.cli.commands.stats import stats_command
from drevo.cli.commands.tree import tree_command
from drevo.cli.commands.validate import validate_command

__all__ = [
    "events_command",
    "export_csv_command",
    "export_gedcom_command",
    "family_command",
    "kinship_command",
    "person_command",
    "search_command",
    "stats_command",
    "tree_command",
    "validate_command",
]
