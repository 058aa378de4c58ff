from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.tree import Tree

from drevo.cli.utils import console, csv_option, json_option, load_store, media_option, not_found, write_json
from drevo.models import TreeNode
from drevo.tree import get_ancestor_tree, get_descendant_tree


def _label(node: TreeNode) -> str:
    marker = "" if node.is_alive else " †"
    return f"[bold]{node.id}[/bold] {node.last_name} {node.first_name}{marker}"


def _render(node: TreeNode, branch: Tree) -> None:
    for child in node.children:
        _render(child, branch.add(_label(child)))


def tree_command(
    person_id: int = typer.Argument(..., help="Root person id"),
    descendants: bool = typer.Option(
        False,
        "--descendants",
        "-d",
        help="Walk down to children instead of up to parents",
    ),
    depth: Optional[int] = typer.Option(
        None,
        "--depth",
        help="Maximum generations (defaults to limits.tree_max_depth)",
    ),
    csv: Optional[Path] = csv_option(),
    media: Optional[Path] = media_option(),
    as_json: bool = json_option(),
):
    """
    Print the ancestor (or descendant) tree of a person.
    """
    store = load_store(csv, media)
    build = get_descendant_tree if descendants else get_ancestor_tree
    root = build(store, person_id, depth)
    if root is None:
        not_found(person_id)

    if as_json:
        write_json(root)
        return

    view = Tree(_label(root))
    _render(root, view)
    console.print(view)
