from .builder import count_nodes, get_ancestor_tree, get_descendant_tree

__all__ = [
    "count_nodes",
    "get_ancestor_tree",
    "get_descendant_tree",
]
