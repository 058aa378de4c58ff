from .resolver import (
    ancestor_set,
    check_kinship,
    describe_relationship,
    find_common_ancestor,
    path_to_ancestor,
)

__all__ = [
    "ancestor_set",
    "check_kinship",
    "describe_relationship",
    "find_common_ancestor",
    "path_to_ancestor",
]
