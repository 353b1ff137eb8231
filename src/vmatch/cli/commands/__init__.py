"""Command implementations for vmatch CLI."""

from .check import handle_check
from .rank import add_rank_arguments, handle_rank
from .tags import add_tags_arguments, handle_resolve, handle_tags

__all__ = [
    "handle_check",
    "handle_rank",
    "add_rank_arguments",
    "handle_resolve",
    "handle_tags",
    "add_tags_arguments",
]
