"""Output formatting for include graphs."""

from .size_formatter import format_size
from .graphviz_writer import write_graphviz, to_graphviz
from .path_tree import build_path_tree, render_path_tree
from .inclusion_tree import InclusionTreeReport

__all__ = [
    "format_size",
    "write_graphviz",
    "to_graphviz",
    "build_path_tree",
    "render_path_tree",
    "InclusionTreeReport",
]
