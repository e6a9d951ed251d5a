from __future__ import annotations

"""
Directory Tree Data Models.

Immutable node types produced by the scanner and consumed by the renderer.
A hierarchy is a plain owned tree: every DirNode holds its children in a
tuple and no node appears under more than one parent.
"""

import os
from dataclasses import dataclass, field
from typing import Iterable, Tuple, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileNode:
    """
    Represents a leaf entry (file or any non-directory object) in the tree.

    Attributes:
        name: Base name of the entry within its parent directory.
        size: Byte count reported by the filesystem. Zero means empty.
    """
    name: str
    size: int = 0

    def __post_init__(self) -> None:
        _check_name(self.name)
        if self.size < 0:
            raise ValueError(f"File size cannot be negative: {self.size}")


@dataclass(frozen=True)
class DirNode:
    """
    Represents a directory and the entries it contains.

    Attributes:
        name: Base name of the directory within its parent.
        children: Contained nodes, in no meaningful order.
    """
    name: str
    children: Tuple["Node", ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _check_name(self.name)
        # Accept any iterable (lists from the scanner) but store a tuple
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))


Node = Union[FileNode, DirNode]

# -----------------------------------------------------------------------------
# TRAVERSAL HELPERS
# -----------------------------------------------------------------------------

def count_nodes(nodes: Iterable[Node]) -> Tuple[int, int]:
    """
    Count every directory and file in a hierarchy.

    Args:
        nodes: Top-level nodes of the hierarchy.

    Returns:
        Tuple[int, int]: (directories, files).
    """
    dirs = 0
    files = 0
    for node in nodes:
        if isinstance(node, DirNode):
            sub_dirs, sub_files = count_nodes(node.children)
            dirs += 1 + sub_dirs
            files += sub_files
        else:
            files += 1
    return dirs, files


def _check_name(name: str) -> None:
    if not name:
        raise ValueError("Node name cannot be empty.")
    if os.sep in name or (os.altsep and os.altsep in name):
        raise ValueError(f"Node name must be a base name, not a path: {name!r}")
