from __future__ import annotations

"""
Tree Renderer.

Converts a node hierarchy into its visual text representation. Siblings are
sorted by name at every level; nesting is expressed by prefixing each
descendant line with a tab (and a vertical bar when the parent branch
continues below).
"""

from typing import List, Sequence

from dirtree.domain.constants import (
    BRANCH_MARKER,
    CONTINUATION_PREFIX,
    EMPTY_SIZE_LABEL,
    LAST_BRANCH_MARKER,
    LAST_CONTINUATION_PREFIX,
    SIZE_SUFFIX,
)
from dirtree.domain.tree_models import DirNode, FileNode, Node

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(nodes: Sequence[Node], depth: int = 0) -> List[str]:
    """
    Render a set of sibling nodes and everything below them.

    Args:
        nodes: Siblings in any order; they are sorted by name before drawing.
        depth: Recursion level of the siblings (root level is 0).

    Returns:
        List[str]: Visual lines, one per node.
    """
    entries = sorted(nodes, key=lambda n: n.name)
    total = len(entries)

    lines: List[str] = []
    for i, node in enumerate(entries):
        is_last = (i == total - 1)
        lines.extend(render_node(node, depth, is_last))

    return lines


def render_node(node: Node, depth: int, is_last: bool) -> List[str]:
    """
    Render one node, dispatching on its kind.

    Args:
        node: File or directory node.
        depth: Recursion level of the node.
        is_last: Whether the node closes its sibling group.

    Returns:
        List[str]: The node's own line followed by its descendants.
    """
    # Scenario A: Node is a File
    if isinstance(node, FileNode):
        return [f"{get_indent(depth, is_last)}{node.name} ({format_size(node.size)})"]

    # Scenario B: Node is a Directory
    if isinstance(node, DirNode):
        prefix = LAST_CONTINUATION_PREFIX if is_last else CONTINUATION_PREFIX
        lines = [f"{get_indent(depth, is_last)}{node.name}"]
        lines.extend(prefix + line for line in render_tree(node.children, depth + 1))
        return lines

    raise TypeError(f"Unsupported node type: {type(node).__name__}")


def get_indent(depth: int, is_last: bool) -> str:
    """
    Return the branch marker of a node.

    The glyph is the same at every depth; visual nesting comes from the
    prefixes added by the enclosing directories.
    """
    return LAST_BRANCH_MARKER if is_last else BRANCH_MARKER


def format_size(size: int) -> str:
    """Return the size label shown next to a file name."""
    if size > 0:
        return f"{size}{SIZE_SUFFIX}"
    return EMPTY_SIZE_LABEL
