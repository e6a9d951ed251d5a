from __future__ import annotations

"""
Directory Tree Generator.

Scans a directory into a node hierarchy and orchestrates rendering,
optional log preview and persistence. Scanning is fatal-on-first-error:
any directory that cannot be listed aborts the whole run.
"""

import logging
import os
from typing import List, TextIO

from dirtree.core.analysis.tree_renderer import render_tree
from dirtree.domain.pipeline_models import (
    TreeResult,
    create_error_result,
    create_success_result,
)
from dirtree.domain.tree_models import DirNode, FileNode, Node, count_nodes

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def generate_directory_tree(
        input_path: str,
        include_files: bool = False,
        print_to_log: bool = False,
        save_path: str = "",
) -> TreeResult:
    """
    Build, render and optionally persist the tree of a directory.

    Args:
        input_path: Root directory for the scan.
        include_files: List files (with sizes) in addition to directories.
        print_to_log: Whether to log the rendered tree at INFO.
        save_path: Optional file path to persist the tree.

    Returns:
        TreeResult: Rendered lines and node counters.

    Raises:
        OSError: If the root or any nested directory cannot be listed.
    """
    logger.info(f"Generating directory tree for: {input_path}")

    # 1. Scan (errors propagate)
    nodes = build_tree(input_path, include_files=include_files)
    directories, files = count_nodes(nodes)
    logger.debug(f"Scan complete: {directories} directories, {files} files")

    # 2. Render
    lines = render_tree(nodes)

    if print_to_log:
        logger.info("Tree Preview:\n" + "\n".join(lines))

    # 3. Persistence
    if save_path:
        error = _save_tree_to_disk(save_path, lines)
        if error:
            return create_error_result(
                error=error,
                base_path=input_path,
                include_files=include_files,
                tree_lines=lines,
                summary_extra={"directories": directories, "files": files},
            )

    return create_success_result(
        base_path=input_path,
        include_files=include_files,
        tree_lines=lines,
        directories=directories,
        files=files,
        tree_path=save_path,
    )


def build_tree(path: str, include_files: bool = False) -> List[Node]:
    """
    Recursively scan a directory into a list of nodes.

    Directories are always included. Every other entry becomes a FileNode
    only when include_files is set. Symbolic links are never followed.
    Children keep the filesystem enumeration order.

    Args:
        path: Directory to scan.
        include_files: Whether non-directory entries are kept.

    Returns:
        List[Node]: Immediate contents of the directory, expanded.

    Raises:
        OSError: On the first directory or entry that cannot be read.
    """
    logger.debug(f"Scanning directory: {path}")
    nodes: List[Node] = []

    with os.scandir(path) as it:
        for entry in it:
            if entry.is_dir(follow_symlinks=False):
                children = build_tree(entry.path, include_files=include_files)
                nodes.append(DirNode(name=entry.name, children=children))
            elif include_files:
                size = entry.stat(follow_symlinks=False).st_size
                nodes.append(FileNode(name=entry.name, size=size))

    return nodes


def dir_tree(
        out: TextIO,
        path: str,
        include_files: bool = False,
        print_to_log: bool = False,
        save_path: str = "",
) -> TreeResult:
    """
    Generate the tree of a directory and write it to a text stream.

    The output ends with exactly one newline, even for an empty tree.
    Nothing is written when the run fails.

    Raises:
        OSError: If the root or any nested directory cannot be listed.
    """
    result = generate_directory_tree(
        path,
        include_files=include_files,
        print_to_log=print_to_log,
        save_path=save_path,
    )
    if result.ok:
        out.write(result.text + "\n")
        out.flush()
    return result

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _save_tree_to_disk(save_path: str, lines: List[str]) -> str:
    """Persist tree lines. Returns an error message, or "" on success."""
    try:
        out_dir = os.path.dirname(os.path.abspath(save_path))
        os.makedirs(out_dir, exist_ok=True)
        with open(save_path, "w", encoding="utf-8") as f:
            f.write("\n".join(lines) + "\n")
        logger.info(f"Tree saved to file: {save_path}")
        return ""
    except OSError as e:
        logger.error(f"Failed to save tree to '{save_path}': {e}")
        return f"Failed to save tree to '{save_path}': {e}"
