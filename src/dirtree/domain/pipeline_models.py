from __future__ import annotations

"""
Tree Run Result Models.

Defines the result object passed from the tree generator back to the
interface layer, plus factory functions for the success and failure cases.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreeResult:
    """
    Outcome of one scan-and-render run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        base_path: Root directory that was scanned.
        include_files: Whether files were part of the listing.
        tree_lines: Rendered lines, without trailing newline.
        tree_path: Path the tree was persisted to, if any.
        summary: Counters and diagnostic metadata.
    """
    ok: bool
    error: str

    base_path: str
    include_files: bool

    tree_lines: List[str] = field(default_factory=list)
    tree_path: str = ""

    summary: Dict[str, Any] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return "\n".join(self.tree_lines)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        base_path: str,
        include_files: bool = False,
        tree_lines: Optional[List[str]] = None,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> TreeResult:
    """
    Create a failed result instance.

    Args:
        error: Detailed error description.
        base_path: The scanned root directory.
        include_files: File listing flag used for the run.
        tree_lines: Lines rendered before the failure, if any.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        TreeResult: An immutable error result object.
    """
    return TreeResult(
        ok=False,
        error=error,
        base_path=base_path,
        include_files=include_files,
        tree_lines=tree_lines or [],
        summary=summary_extra or {},
    )


def create_success_result(
        base_path: str,
        include_files: bool,
        tree_lines: List[str],
        directories: int = 0,
        files: int = 0,
        tree_path: str = "",
) -> TreeResult:
    """Create a successful result instance with its node counters."""
    return TreeResult(
        ok=True,
        error="",
        base_path=base_path,
        include_files=include_files,
        tree_lines=tree_lines,
        tree_path=tree_path,
        summary={"directories": directories, "files": files},
    )
