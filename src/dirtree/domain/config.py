from __future__ import annotations

"""
Run Options.

Describes a single tree rendering request. Options come exclusively from the
command line; there is no persistent configuration file.
"""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class TreeOptions:
    """
    Immutable description of a rendering run.

    Attributes:
        input_path: Root directory to scan.
        include_files: Whether non-directory entries are listed.
        save_path: Optional file to persist the rendered tree into.
        debug: Elevate logging verbosity to DEBUG.
        log_file: Optional path for a rotating diagnostic log.
    """
    input_path: str
    include_files: bool = False
    save_path: str = ""
    debug: bool = False
    log_file: str = ""


def validate_options(options: TreeOptions) -> List[str]:
    """Return the problems that prevent running with these options."""
    problems: List[str] = []
    if not options.input_path or not options.input_path.strip():
        problems.append("Input path cannot be empty.")
    if options.save_path and options.save_path == options.log_file:
        problems.append("Output file and log file must be different paths.")
    return problems
