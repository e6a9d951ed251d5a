from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
TreeOptions. The positional contract is `<path> [-f]`: a second token
other than the exact literal `-f` is accepted and ignored, while zero or
more than two positional tokens is a usage error.

Positional tokens are separated from options on the raw argv before
argparse runs. Only exact option spellings count as options (valued ones
only when a value follows); every other token is positional.
"""

import argparse
import sys
from typing import List, Optional, Tuple

from dirtree.domain.config import TreeOptions
from dirtree.domain.constants import (
    APP_NAME,
    INCLUDE_FILES_FLAG,
    MAX_POSITIONAL_ARGS,
    USAGE,
)

# Exact spellings routed to argparse; valued options map to their long form
_FLAG_OPTIONS = {"--debug": "--debug"}
_VALUE_OPTIONS = {"-o": "--output", "--output": "--output", "--log-file": "--log-file"}

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the parser for the dirtree optional arguments.

    Positionals are not declared here; parse_cli() extracts them from the
    raw argv. Help and prefix matching are disabled so that tokens such as
    `-h` or `--v` fall into the ignored second slot.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        usage=USAGE,
        description="Print a directory hierarchy as a tree diagram.",
        add_help=False,
        allow_abbrev=False,
    )

    # --- Diagnostics and persistence ---
    p.add_argument(
        "--output",
        dest="save_path",
        default="",
        help="Also write the rendered tree to this file.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default="",
        help="Write diagnostic log records to this (rotating) file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p


def parse_cli(
        parser: argparse.ArgumentParser,
        argv: Optional[List[str]] = None,
) -> Tuple[argparse.Namespace, List[str]]:
    """
    Parse argv enforcing the positional count contract.

    Exits through parser.error() (status 2) before any filesystem access
    when the positional count is wrong.

    Returns:
        Tuple[argparse.Namespace, List[str]]: Parsed args and ignored tokens.
    """
    tokens = list(sys.argv[1:] if argv is None else argv)
    positionals, option_tokens = _split_tokens(tokens)

    if not positionals:
        parser.error("the following arguments are required: <path>")
    if len(positionals) > MAX_POSITIONAL_ARGS:
        parser.error(f"expected <path> and an optional {INCLUDE_FILES_FLAG}, got too many arguments")

    args = parser.parse_args(option_tokens)
    args.path = positionals[0]
    args.include_files = positionals[1:] == [INCLUDE_FILES_FLAG]

    ignored = [] if args.include_files else positionals[1:]
    return args, ignored

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_options(args: argparse.Namespace) -> TreeOptions:
    """
    Translate the argparse Namespace into run options.

    Args:
        args: Parsed command-line arguments.

    Returns:
        TreeOptions: Options for the tree generator.
    """
    return TreeOptions(
        input_path=args.path,
        include_files=bool(args.include_files),
        save_path=args.save_path or "",
        debug=bool(args.debug),
        log_file=args.log_file or "",
    )

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_tokens(tokens: List[str]) -> Tuple[List[str], List[str]]:
    """Separate positional tokens from exactly-spelled option tokens."""
    positionals: List[str] = []
    option_tokens: List[str] = []

    i = 0
    while i < len(tokens):
        tok = tokens[i]
        if tok in _FLAG_OPTIONS:
            option_tokens.append(_FLAG_OPTIONS[tok])
        elif tok in _VALUE_OPTIONS and i + 1 < len(tokens):
            # `--opt=value` keeps values starting with "-" intact
            option_tokens.append(f"{_VALUE_OPTIONS[tok]}={tokens[i + 1]}")
            i += 1
        else:
            positionals.append(tok)
        i += 1

    return positionals, option_tokens
