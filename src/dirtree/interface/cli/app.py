from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, logging bootstrap, option
validation, tree generation and output. The tree goes to stdout; logging
and error messages go to stderr.
"""

import sys
from typing import List, Optional, TextIO

from dirtree.core.analysis.tree_generator import dir_tree
from dirtree.domain.config import validate_options
from dirtree.domain.constants import (
    EXIT_FAILURE,
    EXIT_INTERRUPTED,
    EXIT_OK,
    EXIT_USAGE,
)
from dirtree.infra.logging import LoggingConfig, configure_logging, get_logger
from dirtree.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None, out: Optional[TextIO] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments without the program name. Defaults to sys.argv.
        out: Stream receiving the rendered tree. Defaults to sys.stdout.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    out = out or sys.stdout

    if sys.platform == "win32" and hasattr(out, "reconfigure"):
        out.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase (usage errors exit here, before any I/O)
    parser = cli_args.build_parser()
    args, ignored = cli_args.parse_cli(parser, argv)
    options = cli_args.args_to_options(args)

    # 2. Logging bootstrap (console on stderr)
    logging_conf = LoggingConfig(
        level="DEBUG" if options.debug else "WARNING",
        console=True,
        log_file=options.log_file or None,
    )
    configure_logging(logging_conf)

    if ignored:
        logger.debug(f"Ignoring unrecognized argument(s): {' '.join(ignored)}")

    # 3. Option validation
    problems = validate_options(options)
    if problems:
        for p in problems:
            print(f"ERROR: {p}", file=sys.stderr)
        return EXIT_USAGE

    # 4. Generation and output phase (stdout is only written on success)
    logger.debug(f"Targeting input directory: {options.input_path}")
    try:
        result = dir_tree(
            out,
            options.input_path,
            include_files=options.include_files,
            print_to_log=options.debug,
            save_path=options.save_path,
        )
    except OSError as e:
        logger.error(f"Cannot read directory tree: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.critical(f"Unexpected failure while rendering tree: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    # 5. Outcome reporting
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return EXIT_FAILURE

    logger.debug(
        f"Rendered {result.summary.get('directories', 0)} directories "
        f"and {result.summary.get('files', 0)} files"
    )
    return EXIT_OK

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
