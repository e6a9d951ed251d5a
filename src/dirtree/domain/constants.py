from __future__ import annotations

"""
Domain Constants.

Branch glyphs, size labels and CLI tokens shared by the renderer and the
command-line interface.
"""

APP_NAME = "dirtree"
VERSION = "0.1.0"

# -----------------------------------------------------------------------------
# RENDERING GLYPHS
# -----------------------------------------------------------------------------

BRANCH_MARKER = "├───"
LAST_BRANCH_MARKER = "└───"

# Prepended to every descendant line of a directory, once per ancestor level
CONTINUATION_PREFIX = "│\t"
LAST_CONTINUATION_PREFIX = "\t"

EMPTY_SIZE_LABEL = "empty"
SIZE_SUFFIX = "b"

# -----------------------------------------------------------------------------
# COMMAND LINE
# -----------------------------------------------------------------------------

INCLUDE_FILES_FLAG = "-f"

# Positional slots after the program name: <path> and the optional flag
MAX_POSITIONAL_ARGS = 2

USAGE = f"{APP_NAME} <path> [{INCLUDE_FILES_FLAG}]"

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130
