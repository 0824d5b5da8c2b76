from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Routes `treejson read ...` to the directory reader and `treejson write ...`
to the project generator, and installs a global exception hook so that an
unexpected crash is logged and reported with a non-zero exit code.
"""

import logging
import os
import sys
import traceback
from typing import Any, List, Optional

# -----------------------------------------------------------------------------
# ENVIRONMENT INITIALIZATION
# -----------------------------------------------------------------------------

# Make the package importable when this file is executed directly
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.dirname(BASE_DIR)
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

USAGE = (
    "Usage:\n"
    "  treejson read <directory> [options]\n"
    "  treejson write <json-file> [output-directory] [options]\n"
)

# -----------------------------------------------------------------------------
# GLOBAL SUPERVISOR (EXCEPTION HANDLING)
# -----------------------------------------------------------------------------

def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """
    Trap unhandled exceptions, log them and terminate with exit code 1.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))

    logger = logging.getLogger("treejson.supervisor")
    logger.critical(f"FATAL EXCEPTION DETECTED: {value}\n{stack_trace}")

    print("\n" + "=" * 80, file=sys.stderr)
    print("CRITICAL ERROR (TREEJSON)", file=sys.stderr)
    print("=" * 80, file=sys.stderr)
    print(stack_trace, file=sys.stderr)
    sys.exit(1)


sys.excepthook = global_exception_handler

# -----------------------------------------------------------------------------
# EXECUTION ROUTING
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Dispatch to the requested tool.

    Args:
        argv: Arguments without the program name. Defaults to sys.argv[1:].

    Returns:
        int: Process exit code of the selected tool (1 on a bad command).
    """
    args = list(sys.argv[1:] if argv is None else argv)

    if not args or args[0] not in ("read", "write"):
        print("Error: Please choose a command: 'read' or 'write'.", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1

    command, rest = args[0], args[1:]
    try:
        if command == "read":
            from treejson.interface.cli.reader_app import main as reader_main
            return reader_main(rest)

        from treejson.interface.cli.writer_app import main as writer_main
        return writer_main(rest)

    except Exception as e:
        global_exception_handler(type(e), e, e.__traceback__)
        return 1


if __name__ == "__main__":
    sys.exit(main())
