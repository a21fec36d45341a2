"""
Executable module for bomkeeper.

Running ``python -m bomkeeper`` is equivalent to running ``bomkeeper``.
"""

from __future__ import annotations

import sys


def _print_startup_error(exc: ImportError) -> None:
    """Explain on stderr why the CLI could not be imported."""
    sys.stderr.write("bomkeeper CLI could not be loaded.\n")
    sys.stderr.write(f"Python version : {sys.version}\n")
    try:
        from bomkeeper.__version__ import __version__
    except ImportError:
        __version__ = "<unknown>"
    sys.stderr.write(f"bomkeeper version: {__version__}\n")
    sys.stderr.write(f"ImportError: {exc}\n")


def main() -> int:
    """Main entrypoint when executing ``python -m bomkeeper``.

    Returns:
        Exit code returned by the CLI, or ``1`` if it cannot be imported.
    """
    try:
        # Import lazily so dependencies are only loaded during CLI use
        from bomkeeper.cli import main as cli_main
    except ImportError as exc:
        _print_startup_error(exc)
        return 1

    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
