"""
Command-line interface for bomkeeper.

This module provides the main CLI entry point and handles global options,
configuration loading, and command registration.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

import click

from bomkeeper.config import load_config
from bomkeeper.__version__ import __version__
from bomkeeper.context import BomKeeperContext
from bomkeeper.exceptions import ConfigError, BomKeeperError
from bomkeeper.utils.console import print_error, print_warning, reconfigure_console
from bomkeeper.utils.logger import get_logger, setup_logging, verbosity_to_level

logger = get_logger("cli")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file.",
    envvar="BOMKEEPER_CONFIG",
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (can be repeated: -v, -vv).",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Enable or disable colored output.",
    envvar="BOMKEEPER_COLOR",
)
@click.version_option(
    version=__version__,
    prog_name="bomkeeper",
    message="%(prog)s %(version)s",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: int,
    color: bool,
) -> None:
    """bomkeeper — interactive upgrades for a bill-of-materials.

    \b
    Available commands:
      bomkeeper resolve            Choose library upgrades interactively

    \b
    Examples:
      bomkeeper resolve bom.toml --catalog catalog.toml
      bomkeeper -v resolve -l spring-framework

    Use ``bomkeeper COMMAND --help`` for command-specific options.
    """
    # Respect NO_COLOR for downstream libraries
    if color:
        os.environ.pop("NO_COLOR", None)
    else:
        os.environ["NO_COLOR"] = "1"
    reconfigure_console()

    level = verbosity_to_level(verbose)
    setup_logging(level=level, verbose=verbose >= 2)

    try:
        loaded_config = load_config(config)
    except ConfigError as exc:
        print_error(str(exc))
        raise SystemExit(1) from exc

    bomkeeper_ctx = BomKeeperContext()
    bomkeeper_ctx.config_path = config or loaded_config.source_path
    bomkeeper_ctx.color = color
    bomkeeper_ctx.verbose = verbose
    bomkeeper_ctx.config = loaded_config
    ctx.obj = bomkeeper_ctx

    logger.debug("bomkeeper v%s", __version__)
    logger.debug("Config path: %s", bomkeeper_ctx.config_path)
    logger.debug("Configuration: %s", loaded_config.to_log_dict())
    logger.debug("Verbosity: %s | Color: %s", verbose, color)


# Register CLI subcommands
from bomkeeper.commands.resolve import resolve  # noqa: E402

cli.add_command(resolve)


def main() -> int:
    """Main entry point for the bomkeeper CLI.

    Returns:
        Exit code:
            0   Success
            1   Unhandled or application error
            2   Usage error (Click)
            130 Interrupted by user (Ctrl+C)
    """
    try:
        cli(standalone_mode=False)
        return 0

    except click.exceptions.Exit as exc:
        return exc.exit_code

    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    except click.Abort:
        print_warning("\nOperation cancelled by user")
        return 130

    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1

    except BomKeeperError as exc:
        print_error(str(exc))
        logger.debug(
            "BomKeeperError details: %s",
            exc.details or "<none>",
            exc_info=True,
        )
        return 1

    except KeyboardInterrupt:
        print_warning("\nOperation cancelled by user")
        return 130

    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        logger.exception("Unhandled exception in CLI")
        return 1


if __name__ == "__main__":
    sys.exit(main())
