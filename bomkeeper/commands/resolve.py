"""Resolve command implementation for bomkeeper.

Walks the operator through the available upgrades of a BOM, one library
at a time, and prints the upgrades they accepted. The BOM itself is never
modified; the output is meant to be fed to whatever rewrites the build
files.

The command wires together:

1. **load_bom / load_catalog** — read the BOM and the known versions
2. **CatalogVersionDiscovery** — compute version options per library
3. **ConsolePromptService** — ask the operator on the terminal
4. **UpgradeResolver** — run the all-or-nothing decision loop

Typical usage::

    # Review every library in bom.toml
    $ bomkeeper resolve bom.toml --catalog catalog.toml

    # Only a few libraries, staying within the current major version
    $ bomkeeper resolve -l spring-framework -l micrometer --policy same-major

    # Machine-readable output
    $ bomkeeper resolve --format json > upgrades.json
"""

from __future__ import annotations

import sys
import json
from pathlib import Path
from typing import List, Optional, Tuple

import click

from bomkeeper.constants import (
    DEFAULT_BOM_FILE,
    DEFAULT_CATALOG_FILE,
    UPGRADE_POLICY_NAMES,
)
from bomkeeper.config import BomKeeperConfig
from bomkeeper.context import pass_context, BomKeeperContext
from bomkeeper.exceptions import BomKeeperError
from bomkeeper.models import Library, Upgrade
from bomkeeper.core import (
    CatalogVersionDiscovery,
    ConsolePromptService,
    UpgradePolicy,
    UpgradeResolver,
    load_bom,
    load_catalog,
)
from bomkeeper.utils import (
    colorize_update_type,
    get_logger,
    print_error,
    print_success,
    print_table,
    print_warning,
)

logger = get_logger("commands.resolve")


@click.command()
@click.argument(
    "bom",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=DEFAULT_BOM_FILE,
)
@click.option(
    "--catalog",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=DEFAULT_CATALOG_FILE,
    show_default=True,
    help="TOML file listing the known versions of each library.",
)
@click.option(
    "--library",
    "-l",
    "library_names",
    multiple=True,
    help="Only consider these libraries (can be repeated).",
)
@click.option(
    "--policy",
    type=click.Choice(list(UPGRADE_POLICY_NAMES), case_sensitive=False),
    default=None,
    help="Which newer versions to offer (overrides configuration).",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json"], case_sensitive=False),
    default="table",
    help="Output format for the accepted upgrades.",
)
@pass_context
def resolve(
    ctx: BomKeeperContext,
    bom: Path,
    catalog: Path,
    library_names: Tuple[str, ...],
    policy: Optional[str],
    output_format: str,
) -> None:
    """Interactively choose which BOM libraries to upgrade.

    For every library with newer versions available you are shown the
    current version (the default) followed by the candidates, oldest
    first. Press Enter to keep the current version. Ctrl+C abandons the
    whole session and nothing is reported as upgraded.

    Exits:
        0 when the session completed or was abandoned,
        1 if an error occurred.
    """
    try:
        upgrades = _run_resolve(
            ctx.config or BomKeeperConfig(),
            bom,
            catalog,
            list(library_names),
            policy,
        )
    except BomKeeperError as e:
        print_error(f"{e}")
        logger.debug("Resolve failed", exc_info=True)
        sys.exit(1)

    if upgrades is None:
        sys.exit(1)

    if output_format.lower() == "json":
        click.echo(json.dumps([u.to_json() for u in upgrades], indent=2))
    else:
        _display_upgrades(upgrades)


def _run_resolve(
    config: BomKeeperConfig,
    bom: Path,
    catalog: Path,
    library_names: List[str],
    policy_name: Optional[str],
) -> Optional[List[Upgrade]]:
    """Load inputs, run the resolver and return the accepted upgrades.

    Returns ``None`` when ``library_names`` selects a library that is not
    in the BOM.
    """
    libraries = load_bom(bom)
    known_versions = load_catalog(catalog)

    to_upgrade = _select_libraries(libraries, library_names)
    if to_upgrade is None:
        return None

    policy = (
        UpgradePolicy.from_name(policy_name) if policy_name else config.upgrade_policy
    )
    logger.info(
        "Resolving %d of %d library(ies) with policy %s",
        len(to_upgrade),
        len(libraries),
        policy.value,
    )

    resolver = UpgradeResolver(
        ConsolePromptService(),
        CatalogVersionDiscovery(known_versions, policy),
        allow_duplicates=config.allow_duplicate_names,
    )
    return resolver.resolve_upgrades(to_upgrade, libraries)


def _select_libraries(
    libraries: List[Library],
    names: List[str],
) -> Optional[List[Library]]:
    """Return the libraries named in ``names``, in BOM order.

    An empty ``names`` selects every library. Unknown names are reported
    and make the selection fail.
    """
    if not names:
        return list(libraries)

    wanted = set(names)
    unknown = sorted(wanted - {library.name for library in libraries})
    if unknown:
        print_warning(f"Libraries not found in BOM: {', '.join(unknown)}")
        return None

    return [library for library in libraries if library.name in wanted]


def _display_upgrades(upgrades: List[Upgrade]) -> None:
    """Print accepted upgrades as a table, or a notice when there are none."""
    if not upgrades:
        print_warning("No upgrades selected")
        return

    data = [
        {
            "Library": upgrade.name,
            "Current": upgrade.from_version,
            "Upgrade": f"[bold green]{upgrade.to_version}[/bold green]",
            "Change": colorize_update_type(upgrade.update_type),
        }
        for upgrade in upgrades
    ]
    column_styles = {
        "Library": {"style": "bold cyan", "no_wrap": True},
        "Current": {"justify": "center", "style": "dim"},
        "Upgrade": {"justify": "center"},
        "Change": {"justify": "center"},
    }

    print_table(data, title="Selected Upgrades", column_styles=column_styles)
    plural = "upgrade" if len(upgrades) == 1 else "upgrades"
    print_success(f"{len(upgrades)} {plural} selected")
