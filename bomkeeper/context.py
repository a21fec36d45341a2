"""
Shared context object for bomkeeper CLI commands.

The root ``bomkeeper`` group fills one :class:`BomKeeperContext` per
invocation and subcommands receive it through :data:`pass_context`.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional

import click

if TYPE_CHECKING:
    from bomkeeper.config import BomKeeperConfig


class BomKeeperContext:
    """Global context object for bomkeeper CLI commands.

    Attributes:
        config_path: Path to the loaded configuration file, if any.
        verbose: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG).
        color: Whether colored terminal output is enabled.
        config: Loaded configuration, or ``None`` before the group runs.
    """

    __slots__ = ("config_path", "verbose", "color", "config")

    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.verbose: int = 0
        self.color: bool = True
        self.config: Optional["BomKeeperConfig"] = None


#: Click decorator for injecting :class:`BomKeeperContext` into commands.
pass_context = click.make_pass_decorator(BomKeeperContext, ensure=True)
