"""
CLI Utilities - Shared helper functions for command line operations.

Formatted printing, catalog loading from the group options, and the
common filter options used by several commands.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

import click

from ..config import CertmapConfig, load_config
from ..core.errors import CertmapError
from ..core.types import ALL, Catalog, FilterState, Vendor
from ..parsing.catalog import load_catalog, load_default_catalog

logger = logging.getLogger(__name__)

VENDOR_CHOICE = click.Choice([vendor.value for vendor in Vendor], case_sensitive=False)


def echo_success(message: str) -> None:
    """Print a success message with a green checkmark."""
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    """Print an error message with a red cross to stderr."""
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    click.echo(click.style(f"⚠️  {message}", fg="yellow"))


def echo_info(message: str) -> None:
    """Print an informational message, dimmed."""
    click.echo(click.style(f"   {message}", dim=True))


@dataclass
class AppContext:
    """Per-invocation state shared by the command group and its commands."""
    config: CertmapConfig
    data_path: Path | None = None

    def load(self) -> Catalog:
        """
        Load the catalog selected by --data, the config file, or the bundled one.

        Raises:
            CertmapError: If the catalog is invalid.
        """
        path = self.data_path or self.config.data.path
        if path is None:
            logger.debug("Using bundled catalog")
            return load_default_catalog()
        return load_catalog(path)


def get_app(ctx: click.Context) -> AppContext:
    """Return the AppContext, building a default one for commands invoked standalone."""
    app = ctx.find_object(AppContext)
    if app is None:
        app = AppContext(config=load_config())
        ctx.obj = app
    return app


def resolve_vendor(app: AppContext, vendor: str | None) -> Vendor:
    """Map a case-insensitive --vendor value to the enumeration, or the configured default."""
    if vendor is None:
        return app.config.view.vendor
    for candidate in Vendor:
        if candidate.value.lower() == vendor.lower():
            return candidate
    raise click.BadParameter(f"Unknown vendor: {vendor}", param_hint="--vendor")


def build_state(
    app: AppContext,
    vendor: str | None,
    level: str,
    domain: str,
    query: str,
    hide_recommended: bool,
) -> FilterState:
    show_recommended = app.config.view.show_recommended and not hide_recommended
    return FilterState(
        vendor=resolve_vendor(app, vendor),
        level=level,
        domain=domain,
        query=query,
        show_recommended=show_recommended,
    )


def filter_options(func: Callable) -> Callable:
    """Attach the shared --vendor/--level/--domain/--query/--hide-recommended options."""
    options = [
        click.option("--vendor", type=VENDOR_CHOICE, default=None, help="Vendor to show (default from config)"),
        click.option("--level", default=ALL, show_default=True, help="Display level to keep"),
        click.option("--domain", default=ALL, show_default=True, help="Domain/track to keep"),
        click.option("-q", "--query", default="", help="Free-text search"),
        click.option("--hide-recommended", is_flag=True, help="Only show required links"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def fail(error: CertmapError) -> None:
    """Report a certmap error and exit with status 1."""
    echo_error(str(error))
    raise SystemExit(1)
