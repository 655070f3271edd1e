"""
Validate Command - Check a catalog file.

Loads the selected catalog through the full validator and reports
what it contains, or the first schema violation found.
"""

import click
from rich.console import Console
from rich.table import Table

from ...core.errors import CertmapError
from ...graph.store import CertGraph
from ..utils import echo_success, fail, get_app

console = Console()


@click.command()
@click.pass_context
def validate(ctx: click.Context):
    """
    Validate the catalog and summarize it per vendor.
    """
    app = get_app(ctx)
    try:
        catalog = app.load()
        stats = CertGraph.from_catalog(catalog).get_stats()
    except CertmapError as e:
        fail(e)

    echo_success(f"Catalog is valid: {stats['total_certs']} certs, {stats['total_links']} links")

    table = Table(title="Certifications per vendor")
    table.add_column("Vendor", style="cyan")
    table.add_column("Certs", justify="right")
    for vendor in catalog.vendors():
        count = sum(1 for cert in catalog.certs if cert.vendor == vendor)
        table.add_row(vendor.value, str(count))
    console.print(table)

    links = stats["links_by_type"]
    console.print(
        f"Links: [bold]{links['required']}[/bold] required, "
        f"[bold]{links['recommended']}[/bold] recommended, "
        f"{stats['orphans']} unlinked certs"
    )
