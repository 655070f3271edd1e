"""
Tracks Command - Certifications grouped by domain/track.
"""

import click
from rich.console import Console
from rich.tree import Tree

from ...analysis.tracks import group_by_track
from ...core.errors import CertmapError
from ...core.types import ALL
from ...graph.builder import select_vendor
from ..utils import VENDOR_CHOICE, echo_warning, fail, get_app, resolve_vendor

console = Console()


@click.command()
@click.option("--vendor", type=VENDOR_CHOICE, default=None, help="Vendor to show (default from config)")
@click.option("--domain", default=ALL, show_default=True, help="Single track to show")
@click.option("-q", "--query", default="", help="Free-text search")
@click.pass_context
def tracks(ctx: click.Context, vendor: str | None, domain: str, query: str):
    """
    Show a vendor's certifications grouped by track.
    """
    app = get_app(ctx)
    selected = resolve_vendor(app, vendor)
    try:
        certs, _ = select_vendor(app.load(), selected)
    except CertmapError as e:
        fail(e)

    groups = group_by_track(certs, domain, query)
    if not groups:
        echo_warning(f"No {selected.value} tracks match the filters")
        return

    root = Tree(f"[bold]{selected.value} tracks[/bold]")
    for group in groups:
        branch = root.add(f"[cyan]{group.domain}[/cyan] ({group.count})")
        for level, members in group.levels.items():
            level_branch = branch.add(level.value)
            for cert in members:
                level_branch.add(f"{cert.exam or cert.code or '—'}  {cert.title}")
    console.print(root)
