"""
Path Command - Learning path towards a certification.

Walks the links backwards from the target certification and prints
every prerequisite in an order that can be followed.
"""

import click
from rich.console import Console

from ...core.errors import CertmapError
from ...graph.store import CertGraph
from ..utils import echo_error, fail, get_app

console = Console()


@click.command()
@click.argument("cert_id")
@click.option("--required-only", is_flag=True, help="Ignore recommended links")
@click.option("--unlocks", is_flag=True, help="Show what CERT_ID leads to instead")
@click.pass_context
def path(ctx: click.Context, cert_id: str, required_only: bool, unlocks: bool):
    """
    Show the learning path to CERT_ID.
    """
    app = get_app(ctx)
    try:
        graph = CertGraph.from_catalog(app.load())
        if not graph.has_cert(cert_id):
            echo_error(f"Unknown certification: {cert_id}")
            ctx.exit(1)

        if unlocks:
            reachable = graph.unlocks(cert_id, required_only)
            ids = [cert.id for cert in graph.iter_certs() if cert.id in reachable]
            header = f"[bold]{cert_id}[/bold] leads to {len(ids)} certification(s)"
        else:
            ids = graph.learning_path(cert_id, required_only)
            header = f"Learning path to [bold]{cert_id}[/bold]"
    except CertmapError as e:
        fail(e)

    console.print(header)
    for step, step_id in enumerate(ids, start=1):
        cert = graph.get_cert(step_id)
        console.print(f"  {step}. [cyan]{cert.title}[/cyan] [dim]({cert.display_level}, {step_id})[/dim]")
