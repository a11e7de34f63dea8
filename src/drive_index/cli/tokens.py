from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from drive_index.config import load_site_config
from drive_index.core.routes import match_protected_route
from drive_index.core.tokens import build_token_header, deserialize_tokens

tokens_app = typer.Typer(help="Build and inspect protected-route token headers.")
console = Console()


@tokens_app.command("encode")
def encode(
    pairs: Annotated[list[str], typer.Argument(help="ROUTE=PASSWORD pairs, e.g. /secret=hunter2.")],
) -> None:
    """Hash passwords and print the token header value a client would send."""
    passwords: dict[str, str] = {}
    for pair in pairs:
        route, sep, password = pair.partition("=")
        if not sep or not route:
            raise typer.BadParameter(f"Expected ROUTE=PASSWORD, got {pair!r}")
        passwords[route] = password
    typer.echo(build_token_header(passwords))


@tokens_app.command("decode")
def decode(
    line: Annotated[str, typer.Argument(help="Token header value.")],
) -> None:
    """Show the route/token pairs carried by a header value."""
    entries = deserialize_tokens(line)
    table = Table(show_lines=False)
    table.add_column("path")
    table.add_column("token")
    for entry in entries:
        table.add_row(entry.path, entry.token)
    console.print(table)
    console.print(f"({len(entries)} rows)")


@tokens_app.command("match")
def match(
    path: Annotated[str, typer.Argument(help="Index-relative, percent-encoded path.")],
) -> None:
    """Print the configured protected route covering a path."""
    route = match_protected_route(path, load_site_config().protected_routes)
    if route:
        console.print(f"[yellow]protected[/yellow] by {route}")
    else:
        console.print("[green]public[/green]")
