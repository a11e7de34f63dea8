import asyncio
from typing import Annotated

import httpx
import typer
from rich.console import Console
from rich.table import Table

from drive_index.config import SiteConfig, load_site_config
from drive_index.core.errors import UpstreamError
from drive_index.core.ports.drive import DriveProvider, RouteVerifier
from drive_index.core.search import run_search
from drive_index.models import SearchResultItem

console = Console()


def _render_items(items: list[SearchResultItem]) -> None:
    table = Table(show_lines=False)
    for h in ("id", "kind", "name", "path"):
        table.add_column(h)
    for item in items:
        table.add_row(item.id, item.kind, item.name, item.path)
    console.print(table)
    console.print(f"({len(items)} rows)")


def _demo_backends(config: SiteConfig) -> tuple[SiteConfig, DriveProvider, RouteVerifier]:
    from drive_index.drive.memory import DEMO_ITEMS, DEMO_PASSWORDS, InMemoryDriveProvider, InMemoryRouteVerifier

    if not config.protected_routes:
        config = SiteConfig(protected_routes=tuple(DEMO_PASSWORDS))
    return config, InMemoryDriveProvider(DEMO_ITEMS), InMemoryRouteVerifier(config, DEMO_PASSWORDS)


def search(
    query: Annotated[str, typer.Argument(help="Search text.")],
    token_header: Annotated[
        str | None, typer.Option("--token-header", help="Serialized protected-route tokens to send.")
    ] = None,
    demo: Annotated[bool, typer.Option(help="Search a built-in sample drive instead of the configured one.")] = False,
) -> None:
    """Search the drive and list the items visible with the given tokens."""
    config = load_site_config()

    async def _run() -> None:
        if demo:
            demo_config, drive, verifier = _demo_backends(config)
            items = await run_search(query, token_header, config=demo_config, drive=drive, verifier=verifier)
            _render_items(items)
            return

        from drive_index.drive.graph import GraphDriveProvider, GraphRouteVerifier

        async with httpx.AsyncClient(timeout=config.request_timeout) as client:
            items = await run_search(
                query,
                token_header,
                config=config,
                drive=GraphDriveProvider(client, config),
                verifier=GraphRouteVerifier(client, config),
            )
        _render_items(items)

    try:
        asyncio.run(_run())
    except UpstreamError as exc:
        console.print(f"[red]Search failed:[/red] {exc} (status {exc.status_code or 500})")
        raise typer.Exit(code=1) from exc
