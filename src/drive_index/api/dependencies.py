from __future__ import annotations

import httpx
from fastapi import Depends

from drive_index.config import SiteConfig, load_site_config
from drive_index.core.ports.drive import DriveProvider, RouteVerifier
from drive_index.drive.graph import GraphDriveProvider, GraphRouteVerifier

_client: httpx.AsyncClient | None = None


def get_config() -> SiteConfig:
    return load_site_config()


async def get_http_client(config: SiteConfig = Depends(get_config)) -> httpx.AsyncClient:
    """Return the shared ``httpx.AsyncClient``, creating it lazily on first call."""
    global _client  # noqa: PLW0603
    if _client is None:
        _client = httpx.AsyncClient(timeout=config.request_timeout)
    return _client


async def get_drive(
    config: SiteConfig = Depends(get_config),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> DriveProvider:
    return GraphDriveProvider(client, config)


async def get_verifier(
    config: SiteConfig = Depends(get_config),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> RouteVerifier:
    return GraphRouteVerifier(client, config)


async def shutdown_http_client() -> None:
    global _client  # noqa: PLW0603
    if _client is not None:
        await _client.aclose()
        _client = None
