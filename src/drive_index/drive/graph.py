import logging
import os
import posixpath
from typing import Any

import httpx

from drive_index.config import SiteConfig
from drive_index.core.errors import UpstreamError
from drive_index.core.paths import encode_uri_component
from drive_index.core.routes import match_protected_route
from drive_index.core.tokens import compare_hashed_token
from drive_index.models import AuthCheckOutcome, SearchResultItem

logger = logging.getLogger(__name__)


def encode_drive_path(base_directory: str, path: str) -> str:
    """Build the ``:<path>`` addressing suffix the drive API expects after ``/root``.

    Returns ``""`` for the drive root.
    """
    joined = posixpath.join("/", base_directory.strip("/"), path.lstrip("/"))
    if joined in ("", "/"):
        return ""
    return ":" + encode_uri_component(joined.rstrip("/"))


def _response_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


async def _get(client: httpx.AsyncClient, url: str, **kwargs: Any) -> httpx.Response:
    """GET *url*, translating transport and HTTP errors into ``UpstreamError``."""
    try:
        response = await client.get(url, **kwargs)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise UpstreamError(
            f"Drive API returned {exc.response.status_code}",
            status_code=exc.response.status_code,
            body=_response_body(exc.response),
        ) from exc
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise UpstreamError(f"Drive API request failed: {exc}") from exc
    return response


def _json_object(response: httpx.Response) -> dict[str, Any]:
    """Decode a JSON object body, raising ``UpstreamError`` for anything else."""
    try:
        payload = response.json()
    except ValueError as exc:
        raise UpstreamError("Drive API returned a non-JSON body") from exc
    if not isinstance(payload, dict):
        raise UpstreamError("Drive API returned an unexpected JSON body")
    return payload


class GraphDriveProvider:
    """Drive provider backed by the Microsoft Graph drive API."""

    def __init__(self, client: httpx.AsyncClient, config: SiteConfig, access_token: str | None = None) -> None:
        self._client = client
        self._config = config
        self._access_token = access_token

    async def get_access_token(self) -> str:
        token = self._access_token or os.getenv("DRIVE_ACCESS_TOKEN", "").strip()
        if not token:
            raise UpstreamError("No drive access token configured")
        return token

    def encode_path(self, path: str) -> str:
        return encode_drive_path(self._config.base_directory, path)

    def search_url(self, sanitized_query: str) -> str:
        encoded_root = self.encode_path("/")
        root = f"root{encoded_root}:" if encoded_root else "root"
        return f"{self._config.drive_api}/{root}/search(q='{sanitized_query}')"

    async def search(self, sanitized_query: str, access_token: str) -> list[SearchResultItem]:
        response = await _get(
            self._client,
            self.search_url(sanitized_query),
            headers={"Authorization": f"Bearer {access_token}"},
            params={"select": self._config.search_select, "top": self._config.max_items},
        )
        values = _json_object(response).get("value", [])
        if not isinstance(values, list):
            raise UpstreamError("Drive API search response has no item list")
        try:
            return [SearchResultItem.model_validate(raw) for raw in values]
        except ValueError as exc:
            raise UpstreamError("Drive API returned a malformed search item") from exc


class GraphRouteVerifier:
    """Checks hashed tokens against the ``.password`` file stored in each protected route."""

    def __init__(self, client: httpx.AsyncClient, config: SiteConfig) -> None:
        self._client = client
        self._config = config

    async def _read_password(self, route: str, access_token: str) -> str:
        encoded = encode_drive_path(self._config.base_directory, f"{route}/.password")
        meta = await _get(
            self._client,
            f"{self._config.drive_api}/root{encoded}",
            headers={"Authorization": f"Bearer {access_token}"},
            params={"select": "@microsoft.graph.downloadUrl,file"},
        )
        download_url = _json_object(meta).get("@microsoft.graph.downloadUrl")
        if not download_url or not isinstance(download_url, str):
            raise UpstreamError(f"No download URL for {route}/.password", status_code=404)
        content = await _get(self._client, download_url)
        return content.text

    async def check_auth_route(self, path: str, access_token: str, hashed_token: str) -> AuthCheckOutcome:
        route = match_protected_route(path, self._config.protected_routes)
        if not route:
            return AuthCheckOutcome(code=200)

        try:
            dot_password = await self._read_password(route, access_token)
        except UpstreamError as exc:
            if exc.status_code == 404:
                logger.warning("Protected route %s has no .password file", route)
                return AuthCheckOutcome(code=404)
            logger.warning("Could not read .password for %s: %s", route, exc)
            return AuthCheckOutcome(code=500)

        if compare_hashed_token(hashed_token, dot_password):
            return AuthCheckOutcome(code=200)
        return AuthCheckOutcome(code=401)
