import logging
from collections.abc import Sequence

from drive_index.config import SiteConfig
from drive_index.core.errors import UpstreamError
from drive_index.core.paths import map_absolute_path
from drive_index.core.ports.drive import DriveProvider, RouteVerifier
from drive_index.core.routes import match_protected_route
from drive_index.core.sanitize import sanitize_query
from drive_index.core.tokens import deserialize_tokens
from drive_index.models import SearchResultItem

logger = logging.getLogger(__name__)


async def filter_search_results(
    items: Sequence[SearchResultItem],
    token_header: str | None,
    access_token: str,
    *,
    config: SiteConfig,
    verifier: RouteVerifier,
) -> list[SearchResultItem]:
    """Return the items the caller may see, in their original order.

    Items outside the index or under the reserved prefix are dropped. Items
    under a protected route are kept only when the caller sent a token for
    exactly that route and the verifier accepts it; verification runs one
    item at a time.
    """
    for item in items:
        item.path = map_absolute_path(item.web_url, config.index_marker)

    tokens = {entry.path: entry.token for entry in reversed(deserialize_tokens(token_header))}

    admitted: list[SearchResultItem] = []
    for item in items:
        if not item.path or item.path.startswith(config.reserved_prefix):
            continue

        route = match_protected_route(item.path, config.protected_routes)
        if not route:
            admitted.append(item)
            continue

        token = tokens.get(route)
        if token is None:
            logger.debug("No token supplied for %s, skipping %s", route, item.path)
            continue

        try:
            outcome = await verifier.check_auth_route(item.path, access_token, token)
        except UpstreamError as exc:
            logger.debug("Verification of %s failed: %s", item.path, exc)
            continue
        except Exception:
            logger.exception("Route verifier raised for %s", item.path)
            continue

        if outcome.ok:
            admitted.append(item)
        else:
            logger.debug("Token for %s rejected with code %d", route, outcome.code)

    return admitted


async def run_search(
    query: str | None,
    token_header: str | None,
    *,
    config: SiteConfig,
    drive: DriveProvider,
    verifier: RouteVerifier,
) -> list[SearchResultItem]:
    """Search the drive and return only the results the caller is authorized to see.

    An empty query returns ``[]`` without contacting the provider.
    Raises ``UpstreamError`` when token acquisition or the search call fails.
    """
    if not query:
        return []

    access_token = await drive.get_access_token()
    items = await drive.search(sanitize_query(query), access_token)
    admitted = await filter_search_results(items, token_header, access_token, config=config, verifier=verifier)
    logger.info("Search returned %d item(s), %d admitted", len(items), len(admitted))
    return admitted
