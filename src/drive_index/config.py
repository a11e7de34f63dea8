from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_DRIVE_API = "https://graph.microsoft.com/v1.0/me/drive"
DEFAULT_CACHE_CONTROL = "max-age=0, s-maxage=60, stale-while-revalidate"
DEFAULT_SEARCH_SELECT = "id,name,file,folder,parentReference,webUrl"


@dataclass(frozen=True)
class SiteConfig:
    drive_api: str = DEFAULT_DRIVE_API
    # Directory on the drive that the index is rooted at
    base_directory: str = "/"
    # Literal substring of a provider webUrl that precedes the index-relative path
    index_marker: str = "/Documents"
    # Order matters: the first matching route wins
    protected_routes: tuple[str, ...] = ()
    max_items: int = 100
    cache_control_header: str = DEFAULT_CACHE_CONTROL
    token_header: str = "od-protected-tokens"
    search_select: str = DEFAULT_SEARCH_SELECT
    # Paths under this prefix are form/metadata artifacts, not content
    reserved_prefix: str = "/Forms"
    request_timeout: float = 30.0


def _parse_routes(value: str) -> tuple[str, ...]:
    # Empty entries are kept; the route matcher skips them.
    if not value.strip():
        return ()
    return tuple(r.strip() for r in value.split(","))


def _parse_positive_int(value: str, default: int) -> int:
    try:
        parsed = int(value)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _parse_positive_float(value: str, default: float) -> float:
    try:
        parsed = float(value)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


@lru_cache(maxsize=1)
def load_site_config() -> SiteConfig:
    """Load the site configuration from environment variables.

    The result is cached for the lifetime of the process; call
    ``load_site_config.cache_clear()`` to force a reload (tests do this).
    """
    return SiteConfig(
        drive_api=(os.getenv("DRIVE_API", "") or DEFAULT_DRIVE_API).strip().rstrip("/"),
        base_directory=(os.getenv("DRIVE_BASE_DIRECTORY", "") or "/").strip(),
        index_marker=(os.getenv("DRIVE_INDEX_MARKER", "") or "/Documents").strip(),
        protected_routes=_parse_routes(os.getenv("DRIVE_PROTECTED_ROUTES", "")),
        max_items=_parse_positive_int(os.getenv("DRIVE_MAX_ITEMS", ""), 100),
        cache_control_header=(os.getenv("DRIVE_CACHE_CONTROL", "") or DEFAULT_CACHE_CONTROL).strip(),
        token_header=(os.getenv("DRIVE_TOKEN_HEADER", "") or "od-protected-tokens").strip().lower(),
        request_timeout=_parse_positive_float(os.getenv("DRIVE_REQUEST_TIMEOUT", ""), 30.0),
    )
