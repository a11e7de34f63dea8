from collections.abc import Sequence

from drive_index.core.paths import encode_path_segments


def match_protected_route(path: str, routes: Sequence[str]) -> str:
    """Return the configured route protecting *path*, or ``""`` if it is public.

    Routes are tried in configuration order and the first whose encoded form
    prefixes *path* wins, even when a later route is a longer match. Empty
    route entries are skipped.
    """
    if not path:
        return ""
    for route in routes:
        if not route:
            continue
        if path.startswith(encode_path_segments(route)):
            return route
    return ""
