"""Protected-route token helpers.

Clients send one line per request in the token header, built from
``(route,sha256(password)),`` fragments. The format has no escaping: routes
and tokens containing ``(``, ``)`` or ``,`` cannot be represented.
"""

import hashlib
import hmac
from collections.abc import Iterable, Mapping

from drive_index.models import TokenEntry


def hash_token(raw_token: str) -> str:
    return hashlib.sha256(raw_token.encode("utf-8")).hexdigest()


def serialize_tokens(entries: Iterable[TokenEntry]) -> str:
    return "".join(f"({entry.path},{entry.token})," for entry in entries)


def deserialize_tokens(line: str | None) -> list[TokenEntry]:
    """Parse a token header line.

    Never raises: missing input or fragments without a ``,`` separator yield
    no entries, so a malformed header behaves like an absent one.
    """
    if not line:
        return []
    entries: list[TokenEntry] = []
    for fragment in line.split("),"):
        if not fragment:
            continue
        if fragment.startswith("("):
            fragment = fragment[1:]
        path, sep, token = fragment.partition(",")
        if not sep:
            continue
        entries.append(TokenEntry(path=path, token=token))
    return entries


def build_token_header(passwords: Mapping[str, str]) -> str:
    """Hash ``route -> password`` pairs and serialize them into a header value."""
    return serialize_tokens(TokenEntry(path=route, token=hash_token(pw)) for route, pw in passwords.items())


def compare_hashed_token(header_token: str, dot_password: str) -> bool:
    """Check a caller's hashed token against the raw contents of a route's ``.password`` file."""
    expected = hash_token(dot_password.strip()).encode("utf-8")
    return hmac.compare_digest(expected, header_token.encode("utf-8"))
