from collections.abc import Iterable, Mapping
from typing import Any

from drive_index.config import SiteConfig
from drive_index.core.paths import decode_uri_component
from drive_index.core.routes import match_protected_route
from drive_index.core.tokens import compare_hashed_token
from drive_index.models import AuthCheckOutcome, SearchResultItem

DEMO_ITEMS: list[dict[str, Any]] = [
    {
        "id": "01DEMO1",
        "name": "report.docx",
        "file": {"mimeType": "application/vnd.openxmlformats-officedocument.wordprocessingml.document"},
        "webUrl": "https://contoso-my.sharepoint.com/personal/demo/Documents/public/report.docx",
    },
    {
        "id": "01DEMO2",
        "name": "salaries.xlsx",
        "file": {"mimeType": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"},
        "webUrl": "https://contoso-my.sharepoint.com/personal/demo/Documents/secret/salaries.xlsx",
    },
    {
        "id": "01DEMO3",
        "name": "notes #1",
        "folder": {"childCount": 2},
        "webUrl": "https://contoso-my.sharepoint.com/personal/demo/Documents/public/notes #1",
    },
    {
        "id": "01DEMO4",
        "name": "AllItems.aspx",
        "file": {},
        "webUrl": "https://contoso-my.sharepoint.com/personal/demo/Documents/Forms/AllItems.aspx",
    },
]
DEMO_PASSWORDS = {"/secret": "hunter2"}


class InMemoryDriveProvider:
    """Drive provider serving a fixed item list; matches on item name."""

    def __init__(self, items: Iterable[Mapping[str, Any]] = (), access_token: str = "in-memory-token") -> None:
        self.items = [dict(raw) for raw in items]
        self.access_token = access_token
        self.search_calls: list[str] = []

    async def get_access_token(self) -> str:
        return self.access_token

    def encode_path(self, path: str) -> str:
        return ""

    async def search(self, sanitized_query: str, access_token: str) -> list[SearchResultItem]:
        self.search_calls.append(sanitized_query)
        needle = decode_uri_component(sanitized_query).replace("''", "'").strip().lower()
        return [
            SearchResultItem.model_validate(raw) for raw in self.items if needle in str(raw.get("name", "")).lower()
        ]


class InMemoryRouteVerifier:
    """Route verifier holding each protected route's password in memory."""

    def __init__(self, config: SiteConfig, passwords: Mapping[str, str] | None = None) -> None:
        self._config = config
        self.passwords = dict(passwords or {})
        self.calls: list[tuple[str, str, str]] = []

    async def check_auth_route(self, path: str, access_token: str, hashed_token: str) -> AuthCheckOutcome:
        self.calls.append((path, access_token, hashed_token))
        route = match_protected_route(path, self._config.protected_routes)
        if not route:
            return AuthCheckOutcome(code=200)
        dot_password = self.passwords.get(route)
        if dot_password is None:
            return AuthCheckOutcome(code=404)
        if compare_hashed_token(hashed_token, dot_password):
            return AuthCheckOutcome(code=200)
        return AuthCheckOutcome(code=401)
