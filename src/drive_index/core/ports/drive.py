from typing import Protocol

from drive_index.models import AuthCheckOutcome, SearchResultItem


class DriveProvider(Protocol):
    async def get_access_token(self) -> str: ...

    def encode_path(self, path: str) -> str: ...

    async def search(self, sanitized_query: str, access_token: str) -> list[SearchResultItem]: ...


class RouteVerifier(Protocol):
    async def check_auth_route(self, path: str, access_token: str, hashed_token: str) -> AuthCheckOutcome: ...
