from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class SearchResultItem(BaseModel):
    """One drive item returned by the provider search endpoint."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    name: str
    file: dict[str, Any] | None = None
    folder: dict[str, Any] | None = None
    web_url: str = Field(default="", alias="webUrl")
    parent_reference: dict[str, Any] | None = Field(default=None, alias="parentReference")
    # Index-relative path, filled in by the authorization filter
    path: str = ""

    @property
    def kind(self) -> Literal["file", "folder"]:
        return "folder" if self.folder is not None else "file"


class TokenEntry(BaseModel):
    """A protected route paired with the SHA-256 hash of the caller's password for it."""

    model_config = ConfigDict(frozen=True)

    path: str
    token: str


class AuthCheckOutcome(BaseModel):
    code: int

    @property
    def ok(self) -> bool:
        return self.code == 200
