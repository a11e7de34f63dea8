from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from drive_index.models import SearchResultItem


class SearchResultRow(BaseModel):
    """GET /api/search — one admitted drive item."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    file: dict[str, Any] | None = None
    folder: dict[str, Any] | None = None
    path: str
    web_url: str = Field(alias="webUrl")
    parent_reference: dict[str, Any] | None = Field(default=None, alias="parentReference")

    @classmethod
    def from_item(cls, item: SearchResultItem) -> SearchResultRow:
        return cls(
            id=item.id,
            name=item.name,
            file=item.file,
            folder=item.folder,
            path=item.path,
            web_url=item.web_url,
            parent_reference=item.parent_reference,
        )


class ErrorResponse(BaseModel):
    error: Any


class HealthResponse(BaseModel):
    status: str = "ok"
