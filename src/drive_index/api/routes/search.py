import logging

from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.responses import JSONResponse

from drive_index.api.dependencies import get_config, get_drive, get_verifier
from drive_index.api.schemas import ErrorResponse, SearchResultRow
from drive_index.config import SiteConfig
from drive_index.core.errors import UpstreamError
from drive_index.core.ports.drive import DriveProvider, RouteVerifier
from drive_index.core.search import run_search

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["search"])


@router.get(
    "/search",
    response_model=list[SearchResultRow],
    response_model_by_alias=True,
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
)
async def search(
    request: Request,
    response: Response,
    q: str = Query(""),
    config: SiteConfig = Depends(get_config),
    drive: DriveProvider = Depends(get_drive),
    verifier: RouteVerifier = Depends(get_verifier),
) -> list[SearchResultRow] | JSONResponse:
    """Search the drive, hiding items under protected routes the caller holds no valid token for."""
    headers = {"Cache-Control": config.cache_control_header}
    response.headers.update(headers)

    try:
        items = await run_search(
            q,
            request.headers.get(config.token_header),
            config=config,
            drive=drive,
            verifier=verifier,
        )
    except UpstreamError as exc:
        logger.warning("Search failed: %s", exc)
        return JSONResponse(
            status_code=exc.status_code or 500,
            content={"error": exc.body if exc.body is not None else "Internal server error."},
            headers=headers,
        )
    return [SearchResultRow.from_item(item) for item in items]
