"""System endpoint exposing application info."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Request, status

from isspass.application.dtos.system_dto import ApplicationInfoDTO
from isspass.application.use_cases.system_use_cases import GetApplicationInfoUseCase
from isspass.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


@router.get("/info", response_model=ApplicationInfoDTO)
@inject
async def info(
    request: Request,
    get_application_info_use_case: GetApplicationInfoUseCase = Depends(
        Provide["get_application_info_use_case"]
    ),
) -> ApplicationInfoDTO:
    """Return version, uptime and the upstream services in use."""
    started_at = getattr(request.app.state, "started_at", None)
    try:
        info_response = await get_application_info_use_case.execute(started_at)
        logger.debug("info.retrieved", uptime_seconds=info_response.uptime_seconds)
        return info_response
    except Exception as exc:  # pragma: no cover
        logger.error("info.fetch.failure", error=str(exc), exc_info=exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to retrieve application info",
        ) from exc
