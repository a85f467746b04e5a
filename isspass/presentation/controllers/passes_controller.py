"""
Passes Router - Presentation Layer

This module defines the FastAPI router for the pass lookup endpoint.
"""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status

from isspass.application.dtos.pass_dto import PassesResponseDTO
from isspass.application.use_cases.pass_use_cases import (
    NextPassesForCurrentLocationUseCase,
)
from isspass.domain.entities.errors import PassLookupError, TransportError
from isspass.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/passes", tags=["Passes"])


@router.get("", response_model=PassesResponseDTO)
@inject
async def get_next_passes(
    next_passes_use_case: NextPassesForCurrentLocationUseCase = Depends(
        Provide["next_passes_use_case"]
    ),
) -> PassesResponseDTO:
    """
    Get the upcoming ISS passes over the location of this server's public IP.

    Raises:
        HTTPException: 504 when an upstream service could not be reached,
            502 when one answered with an error or an unreadable body
    """
    logger.info("passes.requested")

    try:
        passes = await next_passes_use_case.execute()
        response = PassesResponseDTO.from_domain(passes)
    except TransportError as e:
        raise HTTPException(
            status_code=status.HTTP_504_GATEWAY_TIMEOUT,
            detail=f"Upstream service unreachable: {e.message}",
        ) from e
    except PassLookupError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Upstream service failed: {e.message}",
        ) from e
    except Exception as e:
        logger.error("passes.retrieval_failed", error=str(e), exc_info=e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to retrieve ISS passes: {str(e)}",
        ) from e

    logger.info("passes.retrieved", count=response.count)
    return response
