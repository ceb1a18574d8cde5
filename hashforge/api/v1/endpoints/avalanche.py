import logging

from fastapi import APIRouter, HTTPException, status

from hashforge.api.v1.endpoints.hashing import enforce_limits
from hashforge.core.exceptions import UnknownStepError, ValidationError
from hashforge.dependencies import SettingsDep
from hashforge.models.schemas import (
    AvalancheResponse,
    AvalancheRowSchema,
    ErrorResponse,
    HashRequest,
)
from hashforge.services.pipeline import AvalancheAnalyzer

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=AvalancheResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Empty pipeline or input too long"},
        404: {"model": ErrorResponse, "description": "Unknown step in pipeline"},
        500: {"model": ErrorResponse, "description": "Analysis failed"},
    },
    summary="Measure the avalanche effect",
    description=(
        "Re-run a pipeline with the first, middle and last password character "
        "incremented and report how much of the digest changed."
    ),
)
async def avalanche_effect(
    request: HashRequest,
    settings: SettingsDep,
) -> AvalancheResponse:
    password = request.password or settings.default_password

    try:
        enforce_limits(request, settings)

        rows = AvalancheAnalyzer().report(password, request.salt, request.pipeline)

        return AvalancheResponse(
            base_hash=rows[0].hash,
            rows=[AvalancheRowSchema.model_validate(row) for row in rows],
        )

    except ValidationError as e:
        logger.warning("Rejected avalanche request: %s", e.message)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
    except UnknownStepError as e:
        logger.warning("Rejected avalanche request: %s", e.message)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )
    except Exception as e:
        logger.exception("Avalanche analysis failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Analysis failed: {str(e)}",
        )
