import logging

from fastapi import APIRouter, HTTPException, status

from hashforge.core.config import Settings
from hashforge.core.exceptions import (
    InputTooLongError,
    PipelineTooLongError,
    UnknownStepError,
    ValidationError,
)
from hashforge.dependencies import SettingsDep
from hashforge.models.schemas import ErrorResponse, HashRequest, HashResponse, TraceEntrySchema
from hashforge.services.pipeline import PipelineEvaluator

logger = logging.getLogger(__name__)

router = APIRouter()


def enforce_limits(request: HashRequest, settings: Settings) -> None:
    """Reject inputs larger than the configured limits."""
    for field, value in (("password", request.password), ("salt", request.salt)):
        if len(value) > settings.max_input_length:
            raise InputTooLongError(field, len(value), settings.max_input_length)

    if len(request.pipeline) > settings.max_pipeline_steps:
        raise PipelineTooLongError(len(request.pipeline), settings.max_pipeline_steps)


@router.post(
    "",
    response_model=HashResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Empty pipeline or input too long"},
        404: {"model": ErrorResponse, "description": "Unknown step in pipeline"},
        500: {"model": ErrorResponse, "description": "Evaluation failed"},
    },
    summary="Run a hash pipeline",
    description="Fold a password/salt pair through an ordered list of hash steps.",
)
async def run_pipeline(
    request: HashRequest,
    settings: SettingsDep,
) -> HashResponse:
    """
    Evaluate a pipeline and return the digest with its per-step trace.

    An empty password falls back to the configured default password.
    """
    password = request.password or settings.default_password

    try:
        enforce_limits(request, settings)

        result = PipelineEvaluator().evaluate(password, request.salt, request.pipeline)

        return HashResponse(
            final_hash=result.final_hash,
            bit_length=result.bit_length,
            step_count=len(result.trace),
            summary=(
                f"{request.name} | {result.bit_length}-bit output | "
                f"{len(result.trace)} steps"
            ),
            trace=[TraceEntrySchema.model_validate(entry) for entry in result.trace],
            step_values=[step.value for step in result.step_values],
            final_accumulator=result.final_accumulator,
        )

    except ValidationError as e:
        logger.warning("Rejected hash request: %s", e.message)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
    except UnknownStepError as e:
        logger.warning("Rejected hash request: %s", e.message)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )
    except Exception as e:
        logger.exception("Pipeline evaluation failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Evaluation failed: {str(e)}",
        )
