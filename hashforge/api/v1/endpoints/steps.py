from fastapi import APIRouter, HTTPException, status

from hashforge.core.exceptions import UnknownStepError
from hashforge.models.schemas import ErrorResponse, StepCatalogResponse, StepInfo
from hashforge.services.steps import StepRegistry

router = APIRouter()


@router.get(
    "",
    response_model=StepCatalogResponse,
    summary="List hash steps",
    description="The closed catalog of hash steps, in display order.",
)
async def list_steps() -> StepCatalogResponse:
    registry = StepRegistry()
    return StepCatalogResponse(steps=list(registry.catalog().values()))


@router.get(
    "/{step_id}",
    response_model=StepInfo,
    responses={
        404: {"model": ErrorResponse, "description": "Step not found"},
    },
    summary="Get one hash step",
    description="Display metadata and formula for a single catalog step.",
)
async def get_step(step_id: str) -> StepInfo:
    try:
        return StepRegistry().get_step(step_id).info()
    except UnknownStepError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )
