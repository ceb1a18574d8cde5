from fastapi import APIRouter, HTTPException, status

from hashforge.dependencies import SettingsDep
from hashforge.models.schemas import ErrorResponse, StrengthRequest, StrengthResponse
from hashforge.services.strength import PasswordStrengthAnalyzer

router = APIRouter()


@router.post(
    "",
    response_model=StrengthResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Password too long"},
    },
    summary="Estimate password strength",
    description="Estimate entropy, rating and brute-force time for a password.",
)
async def estimate_strength(
    request: StrengthRequest,
    settings: SettingsDep,
) -> StrengthResponse:
    if len(request.password) > settings.max_input_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Password exceeds maximum length of {settings.max_input_length}",
        )

    report = PasswordStrengthAnalyzer().analyze(request.password)
    return StrengthResponse.model_validate(report)
