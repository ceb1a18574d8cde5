from fastapi import APIRouter

from hashforge.models.schemas import PresetInfo, PresetsResponse, ScenarioInfo
from hashforge.services.pipeline import PRESETS, SCENARIOS

router = APIRouter()


@router.get(
    "",
    response_model=PresetsResponse,
    summary="List preset pipelines",
    description="Ready-made pipelines and the breach-story scenarios that use them.",
)
async def list_presets() -> PresetsResponse:
    """
    Return presets and scenarios.

    Scenarios that ask for a fresh salt get a newly generated one on every call.
    """
    return PresetsResponse(
        presets=[
            PresetInfo(name=name, pipeline=list(pipeline))
            for name, pipeline in PRESETS.items()
        ],
        scenarios=[
            ScenarioInfo(
                name=scenario.name,
                title=scenario.title,
                pipeline=list(scenario.pipeline),
                password=scenario.password,
                salt=scenario.resolved_salt(),
            )
            for scenario in SCENARIOS.values()
        ],
    )
