from fastapi import APIRouter

from hashforge.api.v1.endpoints import avalanche, hashing, presets, steps, strength

api_router = APIRouter()

api_router.include_router(
    steps.router,
    prefix="/steps",
    tags=["Catalog"],
)

api_router.include_router(
    hashing.router,
    prefix="/hash",
    tags=["Pipeline"],
)

api_router.include_router(
    avalanche.router,
    prefix="/avalanche",
    tags=["Pipeline"],
)

api_router.include_router(
    presets.router,
    prefix="/presets",
    tags=["Catalog"],
)

api_router.include_router(
    strength.router,
    prefix="/strength",
    tags=["Strength"],
)
