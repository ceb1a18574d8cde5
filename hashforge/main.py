from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hashforge.api.v1.router import api_router
from hashforge.core.config import Settings, get_settings
from hashforge.core.logging import setup_logging


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()
    setup_logging("DEBUG" if settings.debug else settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description=(
            "Hash Pipeline Lab API. "
            "Compose toy hash pipelines from a fixed step catalog, trace every "
            "step, and measure the avalanche effect. Not for real passwords."
        ),
        version="0.1.0",
        openapi_url=f"{settings.api_v1_prefix}/openapi.json",
        docs_url=f"{settings.api_v1_prefix}/docs",
        redoc_url=f"{settings.api_v1_prefix}/redoc",
    )

    # The API is stateless and sets no cookies, so credentials stay off
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


app = create_app()


def run() -> None:
    """Serve the app with uvicorn, using the configured host and port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "hashforge.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
