"""HTTP application exposing the KYC documents analysis outside of Lambda."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kyc_analysis.api import router as api_v1_router
from kyc_analysis.core.config import settings
from kyc_analysis.core.logging import get_logger, setup_logging

setup_logging()
logger = get_logger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    docs_url="/docs" if settings.ENVIRONMENT == "development" else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_v1_router, prefix=settings.API_V1_STR)


@app.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint.

    Returns:
        dict: Health status
    """
    logger.info("Health check requested")
    return {"status": "healthy"}


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    logger.info(
        "Starting KYC documents analysis service",
        version=settings.VERSION,
        environment=settings.ENVIRONMENT,
    )
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
