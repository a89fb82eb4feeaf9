import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.api.v1 import analysis, kepco_charge, simulation, system_config
from app.core.logging import RequestLoggingMiddleware, setup_logging

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    setup_logging(json_format=settings.log_json, debug=settings.debug)

    application = FastAPI(
        title=settings.app_name,
        version="0.1.0",
    )

    application.add_middleware(RequestLoggingMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.cors_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(simulation.router, prefix="/api/v1", tags=["simulation"])
    application.include_router(analysis.router, prefix="/api/v1/analysis", tags=["analysis"])
    application.include_router(
        kepco_charge.router, prefix="/api/v1/kepco-charge", tags=["kepco-charge"]
    )
    application.include_router(
        system_config.router, prefix="/api/v1/system-config", tags=["system-config"]
    )

    @application.get("/health")
    async def health_check() -> dict:
        return {
            "status": "ok",
            "environment": settings.environment,
            "rate_schedule": settings.rate_schedule_version,
            "financing_schedule": settings.financing_schedule_version,
        }

    logger.debug("Application created (%s)", settings.environment)
    return application


app = create_app()
