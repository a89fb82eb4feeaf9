from fastapi import APIRouter

from app.config import settings
from app.schemas.system_config import SystemConfigResponse
from engine.economics.presets import CONFIG_DESCRIPTIONS

router = APIRouter()


@router.get(
    "",
    response_model=SystemConfigResponse,
    summary="Market assumptions",
    description="Current configuration snapshot used to seed quotations and simulations.",
)
async def get_system_config():
    config_map = settings.market_assumptions().to_config_map()
    return {
        "rate_schedule_version": settings.rate_schedule_version,
        "financing_schedule_version": settings.financing_schedule_version,
        "entries": {
            key: {"value": value, "description": CONFIG_DESCRIPTIONS.get(key, key)}
            for key, value in sorted(config_map.items())
        },
    }
