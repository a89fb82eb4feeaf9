from pydantic import BaseModel


class ConfigEntry(BaseModel):
    value: str
    description: str


class SystemConfigResponse(BaseModel):
    rate_schedule_version: str
    financing_schedule_version: str
    entries: dict[str, ConfigEntry]
