from pydantic_settings import BaseSettings

from engine.economics.presets import MarketAssumptions


class Settings(BaseSettings):
    model_config = {"env_prefix": "", "case_sensitive": False}

    # App
    environment: str = "development"
    debug: bool = True
    app_name: str = "SolarQuote"
    cors_origins: str = "http://localhost:3000"
    log_json: bool = False

    # Public simulation endpoint
    simulation_rate_limit: int = 10
    simulation_rate_window_seconds: int = 15 * 60

    # Tariff / financing schedule versions
    rate_schedule_version: str = "2024"
    financing_schedule_version: str = "2024"

    # Market assumptions (fallbacks when the settings store has no value)
    smp_price: float = 120.0
    rec_price: float = 40_000.0
    rec_weight: float = 1.0
    peak_hours: float = 3.7
    degradation_rate: float = 0.008
    maintenance_cost: float = 500_000.0
    monitoring_cost: float = 300_000.0
    quotation_valid_days: int = 30

    def market_assumptions(self) -> MarketAssumptions:
        return MarketAssumptions(
            smp_price=self.smp_price,
            rec_price=self.rec_price,
            rec_weight=self.rec_weight,
            peak_hours=self.peak_hours,
            degradation_rate=self.degradation_rate,
            maintenance_cost=self.maintenance_cost,
            monitoring_cost=self.monitoring_cost,
            quotation_valid_days=self.quotation_valid_days,
        )


settings = Settings()
