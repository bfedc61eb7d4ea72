from decimal import Decimal

from pydantic_settings import BaseSettings

from debtplan.models.debt import Strategy


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "DEBTPLAN_"}

    # App
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Household policy used when a request omits it
    default_monthly_extra_budget: Decimal = Decimal("0")
    default_strategy: Strategy = Strategy.AVALANCHE


settings = Settings()
