"""Engine settings loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Engine configuration from environment variables."""

    regulations_file: str = "regulations.yaml"
    holidays_file: str = "public_holidays.yaml"
    pay_periods_per_year: int = 12
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_prefix": "PAYROLL_", "extra": "ignore"}


settings = Settings()
