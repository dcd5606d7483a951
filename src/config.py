from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "MORTGAGE_",
        "extra": "ignore",
    }

    # Display
    currency_symbol: str = "$"
    currency_decimals: int = Field(default=2, ge=0)
    show_schedule: bool = True

    # App
    log_level: str = "WARNING"


settings = Settings()
