from decimal import Decimal

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "FINFUNC_", "env_file": ".env", "env_file_encoding": "utf-8"}

    # Newton-Raphson solver
    max_iterations: int = 50000
    tolerance: Decimal = Decimal("0.000001")  # Applies to both |NPV| and rate delta
    default_guess: Decimal = Decimal("0.1")

    @field_validator("max_iterations")
    @classmethod
    def _positive_iterations(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("max_iterations must be positive")
        return v

    @field_validator("tolerance")
    @classmethod
    def _positive_tolerance(cls, v: Decimal) -> Decimal:
        if v <= 0:
            raise ValueError("tolerance must be positive")
        return v


settings = Settings()
