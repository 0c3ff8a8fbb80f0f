"""Pydantic schemas for validated simulation requests."""

from pydantic import BaseModel, Field, ValidationError


class InvalidParameterError(ValueError):
    """Raised when a simulation request fails boundary validation."""

    def __init__(self, errors: list[dict]):
        self.errors = errors
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc']) or 'request'}: {err['msg']}"
            for err in errors
        )
        super().__init__(f"Invalid simulation parameters - {details}")

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "InvalidParameterError":
        return cls(exc.errors())


class SimulationRequest(BaseModel):
    start_price: float = Field(gt=0, allow_inf_nan=False, description="Price at step 0")
    volatility: float = Field(
        ge=0, allow_inf_nan=False, description="Annualised volatility (0.30 = 30%)"
    )
    horizon_days: int = Field(ge=0, description="Trading days simulated beyond step 0")
    path_count: int = Field(ge=0, description="Number of independent paths")


class PriceSummary(BaseModel):
    avg_end_price: float
    p5: float
    p25: float
    p50: float
    p75: float
    p95: float
    expected_return_pct: float
    upside_prob: float
    is_positive: bool
