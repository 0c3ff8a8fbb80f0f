from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PF_",
    )

    # Monte Carlo simulation
    simulation_days: int = 126  # ~6 months of trading days
    simulation_num_paths: int = 50
    simulation_seed: int | None = None

    # Trading
    fee_rate: float = 0.1425  # percent per trade
    initial_cash: float = 100000.0

    # Logging
    log_dir: str = "logs"
