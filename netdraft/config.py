from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="NETDRAFT_")

    log_level: str = "WARNING"

    # Only cards from this designer are released for play
    released_designer: str = "null_signal_games"

    # Fixed seed for reproducible runs; None draws from system entropy
    seed: int | None = None


settings = Settings()


# =============================================================================
# PACK COMPOSITION
# =============================================================================

# Both sides draw ten-card packs
PACK_SIZE = 10

# Runner type limits: overage budget of 3 shared across tracked types
RUNNER_HARD_LIMIT = 3

# Corp type limits: overage budget of 2 shared across tracked types
CORP_HARD_LIMIT = 2
