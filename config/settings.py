from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Redis backs the per-(market, account) flag store (defaults match local dev)
    REDIS_URL: str = "redis://localhost:6379/0"

    # Ledger polling interval for SnapshotPoller
    POLL_INTERVAL_SECONDS: float = 3.0

    # Exact vote tie on a disputed market: PROPOSER | INVALID | REJECT
    JURY_TIE_BREAK: str = "PROPOSER"

    # Settlement token (cUSD) smallest-unit decimals, display only
    TOKEN_DECIMALS: int = 6

    # App
    APP_NAME: str = "Optimistic Market Core"
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False  # Safe default for production; set DEBUG=True in .env for local dev


settings = Settings()
