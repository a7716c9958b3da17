"""Centralized configuration — all env vars in one place."""

import os


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.cors_origins: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
        self.git_sha: str = os.getenv("GIT_SHA", "unknown")
        self.environment: str = os.getenv("ENVIRONMENT", "local")
        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.port: int = int(os.getenv("PORT", "3000"))

        # Redis store: full URL wins over host/port
        self.redis_host: str = os.getenv("REDIS_HOST", "localhost")
        self.redis_port: int = int(os.getenv("REDIS_PORT", "6379"))
        self.redis_db: int = int(os.getenv("REDIS_DB", "0"))
        self.redis_url: str = os.getenv("REDIS_URL") or (
            f"redis://{self.redis_host}:{self.redis_port}/{self.redis_db}"
        )
        self.store_required: bool = _env_bool("STORE_REQUIRED", True)

        # Write-back is off unless explicitly enabled
        self.cache_writeback: bool = _env_bool("CACHE_WRITEBACK", False)
        self.cache_ttl_seconds: int = int(os.getenv("CACHE_TTL_SECONDS", "30"))

        # FishWatch origin
        self.fishwatch_base_url: str = os.getenv(
            "FISHWATCH_BASE_URL", "https://www.fishwatch.gov/api"
        ).rstrip("/")
        self.origin_timeout_seconds: float = float(os.getenv("ORIGIN_TIMEOUT_SECONDS", "10"))

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Return a list of configuration problems (empty when all is well)."""
        problems = []
        if self.cache_ttl_seconds <= 0:
            problems.append(f"CACHE_TTL_SECONDS must be positive, got {self.cache_ttl_seconds}")
        if self.origin_timeout_seconds <= 0:
            problems.append(
                f"ORIGIN_TIMEOUT_SECONDS must be positive, got {self.origin_timeout_seconds}"
            )
        if not self.redis_url.startswith(("redis://", "rediss://", "unix://")):
            problems.append(f"REDIS_URL has an unsupported scheme: {self.redis_url}")
        return problems


settings = Settings()
