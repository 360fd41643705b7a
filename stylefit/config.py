import os
from pydantic import BaseModel


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return int(raw)


class Settings(BaseModel):
    api_key: str = os.getenv("API_KEY", "change-me")

    # Unit used for new sessions ("inches" or "cm")
    default_unit: str = os.getenv("DEFAULT_UNIT", "inches")

    # Product page retrieval
    product_fetch_proxy: str = os.getenv("PRODUCT_FETCH_PROXY", "")
    product_fetch_timeout: float = float(os.getenv("PRODUCT_FETCH_TIMEOUT", "15"))
    product_review_limit: int = int(os.getenv("PRODUCT_REVIEW_LIMIT", "5"))

    # Seed for the process-wide random source; unset keeps it unseeded
    random_seed: int | None = _optional_int("RANDOM_SEED")

    # JWT (session tokens)
    jwt_secret: str = os.getenv("JWT_SECRET", "dev-secret")
    jwt_audience: str | None = os.getenv("JWT_AUDIENCE")
    jwt_issuer: str | None = os.getenv("JWT_ISSUER")
    jwt_ttl_seconds: int = int(os.getenv("JWT_TTL_SECONDS", "86400"))

    # Rate limit (token bucket)
    rate_limit_per_min: int = int(os.getenv("RATE_LIMIT_PER_MIN", "120"))
    rate_limit_burst: int = int(os.getenv("RATE_LIMIT_BURST", "60"))


settings = Settings()
