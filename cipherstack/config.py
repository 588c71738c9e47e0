from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class Settings(BaseModel):
    # Logging
    log_level: str = Field(default="INFO")

    # Pipeline
    trace_separator: str = Field(default="\n\n", description="Joins S-DES traces of consecutive layers")
    sdes_invert_on_decrypt: bool = Field(
        default=False,
        description="Apply K2 before K1 when an S-DES layer runs in decrypt mode",
    )

    # Reproducibility / evaluation
    global_seed: int = Field(default=1337)
    roundtrip_vectors: int = Field(default=200, ge=1, le=100_000)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    # Load .env if present
    load_dotenv()

    def _bool(name: str, default: bool) -> bool:
        v = os.getenv(name)
        if v is None:
            return default
        return v.strip().lower() in {"1", "true", "yes", "y", "on"}

    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        trace_separator=os.getenv("TRACE_SEPARATOR", "\n\n"),
        sdes_invert_on_decrypt=_bool("SDES_INVERT_ON_DECRYPT", False),
        global_seed=int(os.getenv("GLOBAL_SEED", "1337")),
        roundtrip_vectors=int(os.getenv("ROUNDTRIP_VECTORS", "200")),
    )
