"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from orderflow.domain.exceptions import ValidationError

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    client_url: str = "http://localhost:8081"
    product_url: str = "http://localhost:8082"
    timeout: float = 5.0
    data_dir: Path = _DEFAULT_DATA_DIR
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> Settings:
        raw_timeout = os.getenv("ORDERFLOW_TIMEOUT", "5")
        try:
            timeout = float(raw_timeout)
        except ValueError as exc:
            raise ValidationError(f"Invalid ORDERFLOW_TIMEOUT: {raw_timeout!r}") from exc
        if timeout <= 0:
            raise ValidationError("ORDERFLOW_TIMEOUT must be positive")

        return cls(
            client_url=os.getenv("ORDERFLOW_CLIENT_URL", cls.client_url).rstrip("/"),
            product_url=os.getenv("ORDERFLOW_PRODUCT_URL", cls.product_url).rstrip("/"),
            timeout=timeout,
            data_dir=Path(os.getenv("ORDERFLOW_DATA_DIR", str(_DEFAULT_DATA_DIR))),
            log_level=os.getenv("ORDERFLOW_LOG_LEVEL", cls.log_level).upper(),
        )
