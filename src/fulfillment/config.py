"""Runtime settings, read from the environment (and a ``.env`` file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path

from dotenv import load_dotenv

from fulfillment.domain.exceptions import ConfigurationError

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[2] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    tax_rate: Decimal = Decimal("0.20")
    log_level: str = "INFO"
    vip_customers: tuple[str, ...] = ()

    @staticmethod
    def from_env() -> Settings:
        load_dotenv()

        raw_rate = os.getenv("FULFILLMENT_TAX_RATE", "0.20")
        try:
            tax_rate = Decimal(raw_rate)
        except InvalidOperation as exc:
            raise ConfigurationError(f"Invalid FULFILLMENT_TAX_RATE: {raw_rate!r}") from exc

        vip = os.getenv("FULFILLMENT_VIP_CUSTOMERS", "")
        return Settings(
            data_dir=Path(os.getenv("FULFILLMENT_DATA_DIR", str(DEFAULT_DATA_DIR))),
            tax_rate=tax_rate,
            log_level=os.getenv("FULFILLMENT_LOG_LEVEL", "INFO"),
            vip_customers=tuple(c.strip() for c in vip.split(",") if c.strip()),
        )
