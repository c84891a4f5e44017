from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class CatalogConfig:
    """
    Where the raw timezone catalog lives and how it is displayed.
    """

    catalog_path: Path = Path(os.getenv("SAMETIME_CATALOG_PATH", "data/timezones.json"))
    default_timezone: str = os.getenv("SAMETIME_DEFAULT_TIMEZONE", "UTC")
    display_locale: str = os.getenv("SAMETIME_DISPLAY_LOCALE", "en")


DEFAULT_CATALOG_CONFIG = CatalogConfig()
