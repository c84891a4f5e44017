from __future__ import annotations

from pathlib import Path

import pandas as pd

from ..errors import InvalidCatalogError
from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .models import RawTimezoneRecord

RAW_COLUMNS = [
    "name",
    "alternativeName",
    "countryCode",
    "countryName",
    "mainCities",
    "currentTimeOffsetInMinutes",
]


def load_raw_catalog(
    path: Path | None = None,
    config: CatalogConfig = DEFAULT_CATALOG_CONFIG,
) -> list[RawTimezoneRecord]:
    """
    Read a raw timezone catalog stored as a JSON list of records.

    Missing fields become NaN in the frame; the record model turns those
    into blanks or an absent offset.
    """
    catalog_path = path or config.catalog_path
    try:
        df = pd.read_json(catalog_path, orient="records", dtype=False, convert_dates=False)
    except ValueError as exc:
        raise InvalidCatalogError(f"Could not read timezone catalog {catalog_path}: {exc}") from exc

    if df.empty:
        return []
    if "name" not in df.columns:
        raise InvalidCatalogError(f"Timezone catalog {catalog_path} has no 'name' field")

    # Ensure all expected columns exist so every record has the same shape
    for col in RAW_COLUMNS:
        if col not in df.columns:
            df[col] = None

    return [
        RawTimezoneRecord.model_validate(row)
        for row in df[RAW_COLUMNS].to_dict(orient="records")
    ]


if __name__ == "__main__":
    from datetime import datetime, timezone

    from .languages import LanguageCatalog
    from .normalize import normalize_catalog, resolve_reference

    records = load_raw_catalog()
    reference = resolve_reference(records, DEFAULT_CATALOG_CONFIG.default_timezone)
    locations = normalize_catalog(
        records,
        LanguageCatalog.from_babel(DEFAULT_CATALOG_CONFIG.display_locale),
        datetime.now(timezone.utc),
        reference=reference,
    )
    print(f"Loaded {len(records)} raw entries into {len(locations)} canonical locations.")
