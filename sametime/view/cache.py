"""
Caller-side memo for normalized location sets.

The view engine never caches. Callers that serve many requests for the
same reference timezone within the same minute can keep the normalized
set here. Entries are keyed by timezone name, the instant truncated to the
minute, and a fingerprint of the raw catalog, language catalog and config
they were built from.
"""
from __future__ import annotations

import hashlib
import json
import time
from datetime import datetime, timezone
from typing import Any, Iterable, Sequence

from ..catalog.languages import LanguageCatalog
from ..catalog.models import CanonicalLocation, RawTimezoneRecord
from ..catalog.normalize import coerce_records, normalize_catalog, resolve_reference
from ..config import DEFAULT_CONFIG, SameTimeConfig

_cache: dict[str, dict[str, Any]] = {}
_hits: int = 0
_misses: int = 0
_DEFAULT_TTL = 300  # 5 minutes


def _make_key(timezone_name: str, now: datetime, fingerprint: str = "") -> str:
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    minute = now.astimezone(timezone.utc).replace(second=0, microsecond=0)
    normalized = json.dumps(
        {"tz": timezone_name, "minute": minute.isoformat(), "source": fingerprint},
        sort_keys=True,
    )
    return hashlib.sha256(normalized.encode()).hexdigest()[:16]


def catalog_fingerprint(
    records: Sequence[RawTimezoneRecord],
    catalog: LanguageCatalog,
    config: SameTimeConfig = DEFAULT_CONFIG,
) -> str:
    """Digest of everything a normalized set depends on besides timezone and minute."""
    payload = {
        "records": [r.model_dump() for r in records],
        "countries": {
            code: [list(info.language_codes), info.display_name, info.native_name]
            for code, info in catalog.countries.items()
        },
        "language_names": dict(catalog.language_names),
        "overrides": {code: list(codes) for code, codes in config.language_overrides.items()},
        "standards": dict(config.language_names),
        "similar_time_hours": config.similar_time_hours,
    }
    normalized = json.dumps(payload, sort_keys=True, ensure_ascii=False)
    return hashlib.sha256(normalized.encode()).hexdigest()


def _evict_expired(now: float) -> None:
    expired = [key for key, entry in _cache.items() if now - entry["created_at"] >= _DEFAULT_TTL]
    for key in expired:
        del _cache[key]


def cache_get(timezone_name: str, now: datetime, fingerprint: str = "") -> Any | None:
    global _hits, _misses
    key = _make_key(timezone_name, now, fingerprint)
    entry = _cache.get(key)
    if entry and time.time() - entry["created_at"] < _DEFAULT_TTL:
        _hits += 1
        return entry["value"]
    if entry:
        del _cache[key]
    _misses += 1
    return None


def cache_set(timezone_name: str, now: datetime, value: Any, fingerprint: str = "") -> None:
    created_at = time.time()
    # Past minutes are never looked up again, so sweep them here
    _evict_expired(created_at)
    key = _make_key(timezone_name, now, fingerprint)
    _cache[key] = {"value": value, "created_at": created_at}


def cached_locations(
    raw_catalog: Iterable[RawTimezoneRecord | dict[str, Any]],
    timezone_name: str,
    catalog: LanguageCatalog,
    now: datetime,
    config: SameTimeConfig = DEFAULT_CONFIG,
) -> list[CanonicalLocation]:
    """
    Return the normalized set for *timezone_name*, normalizing on a miss.

    Each call returns a new list; the location models inside are shared
    with the cache and must not be mutated.
    """
    records = coerce_records(raw_catalog)
    fingerprint = catalog_fingerprint(records, catalog, config)
    cached = cache_get(timezone_name, now, fingerprint)
    if cached is not None:
        return list(cached)

    reference = resolve_reference(records, timezone_name)
    locations = normalize_catalog(records, catalog, now, reference=reference, config=config)
    cache_set(timezone_name, now, tuple(locations), fingerprint)
    return list(locations)


def get_cache_stats() -> dict:
    total = _hits + _misses
    return {
        "size": len(_cache),
        "hits": _hits,
        "misses": _misses,
        "hit_rate": round(_hits / total * 100, 1) if total > 0 else 0.0,
    }


def clear_cache() -> None:
    global _hits, _misses
    _cache.clear()
    _hits = 0
    _misses = 0
