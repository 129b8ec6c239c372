from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import yaml
import logging

from .countries import DEFAULT_COUNTRY, MAJOR_MARKETS, is_supported

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://itunes.apple.com"


@dataclass
class Config:
    country_code: str = DEFAULT_COUNTRY
    fallback_countries: List[str] = field(default_factory=lambda: ["us", "gb"])
    markets: List[str] = field(default_factory=lambda: list(MAJOR_MARKETS))
    cache_ttl_seconds: float = 300
    request_timeout: float = 10
    max_workers: int = 8
    market_workers: int = 30
    max_apps: Optional[int] = 10
    enable_global_ratings: bool = True
    base_url: str = DEFAULT_BASE_URL
    logging: Dict[str, Any] = field(default_factory=lambda: {"level": "INFO"})

    @property
    def lookup_countries(self) -> List[str]:
        """Primary storefront followed by the fallbacks, without repeats."""
        ordered = []
        for code in [self.country_code] + list(self.fallback_countries):
            code = code.lower()
            if code not in ordered:
                ordered.append(code)
        return ordered


def _country(value: Optional[str], default: str = DEFAULT_COUNTRY) -> str:
    if not value:
        return default
    if not is_supported(value):
        logger.warning("Unsupported country code %r; using %r", value, default)
        return default
    return value.lower()


def _country_list(values, default: List[str]) -> List[str]:
    if values is None:
        return list(default)
    out = []
    for v in values:
        if not is_supported(str(v)):
            logger.warning("Dropping unsupported market %r", v)
            continue
        code = str(v).lower()
        if code not in out:
            out.append(code)
    return out


def load_config(path: Optional[str] = None) -> Config:
    if path is None:
        return Config()

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    defaults = Config()
    max_apps = data.get("max_apps", defaults.max_apps)

    return Config(
        country_code=_country(data.get("country_code")),
        fallback_countries=_country_list(data.get("fallback_countries"), defaults.fallback_countries),
        markets=_country_list(data.get("markets"), defaults.markets),
        cache_ttl_seconds=float(data.get("cache_ttl_seconds", defaults.cache_ttl_seconds)),
        request_timeout=float(data.get("request_timeout", defaults.request_timeout)),
        max_workers=int(data.get("max_workers", defaults.max_workers)),
        market_workers=int(data.get("market_workers", defaults.market_workers)),
        max_apps=int(max_apps) if max_apps is not None else None,
        enable_global_ratings=bool(data.get("enable_global_ratings", defaults.enable_global_ratings)),
        base_url=str(data.get("base_url", defaults.base_url)).rstrip("/"),
        logging=data.get("logging", {"level": "INFO"}),
    )
