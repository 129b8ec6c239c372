"""
Cross-market rating aggregation.

Every storefront keeps its own rating pool, so an app's home-market rating can
be built on a handful of reviews while other markets hold thousands. The
aggregator queries each configured market concurrently and merges the
answers into one review-count-weighted rating.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple
import logging
import math

from .config import Config
from .countries import country_name
from .store.base import AppRecord, BaseStoreClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarketRating:
    country: str
    rating: float
    count: int


def weighted_average(ratings: Iterable[MarketRating]) -> Optional[float]:
    """Review-count-weighted mean over markets with a positive count.

    Uses math.fsum so the result does not depend on the order the
    markets answered in.
    """
    usable = [r for r in ratings if r.count > 0]
    total = sum(r.count for r in usable)
    if total <= 0:
        return None
    return math.fsum(r.rating * r.count for r in usable) / total


def merge_ratings(ratings: List[MarketRating], home_rating: Optional[float],
                  home_count: Optional[int]) -> Tuple[Optional[float], Optional[int]]:
    """Combine per-market results with the app's own figures.

    Rating precedence: weighted average, then the best single market, then
    the home rating. The count is the market total, or the home count when
    no market contributed reviews.
    """
    best = max((r.rating for r in ratings), default=None)
    avg = weighted_average(ratings)
    rating = avg if avg is not None else best if best is not None else home_rating

    total = sum(r.count for r in ratings)
    count = total if total > 0 else home_count
    return rating, count


class RatingAggregator:
    def __init__(self, client: BaseStoreClient, config: Optional[Config] = None):
        self.client = client
        self.config = config or Config()

    def fetch_market(self, app_id: int, country: str) -> Optional[MarketRating]:
        try:
            app = self.client.lookup(app_id, country)
        except Exception as e:
            logger.debug("No rating for %s in %s: %s", app_id, country, e)
            return None
        if app.average_user_rating is None or not app.user_rating_count or app.user_rating_count <= 0:
            return None
        return MarketRating(country=country, rating=app.average_user_rating, count=app.user_rating_count)

    def collect(self, app_id: int) -> List[MarketRating]:
        markets = self.config.markets
        if not markets:
            return []
        ratings: List[MarketRating] = []
        workers = max(1, min(self.config.market_workers, len(markets)))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(self.fetch_market, app_id, m) for m in markets]
            for future in as_completed(futures):
                result = future.result()
                if result is not None:
                    ratings.append(result)
        ratings.sort(key=lambda r: r.country)
        logger.debug("Collected ratings for %s from %d/%d markets", app_id, len(ratings), len(markets))
        return ratings

    def enhance(self, app: AppRecord) -> AppRecord:
        ratings = self.collect(app.track_id)
        rating, count = merge_ratings(ratings, app.average_user_rating, app.user_rating_count)
        return app.with_ratings(rating, count)

    def describe(self, app_id: int) -> str:
        ratings = self.collect(app_id)
        lines = [f"Global ratings for app {app_id}"]
        if not ratings:
            lines.append("  No market returned rating data")
            return "\n".join(lines)

        for r in sorted(ratings, key=lambda r: r.count, reverse=True):
            lines.append(f"  {r.country.upper()} {country_name(r.country):<22} {r.rating:.2f} ({r.count} reviews)")
        rating, count = merge_ratings(ratings, None, None)
        lines.append(f"  Markets with data : {len(ratings)}/{len(self.config.markets)}")
        lines.append(f"  Weighted average  : {rating:.2f}")
        lines.append(f"  Total reviews     : {count}")
        return "\n".join(lines)
