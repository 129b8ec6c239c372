from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional
import logging

from .cache import ResultCache, make_key
from .config import Config
from .errors import AppSearchError
from .insights import PromotionInsights, compute_insights
from .ratings import RatingAggregator
from .store.appstore import AppStoreClient
from .store.base import AppRecord, BaseStoreClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HybridApps:
    featured: List[AppRecord] = field(default_factory=list)
    additional: List[AppRecord] = field(default_factory=list)
    developer_name: Optional[str] = None


class AppSearchManager:
    """Caller-facing entry point for cross-promotion data.

    Every result is enriched with cross-market ratings (unless disabled in
    the config) and cached for ``config.cache_ttl_seconds``.
    """

    def __init__(self, config: Optional[Config] = None, client: Optional[BaseStoreClient] = None,
                 cache: Optional[ResultCache] = None):
        self.config = config or Config()
        self.client = client or AppStoreClient(self.config)
        self.cache = cache or ResultCache(self.config.cache_ttl_seconds)
        self.aggregator = RatingAggregator(self.client, self.config)

    @property
    def country_code(self) -> str:
        return self.config.country_code

    def _enhance(self, app: AppRecord) -> AppRecord:
        if not self.config.enable_global_ratings:
            return app
        return self.aggregator.enhance(app)

    def _enhance_all(self, apps: List[AppRecord]) -> List[AppRecord]:
        if not apps:
            return []
        out = []
        workers = max(1, min(self.config.max_workers, len(apps)))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(self._enhance, app) for app in apps]
            for future in as_completed(futures):
                out.append(future.result())
        return out

    def _resolve(self, app_id: int) -> Optional[AppRecord]:
        try:
            return self._enhance(self.client.lookup_with_fallback(app_id))
        except AppSearchError as e:
            logger.warning("Skipping app %s: %s", app_id, e)
            return None

    def fetch_specific_apps(self, app_ids: Iterable[int]) -> List[AppRecord]:
        """Fetch the given apps, keeping the caller's order.

        Ids that cannot be resolved are left out of the result.
        """
        app_ids = list(app_ids)
        key = make_key("manual", app_ids)
        by_id: Optional[Dict[int, AppRecord]] = self.cache.get(key)

        if by_id is None:
            by_id = {}
            unique = list(dict.fromkeys(app_ids))
            if unique:
                workers = max(1, min(self.config.max_workers, len(unique)))
                with ThreadPoolExecutor(max_workers=workers) as executor:
                    futures = {executor.submit(self._resolve, i): i for i in unique}
                    for future in as_completed(futures):
                        app = future.result()
                        if app is not None:
                            by_id[futures[future]] = app
            self.cache.set(key, by_id)

        return [by_id[i] for i in app_ids if i in by_id]

    def fetch_developer_apps(self, app_id: int, exclude_app_ids: Iterable[int] = (),
                             include_current_app: bool = False,
                             max_apps: Optional[int] = None) -> List[AppRecord]:
        """All other apps by the developer of ``app_id``, sorted by name.

        Raises NotFoundError if the app itself cannot be found, and
        NetworkError/DecodeError if the developer search fails.
        """
        exclude = set(exclude_app_ids)
        if not include_current_app:
            exclude.add(app_id)

        key = make_key("developer", [app_id], exclude="_".join(str(i) for i in sorted(exclude)),
                       max=max_apps)
        cached = self.cache.get(key)
        if cached is not None:
            return list(cached)

        app = self.client.lookup_with_fallback(app_id)
        siblings = self.client.search_by_artist(app.artist_id, exclude_ids=exclude)
        apps = sorted(self._enhance_all(siblings), key=lambda a: a.track_name)
        if max_apps is not None:
            apps = apps[:max_apps]

        self.cache.set(key, tuple(apps))
        logger.info("Found %d apps by %s", len(apps), app.artist_name or app.artist_id)
        return apps

    def fetch_hybrid_apps(self, current_app_id: int, featured_app_ids: Iterable[int],
                          max_additional: int = 3) -> HybridApps:
        """Hand-picked apps first, then up to ``max_additional`` other apps by the same developer."""
        featured_ids = list(featured_app_ids)
        featured = self.fetch_specific_apps(featured_ids)
        current = self.client.lookup_with_fallback(current_app_id)
        additional = self.fetch_developer_apps(
            current_app_id,
            exclude_app_ids=featured_ids + [current_app_id],
            include_current_app=False,
        )
        return HybridApps(
            featured=featured,
            additional=additional[:max_additional],
            developer_name=current.artist_name or None,
        )

    def get_promotion_insights(self, app_ids: Iterable[int]) -> PromotionInsights:
        try:
            apps = self.fetch_specific_apps(app_ids)
        except AppSearchError as e:
            logger.error("Failed to build promotion insights: %s", e)
            return PromotionInsights()
        return compute_insights(apps)

    def debug_global_ratings(self, app_id: int) -> str:
        return self.aggregator.describe(app_id)

    def search(self, term: str, limit: int = 50) -> List[AppRecord]:
        key = make_key("search", (), term=term.strip().lower(), limit=limit)
        cached = self.cache.get(key)
        if cached is not None:
            return list(cached)
        apps = self.client.search(term, limit=limit)
        self.cache.set(key, tuple(apps))
        return apps

    def clear_cache(self) -> None:
        self.cache.clear()
