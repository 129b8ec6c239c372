from .base import BaseStoreClient, AppRecord
from ..config import Config
from ..errors import DecodeError, InvalidRequestError, NetworkError, NotFoundError
from typing import Any, Dict, Iterable, List, Optional
import requests
import logging

logger = logging.getLogger(__name__)


def validate_app_id(app_id) -> int:
    if isinstance(app_id, bool):
        raise InvalidRequestError(f"Invalid app id: {app_id!r}")
    try:
        value = int(app_id)
    except (TypeError, ValueError):
        raise InvalidRequestError(f"Invalid app id: {app_id!r}")
    if value <= 0:
        raise InvalidRequestError(f"Invalid app id: {app_id!r}")
    return value


class AppStoreClient(BaseStoreClient):
    lookup_path = "lookup"
    search_path = "search"

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()

    def _url(self, country: str, path: str) -> str:
        return f"{self.config.base_url}/{country.lower()}/{path}"

    def _fetch_results(self, url: str, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        try:
            r = requests.get(url, params=params, timeout=self.config.request_timeout)
            r.raise_for_status()
        except requests.RequestException as e:
            raise NetworkError(str(e)) from e
        try:
            data = r.json()
        except ValueError as e:
            raise DecodeError(str(e)) from e
        results = data.get("results") if isinstance(data, dict) else None
        if not isinstance(results, list):
            raise DecodeError("Invalid JSON structure")
        return results

    def _apps_from(self, items: List[Any], exclude_ids: Iterable[int] = (),
                   artist_id: Optional[int] = None) -> List[AppRecord]:
        excluded = set(exclude_ids)
        out: List[AppRecord] = []
        for item in items:
            # artist entries in the same payload carry no trackId
            if not isinstance(item, dict) or "trackId" not in item:
                continue
            try:
                rec = AppRecord.from_itunes(item)
            except (KeyError, TypeError, ValueError) as e:
                logger.debug("Skipping malformed entry %r: %s", item.get("trackId"), e)
                continue
            if artist_id is not None and rec.artist_id != artist_id:
                continue
            if rec.track_id in excluded:
                continue
            out.append(rec)
        return out

    def lookup(self, app_id: int, country: Optional[str] = None) -> AppRecord:
        app_id = validate_app_id(app_id)
        country = country or self.config.country_code
        results = self._fetch_results(self._url(country, self.lookup_path), {"id": app_id})
        if not results:
            raise NotFoundError(f"No app found with id {app_id} in {country}")
        try:
            return AppRecord.from_itunes(results[0])
        except (KeyError, TypeError, ValueError) as e:
            raise DecodeError(f"lookup {app_id} in {country}: {e}") from e

    def lookup_with_fallback(self, app_id: int, countries: Optional[Iterable[str]] = None) -> AppRecord:
        app_id = validate_app_id(app_id)
        countries = list(countries or self.config.lookup_countries)
        answered = False
        last_error = None
        for country in countries:
            try:
                return self.lookup(app_id, country)
            except NotFoundError:
                answered = True
                logger.debug("App %s not listed in %s", app_id, country)
            except (NetworkError, DecodeError) as e:
                last_error = e
                logger.debug("Lookup of %s in %s failed: %s", app_id, country, e)

        if answered:
            raise NotFoundError(f"No app found with id {app_id}")
        raise NetworkError(f"lookup of {app_id} failed in {', '.join(countries)}") from last_error

    def search_by_artist(self, artist_id: Optional[int], exclude_ids: Iterable[int] = (),
                         country: Optional[str] = None) -> List[AppRecord]:
        if not artist_id or artist_id <= 0:
            raise NotFoundError("App has no developer id")
        country = country or self.config.country_code
        params = {"id": artist_id, "entity": "software"}
        results = self._fetch_results(self._url(country, self.lookup_path), params)
        apps = self._apps_from(results, exclude_ids, artist_id=artist_id)
        logger.debug("Developer %s has %d apps in %s", artist_id, len(apps), country)
        return apps

    def search_by_developer_name(self, name: str, exclude_ids: Iterable[int] = (),
                                 limit: int = 200) -> List[AppRecord]:
        params = {"term": name, "entity": "software", "attribute": "softwareDeveloper", "limit": limit}
        results = self._fetch_results(self._url(self.config.country_code, self.search_path), params)
        return self._apps_from(results, exclude_ids)

    def search(self, term: str, limit: int = 50) -> List[AppRecord]:
        if not term or not term.strip():
            raise InvalidRequestError("Search term is empty")
        params = {"term": term, "entity": "software", "limit": limit}
        results = self._fetch_results(self._url(self.config.country_code, self.search_path), params)
        return self._apps_from(results)
