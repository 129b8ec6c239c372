from unittest.mock import Mock, patch

import pytest
import requests

from crosspromo.config import Config


def app_item(track_id, name=None, artist_id=500, rating=4.5, count=100, genre="Productivity", **extra):
    """One app entry shaped like the iTunes lookup payload."""
    item = {
        "wrapperType": "software",
        "kind": "software",
        "trackId": track_id,
        "trackName": name or f"App {track_id}",
        "trackViewUrl": f"https://apps.apple.com/app/id{track_id}",
        "artistId": artist_id,
        "artistName": "Sample Developer",
        "artworkUrl100": f"https://is1-ssl.mzstatic.com/{track_id}/100x100bb.jpg",
        "formattedPrice": "Free",
        "price": 0.0,
        "primaryGenreName": genre,
        "genres": [genre],
        "releaseDate": "2023-01-01T00:00:00Z",
    }
    if rating is not None:
        item["averageUserRating"] = rating
    if count is not None:
        item["userRatingCount"] = count
    item.update(extra)
    return item


def json_response(payload, status=200):
    resp = Mock()
    resp.status_code = status
    resp.json.return_value = payload
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} Server Error")
    return resp


class FakeITunes:
    """Stands in for requests.get, routing by storefront, endpoint and params."""

    def __init__(self):
        self.apps = {}
        self.overrides = {}
        self.artists = {}
        self.searches = {}
        self.calls = []

    def add_app(self, item):
        self.apps[item["trackId"]] = item
        return item

    def set_market(self, country, track_id, value):
        """value: an item dict, None for an empty result, an exception to raise,
        an HTTP status code, or a string served as an unparseable body."""
        self.overrides[(country, track_id)] = value

    def __call__(self, url, params=None, timeout=None):
        params = dict(params or {})
        self.calls.append((url, params))
        country, endpoint = url.split("/")[-2:]

        if endpoint == "search":
            return json_response({"resultCount": 0, "results": self.searches.get(params["term"], [])})

        track_id = params["id"]
        if params.get("entity") == "software":
            results = self.artists.get(track_id, [])
        elif (country, track_id) in self.overrides:
            value = self.overrides[(country, track_id)]
            if isinstance(value, Exception):
                raise value
            if isinstance(value, int):
                return json_response({}, status=value)
            if isinstance(value, str):
                resp = json_response(None)
                resp.json.side_effect = ValueError("Expecting value")
                return resp
            results = [] if value is None else [value]
        elif track_id in self.apps:
            results = [self.apps[track_id]]
        else:
            results = []
        return json_response({"resultCount": len(results), "results": results})

    def lookups_for(self, track_id):
        return [url for url, p in self.calls if p.get("id") == track_id and "entity" not in p]


@pytest.fixture
def make_app():
    return app_item


@pytest.fixture
def config():
    return Config(country_code="us", markets=["us", "gb", "de"], market_workers=3, max_workers=4)


@pytest.fixture
def fake_itunes():
    fake = FakeITunes()
    with patch("crosspromo.store.appstore.requests.get", side_effect=fake):
        yield fake
