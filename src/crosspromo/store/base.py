from typing import Any, Dict, Iterable, List, Optional, Tuple
from dataclasses import dataclass, field, replace
import math


def _tuple(value) -> Tuple[str, ...]:
    if not value:
        return ()
    return tuple(str(v) for v in value)


def _optional_float(value) -> Optional[float]:
    if value is None:
        return None
    return float(value)


def _optional_int(value) -> Optional[int]:
    if value is None:
        return None
    return int(value)


@dataclass(frozen=True)
class AppRecord:
    track_id: int
    track_name: str
    track_view_url: str = ""
    artist_name: str = ""
    artist_id: Optional[int] = None
    artwork_url100: str = ""
    formatted_price: str = "Free"
    price: float = 0.0
    currency: Optional[str] = None
    average_user_rating: Optional[float] = None
    user_rating_count: Optional[int] = None
    description: Optional[str] = None
    genres: Tuple[str, ...] = ()
    primary_genre_name: Optional[str] = None
    primary_genre_id: Optional[int] = None
    bundle_id: Optional[str] = None
    version: Optional[str] = None
    release_date: Optional[str] = None
    current_version_release_date: Optional[str] = None
    file_size_bytes: Optional[str] = None
    content_advisory_rating: Optional[str] = None
    track_content_rating: Optional[str] = None
    supported_devices: Tuple[str, ...] = ()
    minimum_os_version: Optional[str] = None
    language_codes: Tuple[str, ...] = ()
    seller_name: Optional[str] = None
    release_notes: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_itunes(cls, item: Dict[str, Any]) -> "AppRecord":
        """Build a record from one entry of an iTunes lookup/search payload.

        Raises KeyError, TypeError or ValueError for entries that are not apps
        or carry values of the wrong type.
        """
        return cls(
            track_id=int(item["trackId"]),
            track_name=str(item.get("trackName", "")),
            track_view_url=item.get("trackViewUrl", ""),
            artist_name=item.get("artistName", ""),
            artist_id=_optional_int(item.get("artistId")),
            artwork_url100=item.get("artworkUrl100") or item.get("artworkUrl60") or "",
            formatted_price=item.get("formattedPrice", "Free"),
            price=float(item.get("price") or 0.0),
            currency=item.get("currency"),
            average_user_rating=_optional_float(item.get("averageUserRating")),
            user_rating_count=_optional_int(item.get("userRatingCount")),
            description=item.get("description"),
            genres=_tuple(item.get("genres")),
            primary_genre_name=item.get("primaryGenreName"),
            primary_genre_id=_optional_int(item.get("primaryGenreId")),
            bundle_id=item.get("bundleId"),
            version=item.get("version"),
            release_date=item.get("releaseDate"),
            current_version_release_date=item.get("currentVersionReleaseDate"),
            file_size_bytes=item.get("fileSizeBytes"),
            content_advisory_rating=item.get("contentAdvisoryRating"),
            track_content_rating=item.get("trackContentRating"),
            supported_devices=_tuple(item.get("supportedDevices")),
            minimum_os_version=item.get("minimumOsVersion"),
            language_codes=_tuple(item.get("languageCodesISO2A")),
            seller_name=item.get("sellerName"),
            release_notes=item.get("releaseNotes"),
            raw=dict(item),
        )

    def with_ratings(self, rating: Optional[float], count: Optional[int]) -> "AppRecord":
        return replace(self, average_user_rating=rating, user_rating_count=count)

    @property
    def display_rating(self) -> float:
        return self.average_user_rating or 0.0

    @property
    def display_rating_count(self) -> int:
        return self.user_rating_count or 0

    @property
    def has_rating(self) -> bool:
        return self.average_user_rating is not None and (self.user_rating_count or 0) > 0

    @property
    def display_genre(self) -> str:
        if self.primary_genre_name:
            return self.primary_genre_name
        return self.genres[0] if self.genres else "Apps"

    @property
    def display_file_size(self) -> str:
        try:
            size = float(self.file_size_bytes)
        except (TypeError, ValueError):
            return "Unknown"
        if size >= 1_000_000_000:
            return f"{size / 1_000_000_000:.1f} GB"
        return f"{round(size / 1_000_000)} MB"

    @property
    def artwork_url512(self) -> str:
        return self.artwork_url100.replace("100x100", "512x512")

    @property
    def is_free(self) -> bool:
        return self.price == 0.0

    @property
    def display_price(self) -> str:
        return "GET" if self.is_free else self.formatted_price

    @property
    def star_rating(self) -> int:
        # half-up, not banker's rounding
        return int(math.floor(self.display_rating + 0.5))

    @property
    def display_age_rating(self) -> str:
        return self.track_content_rating or self.content_advisory_rating or "4+"

    @property
    def short_description(self) -> str:
        desc = self.description or ""
        if len(desc) <= 100:
            return desc
        return desc[:100] + "..."


class BaseStoreClient:
    def lookup(self, app_id: int, country: str) -> AppRecord:
        raise NotImplementedError

    def lookup_with_fallback(self, app_id: int, countries: Optional[Iterable[str]] = None) -> AppRecord:
        raise NotImplementedError

    def search_by_artist(self, artist_id: int, exclude_ids: Iterable[int] = ()) -> List[AppRecord]:
        raise NotImplementedError

    def search(self, term: str, limit: int = 50) -> List[AppRecord]:
        raise NotImplementedError
