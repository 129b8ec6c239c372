from enum import Enum
from typing import List, Optional, Sequence
import random

from .store.base import AppRecord


class SortOption(str, Enum):
    ALPHABETICAL = "alphabetical"
    RATING = "rating"
    RELEASE_DATE = "release_date"
    DOWNLOADS = "downloads"
    RANDOM = "random"


def sort_apps(apps: Sequence[AppRecord], option: SortOption = SortOption.ALPHABETICAL,
              rng: Optional[random.Random] = None) -> List[AppRecord]:
    option = SortOption(option)
    if option is SortOption.ALPHABETICAL:
        return sorted(apps, key=lambda a: a.track_name)
    if option is SortOption.RATING:
        return sorted(apps, key=lambda a: a.display_rating, reverse=True)
    if option is SortOption.RELEASE_DATE:
        # ISO-8601 strings sort chronologically
        return sorted(apps, key=lambda a: a.release_date or "", reverse=True)
    if option is SortOption.DOWNLOADS:
        return sorted(apps, key=lambda a: a.display_rating_count, reverse=True)
    shuffled = list(apps)
    (rng or random).shuffle(shuffled)
    return shuffled
