import random

from crosspromo.sorting import SortOption, sort_apps
from crosspromo.store.base import AppRecord

APPS = [
    AppRecord(track_id=1, track_name="Mango", average_user_rating=4.0, user_rating_count=10,
              release_date="2021-05-01T00:00:00Z"),
    AppRecord(track_id=2, track_name="Apple", average_user_rating=4.8, user_rating_count=3,
              release_date="2023-01-01T00:00:00Z"),
    AppRecord(track_id=3, track_name="Zebra", average_user_rating=None, user_rating_count=500),
]


def ids(apps):
    return [a.track_id for a in apps]


def test_alphabetical():
    assert ids(sort_apps(APPS, SortOption.ALPHABETICAL)) == [2, 1, 3]


def test_rating():
    assert ids(sort_apps(APPS, SortOption.RATING)) == [2, 1, 3]


def test_release_date_newest_first():
    assert ids(sort_apps(APPS, SortOption.RELEASE_DATE)) == [2, 1, 3]


def test_downloads():
    assert ids(sort_apps(APPS, "downloads")) == [3, 1, 2]


def test_random_is_a_permutation():
    shuffled = sort_apps(APPS, SortOption.RANDOM, rng=random.Random(7))
    assert sorted(ids(shuffled)) == [1, 2, 3]
    assert ids(APPS) == [1, 2, 3]
