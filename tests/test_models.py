import pytest

from crosspromo.store.base import AppRecord


class TestAppRecord:

    def test_from_itunes(self, make_app):
        item = make_app(42, name="Notes", rating=4.25, count=12, fileSizeBytes="50000000",
                        supportedDevices=["iPhone15", "iPad"], languageCodesISO2A=["EN", "DE"])
        app = AppRecord.from_itunes(item)

        assert app.track_id == 42
        assert app.track_name == "Notes"
        assert app.artist_id == 500
        assert app.genres == ("Productivity",)
        assert app.supported_devices == ("iPhone15", "iPad")
        assert app.language_codes == ("EN", "DE")
        assert app.raw == item

    def test_from_itunes_requires_track_id(self):
        with pytest.raises(KeyError):
            AppRecord.from_itunes({"wrapperType": "artist", "artistId": 1})

    def test_with_ratings_leaves_original_untouched(self, make_app):
        app = AppRecord.from_itunes(make_app(1, rating=3.0, count=4))
        updated = app.with_ratings(4.5, 400)
        assert (updated.average_user_rating, updated.user_rating_count) == (4.5, 400)
        assert (app.average_user_rating, app.user_rating_count) == (3.0, 4)
        assert updated.track_name == app.track_name

    def test_display_defaults(self):
        app = AppRecord(track_id=1, track_name="Bare")
        assert app.display_rating == 0.0
        assert app.display_rating_count == 0
        assert not app.has_rating
        assert app.display_genre == "Apps"
        assert app.display_file_size == "Unknown"
        assert app.display_age_rating == "4+"
        assert app.display_price == "GET"
        assert app.short_description == ""

    def test_display_values(self):
        app = AppRecord(
            track_id=1,
            track_name="Paid",
            price=2.99,
            formatted_price="$2.99",
            average_user_rating=3.5,
            user_rating_count=10,
            file_size_bytes="1300000000",
            content_advisory_rating="12+",
            artwork_url100="https://cdn/100x100bb.jpg",
            description="x" * 120,
        )
        assert app.has_rating
        assert app.star_rating == 4
        assert app.display_price == "$2.99"
        assert app.display_file_size == "1.3 GB"
        assert app.display_age_rating == "12+"
        assert app.artwork_url512 == "https://cdn/512x512bb.jpg"
        assert app.short_description == "x" * 100 + "..."

    def test_small_file_size_in_megabytes(self):
        assert AppRecord(track_id=1, track_name="s", file_size_bytes="50000000").display_file_size == "50 MB"
