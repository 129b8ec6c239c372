from crosspromo.config import Config, load_config
from crosspromo.countries import MAJOR_MARKETS, country_name, is_supported, major_markets_info


def test_defaults_without_file():
    config = load_config(None)
    assert config == Config()
    assert config.country_code == "us"
    assert config.markets == MAJOR_MARKETS
    assert config.cache_ttl_seconds == 300


def test_load_yaml(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text(
        "country_code: DE\n"
        "fallback_countries: [us, gb]\n"
        "markets: [us, gb, xx, GB]\n"
        "cache_ttl_seconds: 60\n"
        "max_apps: null\n"
        "enable_global_ratings: false\n"
        "base_url: https://example.test/\n"
        "logging:\n"
        "  level: DEBUG\n",
        encoding="utf-8",
    )

    config = load_config(str(path))

    assert config.country_code == "de"
    assert config.markets == ["us", "gb"]
    assert config.cache_ttl_seconds == 60.0
    assert config.max_apps is None
    assert config.enable_global_ratings is False
    assert config.base_url == "https://example.test"
    assert config.logging == {"level": "DEBUG"}
    assert config.lookup_countries == ["de", "us", "gb"]


def test_unsupported_country_falls_back_to_us(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("country_code: zz\n", encoding="utf-8")
    assert load_config(str(path)).country_code == "us"


def test_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(str(path)) == Config()


def test_lookup_countries_skip_repeats():
    assert Config(country_code="us").lookup_countries == ["us", "gb"]


def test_country_helpers():
    assert is_supported("GB")
    assert not is_supported("xx")
    assert country_name("jp") == "Japan"
    assert country_name("xx") == "XX"
    names = [name for _, name in major_markets_info()]
    assert names == sorted(names)
    assert len(names) == len(MAJOR_MARKETS)
