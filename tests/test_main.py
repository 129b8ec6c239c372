"""
Smoke tests for the command-line entry point.
"""

from crosspromo.main import main


def test_countries_major(capsys):
    assert main(["--quiet", "countries", "--major"]) == 0
    out = capsys.readouterr().out
    assert "United States" in out
    assert "Madagascar" not in out


def test_apps_command(fake_itunes, make_app, capsys):
    fake_itunes.add_app(make_app(1, name="Alpha Timer"))
    assert main(["--quiet", "apps", "1"]) == 0
    assert "Alpha Timer" in capsys.readouterr().out


def test_insights_command(fake_itunes, make_app, capsys):
    fake_itunes.add_app(make_app(1, name="Alpha Timer", rating=4.0, count=100))
    fake_itunes.add_app(make_app(2, name="Beta Reader", rating=5.0, count=10))
    assert main(["--quiet", "insights", "2", "1"]) == 0
    out = capsys.readouterr().out
    assert "Recommended order    : 1, 2" in out
    assert "Top performing app   : Beta Reader" in out


def test_developer_command_reports_missing_app(fake_itunes, capsys):
    assert main(["--quiet", "developer", "77"]) == 1
    assert "No app found" in capsys.readouterr().out


def test_config_summary_is_printed(tmp_path, capsys):
    path = tmp_path / "config.yml"
    path.write_text("country_code: gb\n", encoding="utf-8")
    assert main(["-c", str(path), "countries"]) == 0
    assert "Country              : gb" in capsys.readouterr().out
