import pytest

from seasonal import cli
from seasonal.location import GeocodingError
from seasonal.models import ObserverLocation


def test_main_prints_northern_seasons(capsys):
    assert cli.main(["2015"]) == 0
    out = capsys.readouterr().out.splitlines()

    assert out[0] == "Seasons of 2015 (northern hemisphere)"
    assert out[1].startswith("Vernal equinox")
    assert "2015-03-20 22:4" in out[1]
    assert out[4].startswith("Winter solstice")
    assert "2015-12-22 04:4" in out[4]


def test_main_southern_by_latitude(capsys):
    assert cli.main(["2015", "--lat=-33.9"]) == 0
    out = capsys.readouterr().out.splitlines()

    assert out[0] == "Seasons of 2015 (southern hemisphere)"
    assert out[1].startswith("Autumnal equinox")
    assert "2015-03-20" in out[1]


def test_main_local_timezone_column(capsys):
    assert cli.main(["2015", "--tz", "Asia/Seoul"]) == 0
    out = capsys.readouterr().out.splitlines()

    assert "2015-03-21 07:4" in out[1]
    assert out[1].endswith("KST")


def test_main_korean_labels_and_midpoints(capsys):
    assert cli.main(["2015", "--lang", "ko", "--midpoints"]) == 0
    out = capsys.readouterr().out

    assert "2015년 계절 (북반구)" in out
    assert "춘분" in out
    assert out.count("중간점") == 3


def test_main_unknown_timezone_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["2015", "--tz", "Mars/Olympus_Mons"])
    assert exc.value.code == 2
    assert "unknown timezone" in capsys.readouterr().err


def test_main_address_uses_geocoded_hemisphere_and_zone(monkeypatch, capsys):
    monkeypatch.setattr(
        cli,
        "geocode_location",
        lambda address: ObserverLocation(
            lat=-33.87, lng=151.21, timezone="Australia/Sydney", address_display=address
        ),
    )
    assert cli.main(["2015", "--address", "Sydney"]) == 0
    out = capsys.readouterr().out.splitlines()

    assert out[0] == "Seasons of 2015 (southern hemisphere)"
    assert out[1].endswith("AEDT")


def test_main_address_not_found(monkeypatch, capsys):
    def fail(address):
        raise GeocodingError(f"Address not found: {address}")

    monkeypatch.setattr(cli, "geocode_location", fail)
    assert cli.main(["2015", "--address", "nowhere"]) == 1
    assert "Address not found" in capsys.readouterr().err


def test_main_rejects_unknown_log_level(monkeypatch, capsys):
    monkeypatch.setenv("SEASONAL_LOG_LEVEL", "verbose")
    with pytest.raises(SystemExit) as exc:
        cli.main(["2015"])
    assert exc.value.code == 2
    assert "unknown SEASONAL_LOG_LEVEL: VERBOSE" in capsys.readouterr().err
