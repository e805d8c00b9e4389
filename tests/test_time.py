from datetime import datetime, timedelta, timezone

import pytest

from lsview.time import TimeFormat, determine_time_zone

NANOS = 1_000_000_000


def _now_ns():
    return int(datetime.now(timezone.utc).timestamp()) * NANOS


def test_full_iso_at_epoch():
    assert TimeFormat.FULL_ISO.format_local(0) == "1970-01-01 00:00:00.000000000"


def test_long_iso_at_epoch():
    assert TimeFormat.LONG_ISO.format_local(0) == "1970-01-01 00:00"


def test_full_iso_zoned_with_offset():
    zone = timezone(timedelta(hours=5, minutes=30))
    assert TimeFormat.FULL_ISO.format_zoned(0, zone) == "1970-01-01 05:30:00.000000000 +0530"


def test_full_iso_keeps_nanoseconds():
    stamp = 1_500_000_000_123_456_789
    assert TimeFormat.FULL_ISO.format_local(stamp).endswith(".123456789")


def test_negative_time_rounds_towards_earlier_second():
    just_before = TimeFormat.FULL_ISO.format_local(-1)
    whole_second_before = TimeFormat.FULL_ISO.format_local(-NANOS)
    assert just_before[:19] == whole_second_before[:19]
    assert just_before[:19] != TimeFormat.FULL_ISO.format_local(0)[:19]


def test_old_iso_date_is_date_part_of_long_iso():
    stamp = 86_400 * NANOS * 400
    assert TimeFormat.ISO_FORMAT.format_local(stamp) == TimeFormat.LONG_ISO.format_local(stamp)[:10]


def test_recent_iso_date_has_time_without_year():
    stamp = _now_ns()
    expected = datetime.fromtimestamp(stamp // NANOS, timezone.utc).strftime("%m-%d %H:%M")
    result = TimeFormat.ISO_FORMAT.format_local(stamp)
    assert result == expected
    assert result == TimeFormat.LONG_ISO.format_local(stamp)[5:]


def test_default_format_old_date_ends_with_year():
    result = TimeFormat.DEFAULT_FORMAT.format_local(0)
    assert result.endswith(" 1970")
    assert result.startswith(" 1 ")


def test_default_format_recent_date_ends_with_time():
    stamp = _now_ns()
    result = TimeFormat.DEFAULT_FORMAT.format_local(stamp)
    expected_time = datetime.fromtimestamp(stamp // NANOS, timezone.utc).strftime(" %H:%M")
    assert result.endswith(expected_time)
    assert str(datetime.now(timezone.utc).year) not in result


def test_zoned_utc_matches_local_plus_offset():
    stamp = 1_234_567_890 * NANOS + 42
    local = TimeFormat.FULL_ISO.format_local(stamp)
    zoned = TimeFormat.FULL_ISO.format_zoned(stamp, timezone.utc)
    assert zoned.startswith(local + " ")
    assert len(zoned) == len(local) + 6


@pytest.mark.parametrize("fmt", [TimeFormat.LONG_ISO, TimeFormat.ISO_FORMAT, TimeFormat.DEFAULT_FORMAT])
def test_zoned_utc_matches_local_for_other_formats(fmt):
    stamp = 1_234_567_890 * NANOS
    assert fmt.format_zoned(stamp, timezone.utc) == fmt.format_local(stamp)


def test_zone_shifts_the_hour():
    zone = timezone(timedelta(hours=-3))
    stamp = 12 * 3600 * NANOS
    shifted = TimeFormat.LONG_ISO.format_zoned(stamp, zone)
    assert shifted == TimeFormat.LONG_ISO.format_local(9 * 3600 * NANOS)


def test_missing_absolute_zone_file(monkeypatch, tmp_path):
    monkeypatch.setenv("TZ", str(tmp_path / "missing-zone"))
    with pytest.raises(FileNotFoundError):
        determine_time_zone()


def test_missing_named_zone(monkeypatch):
    monkeypatch.setenv("TZ", ":No_Such_Region/No_Such_City")
    with pytest.raises(FileNotFoundError):
        determine_time_zone()


def test_invalid_zone_file(monkeypatch, tmp_path):
    bogus = tmp_path / "bogus"
    bogus.write_bytes(b"this is not a zone file")
    monkeypatch.setenv("TZ", str(bogus))
    with pytest.raises(ValueError):
        determine_time_zone()