import pytest

from epg_guide.utils.timezone import DateFormatError, epoch_to_utc, format_xmltv_timestamp


def test_formats_known_epoch():
    assert format_xmltv_timestamp(1700000000) == "20231114221320 +0000"


def test_formats_epoch_zero():
    assert format_xmltv_timestamp(0) == "19700101000000 +0000"


def test_fractional_seconds_truncate():
    assert format_xmltv_timestamp(1700000000.9) == "20231114221320 +0000"


def test_format_is_stable():
    assert format_xmltv_timestamp(1700003600) == format_xmltv_timestamp(1700003600)


def test_field_widths():
    value = format_xmltv_timestamp(946684800)
    assert value == "20000101000000 +0000"
    digits, offset = value.split(" ")
    assert len(digits) == 14
    assert offset == "+0000"


def test_epoch_to_utc_is_timezone_aware():
    assert epoch_to_utc(0).utcoffset().total_seconds() == 0


@pytest.mark.parametrize("value", ["1700000000", None, True, float("nan")])
def test_rejects_non_numeric(value):
    with pytest.raises(DateFormatError):
        format_xmltv_timestamp(value)
