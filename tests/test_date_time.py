import pytest

from bbbs.date_time import DateTime, DateTimeError


@pytest.mark.parametrize(
    ("millis", "expected"),
    [
        (0, "1970-01-01T00:00:00.000Z"),
        (1, "1970-01-01T00:00:00.001Z"),
        (1_000, "1970-01-01T00:00:01.000Z"),
        (86_400_000, "1970-01-02T00:00:00.000Z"),
    ],
)
def test_from_unix_timestamp_millis(millis, expected):
    assert str(DateTime.from_unix_timestamp_millis(millis)) == expected


def test_now():
    now = DateTime.now()
    assert now.to_unix_timestamp_millis() >= 0


def test_to_unix_timestamp_millis():
    date_time = DateTime.from_unix_timestamp_millis(1_000)
    assert date_time.to_unix_timestamp_millis() == 1_000


def test_int_conversion():
    date_time = DateTime.from_unix_timestamp_millis(1_000)
    assert int(date_time) == 1_000


def test_display():
    date_time = DateTime.from_unix_timestamp_millis(1_000)
    assert str(date_time) == "1970-01-01T00:00:01.000Z"


def test_display_before_epoch():
    assert str(DateTime.from_unix_timestamp_millis(-1)) == "1969-12-31T23:59:59.999Z"


def test_parse():
    date_time = DateTime.parse("1970-01-01T00:00:02.003Z")
    assert date_time.to_unix_timestamp_millis() == 2_003
    assert (
        str(DateTime.parse("1970-01-01T00:00:02.003+09:00"))
        == "1969-12-31T15:00:02.003Z"
    )


def test_parse_without_fraction():
    assert DateTime.parse("1970-01-01T00:00:01Z").to_unix_timestamp_millis() == 1_000


def test_parse_trailing_zero_digits_allowed():
    assert DateTime.parse("1970-01-01T00:00:02.003000Z").to_unix_timestamp_millis() == 2_003


def test_parse_negative_offset():
    assert str(DateTime.parse("1970-01-01T00:00:00.000-05:30")) == "1970-01-01T05:30:00.000Z"


@pytest.mark.parametrize(
    "text",
    [
        "invalid",
        "1970-01-01T00:00:02.003004Z",
        "1970-13-01T00:00:00Z",
        "1970-01-01T24:00:00Z",
        "1970-01-01T00:00:00",
    ],
)
def test_parse_errors(text):
    with pytest.raises(DateTimeError):
        DateTime.parse(text)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError, match="date time error"):
        DateTime.parse("invalid")


def test_round_trip():
    date_time = DateTime.from_unix_timestamp_millis(1_717_171_717_123)
    assert DateTime.parse(str(date_time)) == date_time


def test_ordering():
    assert DateTime.from_unix_timestamp_millis(1) < DateTime.from_unix_timestamp_millis(2)
    assert DateTime.from_unix_timestamp_millis(5) == DateTime.from_unix_timestamp_millis(5)