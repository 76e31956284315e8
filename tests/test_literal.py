from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import pytest

from enumwords.literal import as_type, ifiable_numeric, ify


@dataclass
class _Record:
    value: str


class _Named:
    def __init__(self, value):
        self.value = value

    def __str__(self):
        return self.value


@pytest.mark.parametrize(
    "value, expected",
    [
        ("hello", '"hello"'),
        (b"hello", '"hello"'),
        (bytearray(b"hello"), '"hello"'),
        (True, "true"),
        (False, "false"),
        (42, "42"),
        (3.14, "3.14"),
        (1000000.0, "1e+06"),
        (timedelta(0), ""),
        (timedelta(hours=-1), "time.Hour * -1"),
        (_Record("test"), "{test}"),
    ],
)
def test_ify(value, expected):
    assert ify(value) == expected


def test_ify_datetime_utc():
    moment = datetime(2023, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
    assert ify(moment) == "2023-01-01T12:00:00Z"


def test_ify_datetime_with_offset():
    moment = datetime(2023, 1, 1, 12, 0, 0, tzinfo=timezone(timedelta(hours=2)))
    assert ify(moment) == "2023-01-01T12:00:00+02:00"


@pytest.mark.parametrize(
    "duration, expected",
    [
        (timedelta(hours=2), "time.Hour * 2"),
        (timedelta(minutes=30), "time.Minute * 30"),
        (timedelta(seconds=45), "time.Second * 45"),
        (timedelta(minutes=90), "time.Minute * 90"),
        (timedelta(seconds=1.5), "time.Second * 1.5"),
        (timedelta(milliseconds=500), "time.Second * 0.5"),
    ],
)
def test_ify_duration(duration, expected):
    assert ify(duration) == expected


def test_ify_object_with_str():
    assert ify(_Named("test")) == '"test"'


@pytest.mark.parametrize(
    "number, expected",
    [
        (42, "42"),
        (3.14, "3.14"),
        (1e7, "1.00e+07"),
        (1e-7, "1.00e-07"),
        (0, "0"),
        (-42.5, "-42.5"),
        (100.0, "100"),
    ],
)
def test_ifiable_numeric(number, expected):
    assert ifiable_numeric(number) == expected


def test_ifiable_numeric_large_uses_exponent():
    assert "e" in ifiable_numeric(1e7)


def test_ifiable_numeric_rejects_non_numbers():
    with pytest.raises(TypeError):
        ifiable_numeric("42")


@pytest.mark.parametrize(
    "value, expected",
    [("hello", "string"), (42, "int"), (True, "bool"), (1.5, "float64")],
)
def test_as_type(value, expected):
    assert as_type(value) == expected