import pytest

from philosophers.args import ArgumentError, Settings, parse_number, parse_settings


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("  +7 \t", 7), ("\n100\r", 100), ("2147483647", 2147483647)],
)
def test_parse_number_accepts(text, expected):
    assert parse_number(text) == expected


@pytest.mark.parametrize(
    "text", ["-5", "abc", "12a", "", "0", "+", "+-3", "2147483648", "99999999999x"]
)
def test_parse_number_rejects(text):
    with pytest.raises(ArgumentError) as info:
        parse_number(text)
    assert str(info.value) == "Enter valid argument"


def test_parse_settings_four_arguments():
    assert parse_settings(["5", "800", "200", "200"]) == Settings(5, 800, 200, 200, None)


def test_parse_settings_with_meals():
    settings = parse_settings(["4", "410", "200", "100", "7"])
    assert settings.meals == 7
    assert settings.count == 4


@pytest.mark.parametrize("args", [["1", "2", "3"], ["1", "2", "3", "4", "5", "6"], []])
def test_parse_settings_wrong_count(args):
    with pytest.raises(ArgumentError) as info:
        parse_settings(args)
    assert str(info.value) == "Enter 4 or 5 arguments"


def test_zero_meals_is_silent_error():
    with pytest.raises(ArgumentError) as info:
        parse_settings(["2", "800", "100", "100", "0"])
    assert str(info.value) == ""


def test_overflowing_meals_is_reported():
    with pytest.raises(ArgumentError) as info:
        parse_settings(["2", "800", "100", "100", "3000000000"])
    assert str(info.value) == "Enter valid argument"


def test_invalid_time_is_reported():
    with pytest.raises(ArgumentError) as info:
        parse_settings(["2", "-800", "100", "100"])
    assert str(info.value) == "Enter valid argument"