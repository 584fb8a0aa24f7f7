import pytest

from dining.parsing import (
    PH_MAX,
    ArgumentError,
    Config,
    is_numeric,
    parse_arguments,
    parse_long,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  \t-17", -17),
        ("+8", 8),
        ("12abc", 12),
        ("2147483647", 2147483647),
        ("9223372036854775807", 9223372036854775807),
    ],
)
def test_parse_long_reads_leading_number(text, expected):
    assert parse_long(text) == expected


def test_parse_long_without_digits_is_zero():
    assert parse_long("abc") == 0
    assert parse_long("") == 0
    assert parse_long("-") == 0


def test_parse_long_overflow():
    assert parse_long("99999999999999999999") == -1
    assert parse_long("-99999999999999999999") == 0


@pytest.mark.parametrize("text", ["5", "+5", "  5  ", "007", " +123 "])
def test_is_numeric_accepts(text):
    assert is_numeric(text) is True


@pytest.mark.parametrize(
    "text", ["", None, "-5", "5a", "a5", "+", "   ", "\t5", "5 5", "++5"]
)
def test_is_numeric_rejects(text):
    assert is_numeric(text) is False


def test_parse_arguments_four():
    config = parse_arguments(["5", "800", "200", "200"])
    assert config == Config(5, 800, 200, 200, None)


def test_parse_arguments_with_meals():
    config = parse_arguments(["4", "410", "200", "100", "7"])
    assert config.meals_required == 7
    assert config.philosophers == 4


def test_parse_arguments_zero_meals_allowed():
    assert parse_arguments(["2", "10", "10", "10", "0"]).meals_required == 0


def test_parse_arguments_padded_values():
    config = parse_arguments([" +3 ", "100", "50", "50"])
    assert config.philosophers == 3


def test_philosopher_limit():
    assert parse_arguments([str(PH_MAX), "1", "1", "1"]).philosophers == PH_MAX
    with pytest.raises(ArgumentError, match="philos number"):
        parse_arguments([str(PH_MAX + 1), "1", "1", "1"])


@pytest.mark.parametrize(
    "args, fragment",
    [
        (["0", "800", "200", "200"], "philos number"),
        (["-3", "800", "200", "200"], "philos number"),
        (["x", "800", "200", "200"], "philos number"),
        (["5", "0", "200", "200"], "time to die"),
        (["5", "80a", "200", "200"], "time to die"),
        (["5", "2147483648", "200", "200"], "time to die"),
        (["5", "800", "-1", "200"], "time to eat"),
        (["5", "800", "200", ""], "time to sleep"),
        (["5", "800", "200", "200", "-1"], "meals count"),
        (["5", "800", "200", "200", "two"], "meals count"),
    ],
)
def test_parse_arguments_errors(args, fragment):
    with pytest.raises(ArgumentError, match=fragment):
        parse_arguments(args)


def test_int_max_accepted():
    config = parse_arguments(["1", "2147483647", "2147483647", "2147483647"])
    assert config.time_to_die == 2147483647


@pytest.mark.parametrize("args", [[], ["5", "800", "200"], ["1"] * 6])
def test_parse_arguments_wrong_count(args):
    with pytest.raises(ArgumentError, match="Input Error!"):
        parse_arguments(args)


def test_argument_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["0", "1", "1", "1"])