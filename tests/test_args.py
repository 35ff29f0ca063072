import pytest

from philo.args import (
    ArgumentCountError,
    ArgumentError,
    ArgumentFormatError,
    ArgumentValueError,
    Config,
    check_input,
    is_digit,
    is_space,
    is_valid_format,
    parse_config,
    parse_long,
)


@pytest.mark.parametrize("char", [" ", "\t", "\n", "\v", "\f", "\r"])
def test_is_space_accepts_whitespace(char):
    assert is_space(char) is True


@pytest.mark.parametrize("char", ["a", "0", "+", "\b", "\x0e"])
def test_is_space_rejects_others(char):
    assert is_space(char) is False


def test_is_digit():
    assert all(is_digit(c) for c in "0123456789")
    assert not any(is_digit(c) for c in "a/:+- ")


@pytest.mark.parametrize(
    "text", ["5", "+5", "  42  ", "\t800\n", "0", "1234567890", "+0000000001"]
)
def test_valid_formats(text):
    assert is_valid_format(text) is True


@pytest.mark.parametrize(
    "text", ["", " ", "+", "-5", "5a", "12 3", "12345678901", "++5", "3.5", "abc"]
)
def test_invalid_formats(text):
    assert is_valid_format(text) is False


def test_check_input_raises_on_bad_arg():
    with pytest.raises(ArgumentFormatError):
        check_input(["5", "800", "x", "200"])


def test_check_input_accepts_good_args():
    assert check_input(["5", "800", "200", "200"]) is None


@pytest.mark.parametrize("text", ["42", "  +42", "42abc", "\n42 "])
def test_parse_long_reads_leading_number(text):
    assert parse_long(text) == 42


def test_parse_long_limits():
    assert parse_long("2147483647") == 2147483647
    assert parse_long("2147483648") == -1
    assert parse_long("9999999999") == -1


def test_parse_long_without_digits_is_zero():
    assert parse_long("-5") == 0
    assert parse_long("") == 0


def test_parse_config_four_args():
    config = parse_config(["5", "800", "200", "200"])
    assert config == Config(5, 800, 200, 200)
    assert config.limit_meals is False
    assert config.meals_to_have is None


def test_parse_config_five_args():
    config = parse_config(["4", "410", "200", "200", "7"])
    assert config.limit_meals is True
    assert config.meals_to_have == 7
    assert config.num_of_philos == 4


@pytest.mark.parametrize("args", [[], ["1", "2", "3"], ["1"] * 6])
def test_parse_config_wrong_count(args):
    with pytest.raises(ArgumentCountError):
        parse_config(args)


def test_parse_config_bad_format():
    with pytest.raises(ArgumentFormatError):
        parse_config(["5", "-800", "200", "200"])


@pytest.mark.parametrize(
    "args",
    [
        ["0", "800", "200", "200"],
        ["201", "800", "200", "200"],
        ["5", "59", "200", "200"],
        ["5", "800", "59", "200"],
        ["5", "800", "200", "59"],
        ["5", "800", "200", "200", "0"],
        ["2147483648", "800", "200", "200"],
    ],
)
def test_parse_config_bad_values(args):
    with pytest.raises(ArgumentValueError):
        parse_config(args)


def test_boundary_values_accepted():
    config = parse_config(["200", "60", "60", "60", "1"])
    assert config == Config(200, 60, 60, 60, 1)


def test_error_messages_and_hierarchy():
    assert str(ArgumentCountError()) == "Invalid number of args"
    assert str(ArgumentFormatError()) == "Args provided is invalid"
    assert str(ArgumentValueError()) == "Args provided has invalid values"
    for cls in (ArgumentCountError, ArgumentFormatError, ArgumentValueError):
        assert issubclass(cls, ArgumentError)


def test_validate_directly():
    with pytest.raises(ArgumentValueError):
        Config(1, 800, 200, 200, 0).validate()
    assert Config(1, 800, 200, 200).validate() is None