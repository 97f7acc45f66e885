import pytest

from philo.parsing import Args, ArgumentError, parse_args, parse_number


def test_parse_number_plain():
    assert parse_number("800") == 800


def test_parse_number_leading_zeros():
    assert parse_number("0042") == 42


def test_parse_number_empty_is_zero():
    assert parse_number("") == 0


def test_parse_number_wraps_at_32_bits():
    assert parse_number(str(2**32 + 7)) == 7


@pytest.mark.parametrize("text", ["-5", "+5", "12a", " 3", "1.5", "٣"])
def test_parse_number_rejects_non_digits(text):
    with pytest.raises(ArgumentError):
        parse_number(text)


def test_parse_args_four_arguments():
    args = parse_args(["5", "800", "200", "200"])
    assert args == Args(5, 800, 200, 200, None)
    assert args.must_eat is None


def test_parse_args_five_arguments():
    args = parse_args(["4", "410", "200", "100", "7"])
    assert args == Args(4, 410, 200, 100, 7)


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["5"],
        ["5", "800", "200"],
        ["5", "800", "200", "200", "7", "1"],
    ],
)
def test_parse_args_wrong_count(argv):
    with pytest.raises(ArgumentError, match="Invalid args"):
        parse_args(argv)


@pytest.mark.parametrize(
    "argv",
    [
        ["0", "800", "200", "200"],
        ["5", "0", "200", "200"],
        ["5", "800", "0", "200"],
        ["5", "800", "200", "0"],
        ["", "800", "200", "200"],
    ],
)
def test_parse_args_zero_values(argv):
    with pytest.raises(ArgumentError, match="Invalid args"):
        parse_args(argv)


def test_parse_args_negative_rejected():
    with pytest.raises(ArgumentError, match="Invalid args"):
        parse_args(["5", "-800", "200", "200"])


def test_parse_args_zero_meals():
    with pytest.raises(ArgumentError, match="They can't eat 0 times"):
        parse_args(["5", "800", "200", "200", "0"])


def test_parse_args_zero_meals_checked_before_other_values():
    with pytest.raises(ArgumentError, match="They can't eat 0 times"):
        parse_args(["0", "800", "200", "200", "0"])


def test_args_is_immutable():
    args = parse_args(["2", "100", "50", "50"])
    with pytest.raises(AttributeError):
        args.num_philos = 3
    assert args.num_philos == 2