from philo.cli import main


def test_wrong_argument_count(capsys):
    assert main(["1", "2"]) == 1
    assert capsys.readouterr().err == "Invalid args\n"


def test_non_digit_argument(capsys):
    assert main(["5", "800", "-200", "200"]) == 1
    assert capsys.readouterr().err == "Invalid args\n"


def test_zero_meals_rejected(capsys):
    assert main(["5", "800", "200", "200", "0"]) == 1
    assert capsys.readouterr().err == "They can't eat 0 times\n"


def test_single_philosopher_dies(capsys):
    assert main(["1", "100", "20", "20"]) == 0
    captured = capsys.readouterr()
    assert captured.out.endswith("Philo 1 died.\n")
    assert captured.err == ""


def test_everyone_fed(capsys):
    assert main(["2", "1000", "10", "10", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "Each philosopher ate 1 time(s)"
    assert not any(line.endswith("died.") for line in lines)