from philosophers.cli import main


def test_wrong_argument_count(capsys):
    assert main(["1", "2"]) == 1
    assert capsys.readouterr().err == "Enter 4 or 5 arguments\n"


def test_invalid_argument(capsys):
    assert main(["5", "x", "1", "1"]) == 1
    assert capsys.readouterr().err == "Enter valid argument\n"


def test_zero_meals_fails_silently(capsys):
    assert main(["2", "800", "100", "100", "0"]) == 1
    captured = capsys.readouterr()
    assert captured.err == ""
    assert captured.out == ""


def test_lonely_philosopher_run(capsys):
    assert main(["1", "150", "50", "50"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1].endswith(" 0 died")
    assert lines[0].endswith(" 0 has taken a fork")