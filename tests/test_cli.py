# tests/test_cli.py

from jalaali import cli


def test_convert(capsys):
    assert cli.main(["convert", "1402/08/05"]) == 0
    assert capsys.readouterr().out.strip() == "2023-10-27"


def test_convert_shorthand(capsys):
    assert cli.main(["1400/01/01"]) == 0
    assert capsys.readouterr().out.strip() == "2021-03-21"


def test_convert_invalid(capsys):
    assert cli.main(["convert", "1402/12/30"]) == 1
    assert "Invalid Jalaali date" in capsys.readouterr().err


def test_to_jalaali(capsys):
    assert cli.main(["to-jalaali", "2023-10-27"]) == 0
    assert capsys.readouterr().out.strip() == "1402/08/05"


def test_to_jalaali_names(capsys):
    assert cli.main(["to-jalaali", "2023-10-27", "--format", "D MMMM YYYY", "--locale", "en"]) == 0
    assert capsys.readouterr().out.strip() == "5 Aban 1402"


def test_today(capsys):
    assert cli.main(["today"]) == 0
    out = capsys.readouterr().out
    assert "Gregorian:" in out and "Jalaali:" in out


def test_month_grid(capsys):
    assert cli.main(["month", "1402", "8"]) == 0
    out = capsys.readouterr().out
    assert "Aban 1402" in out
    assert "10-27" in out


def test_diag_leap_years(capsys):
    assert cli.main(["diag", "leap-years", "--from-year", "1399", "--to-year", "1408"]) == 0
    out = capsys.readouterr().out
    assert " 1403" in out and " 1408" in out
    assert "2024-03-20" in out
    assert " 1404" not in out


def test_diag_round_trip(capsys):
    assert cli.main(["diag", "round-trip", "--N", "300"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out


def test_diag_leap_years_out_of_range(capsys):
    assert cli.main(["diag", "leap-years", "--from-year", "3170", "--to-year", "3180"]) == 1
    captured = capsys.readouterr()
    assert "Invalid Jalaali year 3178" in captured.err
    assert "Nowruz" not in captured.out


def test_diag_round_trip_out_of_range(capsys):
    assert cli.main(["diag", "round-trip", "--N", "5", "--start", "9000-01-01", "--end", "9000-12-31"]) == 1
    assert "Invalid Jalaali year" in capsys.readouterr().err


def test_month_out_of_range(capsys):
    assert cli.main(["month", "3178", "1"]) == 1
    assert "Invalid Jalaali year 3178" in capsys.readouterr().err
