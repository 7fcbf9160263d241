import pytest

from dhcrack.main import main, parse_and_solve
from mock_dh import make_challenge


def test_cli_cracks_public_key(capsys):
    assert main(["2fcdd27bf0dfe780"]) == 0
    out, _ = capsys.readouterr()
    assert out.strip() == "cbed2a7d9585b611"


def test_cli_exchange(capsys):
    assert main(["--exchange", "cbed2a7d9585b611"]) == 0
    out, _ = capsys.readouterr()
    assert out.strip() == "2fcdd27bf0dfe780"


def test_cli_usage_error_exits_1(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 1
    with pytest.raises(SystemExit) as excinfo:
        main(["2fcdd27bf0dfe780", "extra"])
    assert excinfo.value.code == 1


@pytest.mark.parametrize("arg,message", [
    ("2fcdd27b", "exactly 16 hex characters"),
    ("zzzzzzzzzzzzzzzz", "invalid hex string"),
    ("0000000000000000", "value cannot be zero"),
])
def test_cli_rejects_bad_keys(capsys, arg, message):
    assert main([arg]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert message in err


def test_cli_reports_dlog_failure(capsys):
    # 2^64 - 1 is above the modulus, so no exponent verifies
    assert main(["ffffffffffffffff"]) == 1
    _, err = capsys.readouterr()
    assert "failed to compute discrete logarithm" in err


def test_parse_and_solve():
    assert parse_and_solve(make_challenge()) == 6689
    assert parse_and_solve(make_challenge(p=1009, g=11, x=500)) == 500
    assert parse_and_solve("g = 6\nh = 7531\n") is None


def test_cli_file(tmp_path, capsys):
    path = tmp_path / "challenge.txt"
    path.write_text(make_challenge())
    assert main(["--file", str(path)]) == 0
    out, _ = capsys.readouterr()
    assert out.strip() == "6689"


def test_cli_file_missing(tmp_path, capsys):
    assert main(["--file", str(tmp_path / "nope.txt")]) == 1
    _, err = capsys.readouterr()
    assert err.startswith("Error:")


def test_cli_file_invalid_group(tmp_path, capsys):
    path = tmp_path / "challenge.txt"
    path.write_text("p = 1\ng = 1\nh = 1\n")
    assert main(["--file", str(path)]) == 1
    _, err = capsys.readouterr()
    assert "modulus must be at least 2" in err
