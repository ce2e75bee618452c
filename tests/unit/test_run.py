import pytest

import run


def test_to_value(capsys):
    assert run.main(["to-value", "12345000"]) == 0
    assert capsys.readouterr().out.strip() == "0.12345"


def test_to_value_with_precision(capsys):
    assert run.main(["satoshis-to-value", "123450000000000", "--precision", "18"]) == 0
    assert capsys.readouterr().out.strip() == "0.00012345"


def test_to_smallest_unit(capsys):
    assert run.main(["to-smallest-unit", "0.12345"]) == 0
    assert capsys.readouterr().out.strip() == "12345000"


def test_convert_rounds_on_narrowing(capsys):
    assert run.main(["convert", "123459995000000000", "--from", "18", "--to", "8"]) == 0
    assert capsys.readouterr().out.strip() == "12346000"


def test_decode(capsys):
    assert run.main(["decode", '{"value": "1234567", "precision": 6}']) == 0
    assert capsys.readouterr().out.strip() == "1.234567"


@pytest.mark.parametrize(
    "argv",
    [
        ["to-value", "12.5"],
        ["decode", "foo"],
        ["convert", "1", "--from", "8", "--to", "99"],
    ],
)
def test_domain_errors_exit_with_one(argv, capsys):
    assert run.main(argv) == 1
    assert capsys.readouterr().out == ""


def test_command_is_required():
    with pytest.raises(SystemExit):
        run.main([])
