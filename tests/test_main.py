"""
Tests for the command line entry point.
"""

import io
import logging

import pytest

from vectorcalc.controller.calculator import CROSS_DIMENSION_ERROR_MESSAGE, Operation
from vectorcalc.main import CLI_OPERATIONS, build_parser, main


class TestCalcCommand:
    """Tests for `vectorcalc calc`."""

    def test_dot(self, capsys):
        assert main(["calc", "dot", "(1; 2; 3)", "(4; 5)"]) == 0
        assert capsys.readouterr().out.strip() == "A . B = 14.0"

    def test_scale(self, capsys):
        assert main(["calc", "scale", "(1; 2)", "(3; 4)"]) == 0
        assert capsys.readouterr().out.strip() == "A * B = (3.0; 8.0)"

    def test_single_operand(self, capsys):
        assert main(["calc", "length-a", "(3; 4)"]) == 0
        assert capsys.readouterr().out.strip() == "|A| = 5.0"

    def test_error_exit_code(self, capsys):
        assert main(["calc", "cross", "(1; 0)", "(0; 1)"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert CROSS_DIMENSION_ERROR_MESSAGE in captured.err

    def test_max_components_option(self, capsys):
        assert main(["--max-components", "2", "calc", "length-a", "(1; 2; 3)"]) == 1
        assert main(["--max-components", "0", "calc", "length-a", "(1; 2; 2)"]) == 0
        assert "|A| = 3.0" in capsys.readouterr().out

    def test_unknown_operation_rejected(self):
        with pytest.raises(SystemExit):
            main(["calc", "divide", "(1)", "(2)"])

    def test_log_file(self, tmp_path, capsys):
        log_file = tmp_path / "calc.log"
        main(["--log-level", "DEBUG", "--log-file", str(log_file), "calc", "sum", "(1)", "(2)"])
        for handler in logging.getLogger("vectorcalc").handlers:
            handler.close()
        assert "SUM -> A + B = (3.0)" in log_file.read_text(encoding="utf-8")


class TestInteractiveCommand:
    def test_interactive(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("(1; 1)\n(1; -1)\nj\nk\n"))
        assert main(["interactive"]) == 0
        assert "Angle between A and B = " in capsys.readouterr().out


def test_every_operation_has_cli_name():
    assert set(CLI_OPERATIONS.values()) == set(Operation)


def test_default_command_is_gui():
    args = build_parser().parse_args([])
    assert args.command is None
