"""命令行入口测试"""

import io

from config.config import validate_config
from main import build_parser, main


def _run(argv, stdin=None):
    return main(build_parser().parse_args(argv), stdin=stdin)


def test_evaluates_arguments(capsys):
    assert _run(["1 + 2", "2 * 3"]) == 0
    assert capsys.readouterr().out == "3\n6\n"


def test_error_sets_exit_status(capsys):
    assert _run(["3 @ 4"]) == 1
    assert capsys.readouterr().out == "Error: Unrecognized characters in expression at index 2\n"


def test_reads_stdin_when_no_arguments(capsys):
    assert _run([], stdin=io.StringIO("1+1\n\n2*3\n")) == 0
    assert capsys.readouterr().out == "2\n6\n"


def test_examples_and_rpn(capsys):
    assert _run(["--use_examples", "--show_rpn", "2^10"]) == 0
    assert capsys.readouterr().out == "RPN: 2 10 ^\n1024\n"


def test_extension_error_is_reported(capsys):
    assert _run(["--use_examples", "max(+)"]) == 1
    assert capsys.readouterr().out == "Error: max() requires at least one argument\n"


def test_numeric_mode(capsys):
    assert _run(["--numeric", "1 < 2"]) == 1
    assert capsys.readouterr().out == "nan\n"


def test_config_is_valid():
    assert validate_config() is True
