import io

import pytest

from rsdriver.log import LogLevel, colorize, driver_version, log


def test_colorize_error():
    assert colorize(LogLevel.ERROR, "boom") == "\033[1m\033[31mboom\033[0m"


def test_colorize_green_plain():
    assert colorize(LogLevel.INFOL, "ok") == "\033[32mok\033[0m"


@pytest.mark.parametrize("level", list(LogLevel))
def test_colorize_wraps_text(level):
    result = colorize(level, "text")
    assert result.startswith(level.value)
    assert result.endswith("text\033[0m")


def test_log_writes_line_to_stream():
    stream = io.StringIO()
    log(LogLevel.WARNING, "careful", stream)
    assert stream.getvalue() == "\033[1m\033[33mcareful\033[0m\n"


def test_log_defaults_to_stdout(capsys):
    log(LogLevel.MSG, "hello")
    captured = capsys.readouterr()
    assert captured.out == colorize(LogLevel.MSG, "hello") + "\n"


def test_log_appends_lines():
    stream = io.StringIO()
    log(LogLevel.DEBUG, "a", stream)
    log(LogLevel.TITLE, "b", stream)
    lines = stream.getvalue().splitlines()
    assert lines == [colorize(LogLevel.DEBUG, "a"), colorize(LogLevel.TITLE, "b")]


def test_driver_version():
    assert driver_version() == "1.5.3"