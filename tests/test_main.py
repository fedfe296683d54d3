import logging

import pytest

from flagscan import const, main


@pytest.fixture(autouse=True)
def _env(monkeypatch, tmp_path):
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv(const.EXTRA_ARGS_ENV, raising=False)
    monkeypatch.setattr(const, "GLOBAL_LOG_FILE", str(tmp_path / "logs" / "flagscan.log"))

    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def _logFile() -> str:
    with open(const.GLOBAL_LOG_FILE) as f:
        return f.read()


def test_main_dump(capsys):
    assert main(["build", "-v", "--jobs", "4", "--force"]) == 0
    out = capsys.readouterr().out
    assert "0: build" in out
    assert "    -v\n" in out
    assert "    --force\n" in out
    assert "--jobs = 4" in out


def test_main_help(capsys):
    assert main(["-h"]) == 0
    out = capsys.readouterr().out
    assert out.startswith(f"Usage: {const.ARGV0}")


def test_main_version(capsys):
    assert main(["--version"]) == 0
    out = capsys.readouterr().out
    assert out == f"flagscan v{const.VERSION_STR}\n"


def test_main_expect_int(capsys):
    assert main(["--port", "80", "-p", "8080", "--expect-int", "p"]) == 0
    out = capsys.readouterr().out
    assert "Integers" in out
    assert "p = 8080" in out


def test_main_expect_int_missing(capsys):
    assert main(["--expect-int", "port"]) == 0
    err = capsys.readouterr().err
    assert "Warning:" in err
    assert "port" in err


def test_main_expect_int_invalid(capsys):
    assert main(["--port", "http", "--expect-int", "port"]) == 1
    err = capsys.readouterr().err
    assert "Error:" in err
    assert "'--port'" in err
    assert "Traceback" not in err

    log = _logFile()
    assert "Traceback" in log
    assert "CoercionError" in log


def test_main_verbose(capsys):
    assert main(["a", "-b", "c", "--verbose"]) == 0
    err = capsys.readouterr().err
    assert "DEBUG flagscan.args: Parsed 4 tokens into 1 positional, 1 options and 1 pairs" in err


def test_main_quiet_keeps_stderr_clean(capsys):
    assert main(["a", "-b", "c"]) == 0
    assert capsys.readouterr().err == ""
    assert "DEBUG" not in _logFile()


def test_main_require_positional(capsys):
    assert main(["--require-positional"]) == 1
    err = capsys.readouterr().err
    assert "No positional argument" in err

    assert main(["foo", "--require-positional"]) == 0


def test_main_extra_args(capsys, monkeypatch):
    monkeypatch.setenv(const.EXTRA_ARGS_ENV, "--name foo")
    assert main(["bar"]) == 0
    out = capsys.readouterr().out
    assert "--name = foo" in out
    assert "0: bar" in out
