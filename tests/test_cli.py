import errno
import io
import os
import signal

import pytest

from statusbar.cli import main, parse_args, render_status, run
from statusbar.config import Arg, Config
from statusbar.util import StatusError


class StopAfterWrite(io.StringIO):
    def write(self, text):
        written = super().write(text)
        signal.raise_signal(signal.SIGTERM)
        return written


class BrokenOut:
    def write(self, text):
        raise OSError(errno.EPIPE, "Broken pipe")

    def flush(self):
        pass


def failing(_arg):
    raise StatusError("missing")


@pytest.mark.parametrize(
    "argv, expected",
    [([], False), (["-s"], True), (["-ss"], True), (["--"], False), (["-s", "--"], True)],
)
def test_parse_args_accepts(argv, expected):
    assert parse_args(argv) is expected


@pytest.mark.parametrize("argv", [["-x"], ["foo"], ["-"], ["--", "x"], ["-sx"], ["-s", "y"]])
def test_parse_args_rejects(argv):
    with pytest.raises(ValueError, match="usage"):
        parse_args(argv)


def test_render_status_formats_values():
    config = Config(args=(Arg("a", "[%s]", "x"), Arg("b", " %s%%", None)))
    functions = {"a": lambda arg: arg, "b": lambda _arg: "42"}
    assert render_status(config, functions) == "[x] 42%"


def test_render_status_uses_unknown_str():
    config = Config(args=(Arg("a", "<%s>"),), unknown_str="??")
    assert render_status(config, {"a": failing}) == "<??>"


def test_render_status_limit_is_exclusive():
    config = Config(args=(Arg("a", "%s", "abcd"),), maxlen=5)
    assert render_status(config, {"a": lambda arg: arg}) == "abcd"
    longer = Config(args=(Arg("a", "%s", "abcde"),), maxlen=5)
    assert render_status(longer, {"a": lambda arg: arg}) == ""


def test_render_status_stops_at_overflow():
    config = Config(args=(Arg("a", "%s", "xyz"), Arg("a", "%s", "xyz")), maxlen=5)
    assert render_status(config, {"a": lambda arg: arg}) == "xyz"


def test_render_status_unknown_function():
    config = Config(args=(Arg("nope", "%s"),))
    with pytest.raises(ValueError):
        render_status(config, {})


def test_run_prints_until_signalled():
    before = signal.getsignal(signal.SIGTERM)
    out = StopAfterWrite()
    run(Config(args=(Arg("gid", "%s"),), interval=1000), True, out)
    assert out.getvalue() == f"{os.getgid()}\n"
    assert signal.getsignal(signal.SIGTERM) == before


def test_run_without_single_needs_display():
    with pytest.raises(StatusError, match="XOpenDisplay"):
        run(Config(), False, io.StringIO())


def test_run_reports_write_failure():
    before = signal.getsignal(signal.SIGINT)
    with pytest.raises(StatusError, match="puts"):
        run(Config(args=(Arg("uid", "%s"),)), True, BrokenOut())
    assert signal.getsignal(signal.SIGINT) == before


def test_main_usage_error(capsys):
    assert main(["-x"]) == 1
    assert "usage:" in capsys.readouterr().err


def test_main_positional_argument(capsys):
    assert main(["extra"]) == 1
    assert "[-s]" in capsys.readouterr().err


def test_main_without_display(capsys):
    assert main([]) == 1
    assert "XOpenDisplay" in capsys.readouterr().err