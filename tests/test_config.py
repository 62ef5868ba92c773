import dataclasses
import os
import time

import pytest

from statusbar.config import DESKTOP_ARGS, Arg, Config, default_config
from statusbar.util import StatusError


def test_default_config_values():
    config = default_config()
    assert config.interval == 1000
    assert config.unknown_str == "n/a"
    assert config.maxlen == 2048
    assert config.args == (Arg("datetime", "%s", "%F %T"),)


def test_functions_cover_configured_names():
    names = default_config().functions()
    for arg in default_config().args + DESKTOP_ARGS:
        assert arg.func in names


def test_datetime_component_uses_argument():
    func = default_config().functions()["datetime"]
    assert func("%Y") == time.strftime("%Y")


def test_argument_ignored_for_plain_components():
    func = default_config().functions()["gid"]
    assert func("NULL") == str(os.getgid())
    assert func(None) == str(os.getgid())


def test_num_files_component(tmp_path):
    (tmp_path / "a").write_text("")
    (tmp_path / "b").write_text("")
    func = Config().functions()["num_files"]
    assert func(str(tmp_path)) == "2"


def test_cpu_state_is_fresh_per_call():
    func = Config().functions()["cpu_perc"]
    with pytest.raises(StatusError):
        func(None)


def test_arg_is_immutable():
    arg = Arg("uid", "%s")
    with pytest.raises(dataclasses.FrozenInstanceError):
        arg.fmt = "x"
    assert arg.fmt == "%s"
    assert arg.func == "uid"


@pytest.mark.parametrize("field", ["interval", "maxlen"])
def test_config_rejects_nonpositive(field):
    with pytest.raises(ValueError):
        Config(**{field: 0})