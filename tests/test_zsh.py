import pytest

from sdkswitch.shell.base import ActivateConfig
from sdkswitch.shell.bash import BashShell
from sdkswitch.shell.zsh import ZshShell


@pytest.mark.parametrize(
    "envs",
    [{}, {"FOO": None}, {"FOO": "bar baz"}, {"A": "1", "B": None, "C": "it's"}],
)
def test_export_matches_bash(envs):
    assert ZshShell().export(envs) == BashShell().export(envs)


def test_export_unset_uses_unset_keyword():
    assert ZshShell().export({"FOO": None}).startswith("unset ")


def test_export_set_uses_export_keyword():
    out = ZshShell().export({"FOO": "BAR"})
    assert out.startswith("export FOO=")
    assert out.endswith(";")


def test_activate_installs_hooks():
    script = ZshShell().activate(ActivateConfig(self_path="/usr/bin/tool"))
    assert "precmd_functions" in script
    assert "chpwd_functions" in script
    assert "{{.SelfPath}}" in script