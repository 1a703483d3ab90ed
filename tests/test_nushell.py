import json
import os

import pytest

from sdkswitch.shell.base import ActivateConfig
from sdkswitch.shell.nushell import NushellShell

SEP = os.pathsep
PATH_VAR = "Path" if os.name == "nt" else "PATH"
NL = "\r\n" if os.name == "nt" else "\n"


@pytest.mark.parametrize(
    "envs, want",
    [
        ({}, {"envsToSet": {}, "envsToUnset": []}),
        ({"FOO": "bar"}, {"envsToSet": {"FOO": "bar"}, "envsToUnset": []}),
        (
            {"FOO": "bar", "BAZ": "qux"},
            {"envsToSet": {"FOO": "bar", "BAZ": "qux"}, "envsToUnset": []},
        ),
        ({"FOO": None}, {"envsToSet": {}, "envsToUnset": ["FOO"]}),
        (
            {"FOO": "bar", "BAZ": None},
            {"envsToSet": {"FOO": "bar"}, "envsToUnset": ["BAZ"]},
        ),
        ({"FOO": None, "BAZ": None}, {"envsToSet": {}, "envsToUnset": ["FOO", "BAZ"]}),
        (
            {"PATH": "/path1" + SEP + "/path2"},
            {"envsToSet": {PATH_VAR: ["/path1", "/path2"]}, "envsToUnset": []},
        ),
        (
            {"PATH": "/path1" + SEP + "/path2" + SEP + "/path3", "FOO": "bar", "BAZ": None},
            {
                "envsToSet": {PATH_VAR: ["/path1", "/path2", "/path3"], "FOO": "bar"},
                "envsToUnset": ["BAZ"],
            },
        ),
    ],
    ids=[
        "Empty",
        "SingleEnv",
        "MultipleEnvs",
        "UnsetEnv",
        "MixedEnvs",
        "MultipleUnsetEnvs",
        "PathEnv",
        "PathAndOtherEnv",
    ],
)
def test_export(envs, want):
    got = json.loads(NushellShell().export(envs))
    got["envsToUnset"].sort()
    want = {"envsToSet": want["envsToSet"], "envsToUnset": sorted(want["envsToUnset"])}
    assert got == want


def test_export_nil_path_is_empty_list():
    got = json.loads(NushellShell().export({"path": None}))
    assert got == {"envsToSet": {PATH_VAR: []}, "envsToUnset": []}


def test_export_is_compact_json():
    out = NushellShell().export({"FOO": "bar"})
    assert " " not in out
    assert out.startswith('{"envsToSet"')


def test_activate_requires_config_path():
    with pytest.raises(ValueError, match="config path is required"):
        NushellShell().activate(ActivateConfig(self_path="/usr/bin/vfox"))


def test_activate_writes_script(tmp_path):
    script = NushellShell().activate(
        ActivateConfig(self_path="/opt/tool/vfox", args=[str(tmp_path)])
    )
    assert script == (
        "# vfox configuration" + NL + 'source ($nu.default-config-dir | path join "vfox.nu")' + NL
    )
    written = (tmp_path / "vfox.nu").read_bytes().decode("utf-8")
    assert "{{.SelfPath}}" not in written
    assert "^'/opt/tool/vfox' env -s nushell --full" in written
    assert "$env.__VFOX_SHELL = 'nushell'" in written


def test_activate_fails_for_missing_directory(tmp_path):
    missing = tmp_path / "no" / "such"
    with pytest.raises(OSError, match="failed to write file"):
        NushellShell().activate(ActivateConfig(self_path="vfox", args=[str(missing)]))