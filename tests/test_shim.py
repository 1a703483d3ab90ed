import os

from sdkswitch.shim import Shim


def _binary(tmp_path, name="java"):
    bin_dir = tmp_path / "sdk" / "bin"
    bin_dir.mkdir(parents=True)
    binary = bin_dir / name
    binary.write_text("#!/bin/sh\n")
    return str(binary)


def test_generate_creates_link(tmp_path):
    binary = _binary(tmp_path)
    shims = tmp_path / "shims"
    shims.mkdir()
    shim = Shim(binary, str(shims))
    shim.generate()
    target = os.path.join(str(shims), os.path.basename(binary))
    assert os.path.islink(target)
    assert os.readlink(target) == binary


def test_generate_twice_replaces_link(tmp_path):
    binary = _binary(tmp_path)
    shims = tmp_path / "shims"
    shims.mkdir()
    other = tmp_path / "other"
    other.write_text("x")
    os.symlink(str(other), str(shims / "java"))
    Shim(binary, str(shims)).generate()
    Shim(binary, str(shims)).generate()
    assert os.readlink(str(shims / "java")) == binary


def test_clear_removes_link(tmp_path):
    binary = _binary(tmp_path)
    shims = tmp_path / "shims"
    shims.mkdir()
    shim = Shim(binary, str(shims))
    shim.generate()
    assert os.listdir(str(shims)) == ["java"]
    shim.clear()
    assert os.listdir(str(shims)) == []
    with open(binary, encoding="utf-8") as handle:
        assert handle.read() == "#!/bin/sh\n"


def test_clear_without_shim_does_nothing(tmp_path):
    shims = tmp_path / "shims"
    shims.mkdir()
    Shim(str(tmp_path / "bin" / "java"), str(shims)).clear()
    assert list(shims.iterdir()) == []


def test_clear_removes_dangling_link(tmp_path):
    shims = tmp_path / "shims"
    shims.mkdir()
    os.symlink(str(tmp_path / "gone"), str(shims / "java"))
    Shim(str(tmp_path / "gone"), str(shims)).clear()
    assert not os.path.lexists(str(shims / "java"))


def test_clear_removes_regular_file(tmp_path):
    shims = tmp_path / "shims"
    shims.mkdir()
    (shims / "java").write_text("stale")
    Shim(str(tmp_path / "java"), str(shims)).clear()
    assert not (shims / "java").exists()