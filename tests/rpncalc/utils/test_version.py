#! /usr/bin/env py.test

from pathlib import Path

import toml

from rpncalc.utils import _version

root_dir = Path(__file__).resolve().parent.parent.parent.parent


def test_version_matches_pyproject():
    pyproject = toml.load(str(root_dir / "pyproject.toml"))
    assert _version.version == pyproject["project"]["version"]


def test_version_info():
    assert _version.__version_info__ == tuple(int(x) for x in _version.version.split("."))


def test_pyproject_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "rpncalc"\nversion = "9.8.7"\n', encoding="utf-8")
    monkeypatch.setenv("RPNCALC_PYPROJECT_TOML", str(path))
    assert _version.get_version() == "9.8.7"


def test_foreign_pyproject_ignored(tmp_path, monkeypatch):
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "other"\nversion = "1.2.3"\n', encoding="utf-8")
    monkeypatch.setenv("RPNCALC_PYPROJECT_TOML", str(path))
    assert _version.get_version_from_pyproject() is None


def test_package_version():
    import rpncalc

    assert rpncalc.__version__ == _version.version
