import importlib.metadata
import logging
import os
from pathlib import Path

import toml

logger = logging.getLogger(__name__)

PACKAGE_NAME = "rpncalc"


def find_pyproject_toml():
    pyproject_env = os.getenv("RPNCALC_PYPROJECT_TOML", "")
    if pyproject_env:
        return Path(pyproject_env).resolve()

    current_dir = Path(__file__).resolve().parent

    # Check until we reach the root folder
    while current_dir != current_dir.parent:
        candidate = current_dir / "pyproject.toml"
        if candidate.exists():
            return candidate

        current_dir = current_dir.parent

    return None


def get_version_from_pyproject():
    pyproject_toml_path = find_pyproject_toml()
    if not pyproject_toml_path:
        return None
    with open(pyproject_toml_path, encoding="utf-8") as file:
        pyproject_data = toml.load(file)
    project = pyproject_data.get("project", {})
    if project.get("name") != PACKAGE_NAME:
        return None
    return project.get("version")


def get_version_from_package(package_name):
    try:
        return importlib.metadata.version(package_name)
    except importlib.metadata.PackageNotFoundError:
        return None


def get_version():
    ver = get_version_from_pyproject() or get_version_from_package(PACKAGE_NAME)
    if not ver:
        logger.warning("could not determine rpncalc version")
        return "0.0.0"
    return ver


version = get_version()
__version_info__ = tuple(int(part) for part in version.split(".") if part.isdigit())
__version__ = version
