"""SDK packages, their files, and linking them into a location."""

from __future__ import annotations

import itertools
import logging
import os
import shutil
from dataclasses import dataclass, field, replace
from typing import Any

from sdkswitch.scope import Location

logger = logging.getLogger(__name__)


@dataclass
class Info:
    """One file set of an SDK package: the main SDK or an addition."""

    name: str
    version: str = ""
    path: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    note: str = ""
    checksum: Any = None

    def clone(self) -> Info:
        """Return a copy whose headers can be changed independently."""
        return replace(self, headers=dict(self.headers))

    def label(self) -> str:
        return f"{self.name}@{self.version}"

    def storage_path(self, parent_dir: str) -> str:
        """Directory under ``parent_dir`` in which this item is stored."""
        if self.version == "":
            return os.path.join(parent_dir, self.name)
        return os.path.join(parent_dir, f"{self.name}-{self.version}")


@dataclass
class Package:
    """A main SDK together with its additional file sets."""

    main: Info
    additions: list[Info] = field(default_factory=list)

    def clone(self) -> Package:
        return Package(main=self.main.clone(), additions=[a.clone() for a in self.additions])


def location_path(location: Location, install_path: str, cur_tmp_path: str, sdk_name: str) -> str:
    """Return the directory a package is linked to for the given location."""
    if location is Location.ORIGINAL:
        return ""
    if location is Location.GLOBAL:
        return os.path.join(install_path, "current")
    if location is Location.SHELL:
        return os.path.join(cur_tmp_path, sdk_name)
    raise ValueError(f"unknown location: {location}")


def _remove_all(path: str) -> None:
    if not path:
        return
    try:
        if os.path.islink(path) or os.path.isfile(path):
            os.remove(path)
        elif os.path.isdir(path):
            shutil.rmtree(path)
    except OSError:
        pass


def _make_symlink(source: str, target: str) -> None:
    logger.debug("Create symlink %s -> %s", source, target)
    try:
        parent = os.path.dirname(target)
        if parent:
            os.makedirs(parent, exist_ok=True)
        os.symlink(source, target, target_is_directory=os.path.isdir(source))
    except OSError as exc:
        raise OSError(f"failed to create symlink, err:{exc}") from exc


@dataclass
class LocationPackage:
    """A package that is to be exposed at another location through symlinks."""

    source: Package
    to_path: str
    location: Location

    def convert_location(self) -> Package:
        """Return the package as it appears once linked into ``to_path``."""
        if self.location is Location.ORIGINAL:
            return self.source
        converted = self.source.clone()
        if not converted.additions:
            converted.main.path = self.to_path
        else:
            converted.main.path = os.path.join(self.to_path, converted.main.name)
            for addition in converted.additions:
                addition.path = os.path.join(self.to_path, addition.name)
        return converted

    def link(self) -> Package:
        """Create the symlinks for this location and return the linked package."""
        if self.location is Location.ORIGINAL:
            return self.source
        target = self.convert_location()
        logger.debug("Removing old package path: %s", self.to_path)
        _remove_all(self.to_path)
        if not target.additions:
            _make_symlink(self.source.main.path, target.main.path)
        else:
            os.makedirs(self.to_path, mode=0o755, exist_ok=True)
            _make_symlink(self.source.main.path, target.main.path)
            for source_item, target_item in zip(self.source.additions, target.additions):
                _make_symlink(source_item.path, target_item.path)
        return target


def check_package_valid(package: Package) -> bool:
    """Whether the files of the main SDK and every addition exist."""
    items = itertools.chain([package.main], package.additions)
    return all(os.path.exists(info.path) for info in items)