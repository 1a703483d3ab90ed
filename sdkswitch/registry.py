"""Data carried by the remote plugin registry: its index and plugin manifests."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class RegistryIndexItem:
    """One plugin listed in the registry index."""

    name: str = ""
    desc: str = ""
    homepage: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RegistryIndexItem:
        return cls(
            name=str(data.get("name", "")),
            desc=str(data.get("desc", "")),
            homepage=str(data.get("homepage", "")),
        )

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "desc": self.desc, "homepage": self.homepage}


@dataclass(frozen=True)
class RegistryPluginManifest:
    """The manifest describing one release of a remote plugin."""

    name: str = ""
    version: str = ""
    license: str = ""
    author: str = ""
    download_url: str = ""
    min_runtime_version: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RegistryPluginManifest:
        return cls(
            name=str(data.get("name", "")),
            version=str(data.get("version", "")),
            license=str(data.get("license", "")),
            author=str(data.get("author", "")),
            download_url=str(data.get("downloadUrl", "")),
            min_runtime_version=str(data.get("minRuntimeVersion", "")),
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "version": self.version,
            "license": self.license,
            "author": self.author,
            "downloadUrl": self.download_url,
            "minRuntimeVersion": self.min_runtime_version,
        }


def _load(data: Any) -> Any:
    if isinstance(data, (str, bytes, bytearray)):
        return json.loads(data)
    return data


def parse_index(data: Any) -> list[RegistryIndexItem]:
    """Parse a registry index given as JSON text or as already decoded data."""
    decoded = _load(data)
    if not isinstance(decoded, list):
        raise ValueError("registry index must be a JSON array")
    items = []
    for entry in decoded:
        if not isinstance(entry, Mapping):
            raise ValueError("registry index entries must be JSON objects")
        items.append(RegistryIndexItem.from_dict(entry))
    return items


def parse_manifest(data: Any) -> RegistryPluginManifest:
    """Parse a plugin manifest given as JSON text or as already decoded data."""
    decoded = _load(data)
    if not isinstance(decoded, Mapping):
        raise ValueError("plugin manifest must be a JSON object")
    return RegistryPluginManifest.from_dict(decoded)