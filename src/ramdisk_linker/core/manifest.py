from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Optional, Protocol

MANIFEST_NAMES = ("package.json",)

class ManifestLookup(Protocol):
    def find_manifest(self, start: Path) -> Optional[Path]: ...

class AncestorManifestLookup:
    """
    Walk from `start` up to the filesystem root and return the first manifest
    file found, or None.
    """

    def __init__(self, names: Iterable[str] = MANIFEST_NAMES) -> None:
        self.names = tuple(names)

    def find_manifest(self, start: Path) -> Optional[Path]:
        start = Path(start).resolve()
        for d in (start, *start.parents):
            for name in self.names:
                p = d / name
                if p.is_file():
                    return p
        return None

def read_manifest_name(p: Path) -> Optional[str]:
    """
    Name field of a JSON manifest. Unreadable or malformed manifests yield None;
    the name only namespaces the ramdisk dir, so it is never worth failing over.
    """
    try:
        obj = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return None
    if not isinstance(obj, dict):
        return None
    name = obj.get("name")
    if not isinstance(name, str) or not name.strip():
        return None
    return name.strip()
