from __future__ import annotations

import tempfile
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

from ramdisk_linker.config import BuildConfig, NAMESPACE_TAG
from ramdisk_linker.errors import UnsafeRedirectPathError
from ramdisk_linker.io.fs import ensure_dir
from ramdisk_linker.logging import get_logger

RAMDISK_IDENTITY = "ramdisk"

log = get_logger(__name__)

class BackingStore(Protocol):
    identity: str

    def apply(self, config: BuildConfig) -> BuildConfig: ...

def default_root() -> Path:
    shm = Path("/dev/shm")
    if shm.is_dir():
        return shm
    return Path(tempfile.gettempdir())

class RamdiskStore:
    """
    Memory-backed storage for build output.

    A relative config.output_path is placed under <root>/<name>/ and the
    returned config points there, with this store registered in extensions.
    Storage is a plain directory on a tmpfs mount, so sizing options such as
    "bytes" or "blockSize" are accepted but have no effect; they are logged.
    """

    identity = RAMDISK_IDENTITY

    def __init__(self, options: Optional[Dict[str, Any]] = None) -> None:
        opts = dict(options or {})
        self.name = str(opts.pop("name", NAMESPACE_TAG))
        root = opts.pop("root", None)
        self.root = Path(root).expanduser() if root else default_root()
        self.extra = opts
        if self.extra:
            log.info("ramdisk options ignored by tmpfs storage: %s", ", ".join(sorted(self.extra)))

    @property
    def disk_path(self) -> Path:
        return self.root / self.name

    def apply(self, config: BuildConfig) -> BuildConfig:
        out = Path(config.output_path)
        if out.is_absolute():
            raise UnsafeRedirectPathError(f"Ramdisk output path must be relative, got {out}")
        base = self.disk_path.resolve()
        real = (base / out).resolve()
        if not real.is_relative_to(base) or real == base:
            raise UnsafeRedirectPathError(f"Ramdisk output path {out} escapes {base}")
        ensure_dir(real)
        log.info("ramdisk storage: %s", real)
        return replace(
            config,
            output_path=real,
            extensions=config.extensions + (self.identity,),
        )
