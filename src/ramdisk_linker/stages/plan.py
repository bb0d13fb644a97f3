from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Optional

from ramdisk_linker.config import BuildConfig
from ramdisk_linker.core.hashing import md5_text
from ramdisk_linker.core.manifest import AncestorManifestLookup, ManifestLookup, read_manifest_name
from ramdisk_linker.errors import ExtensionAlreadyInstalledError, UnsafeRedirectPathError
from ramdisk_linker.logging import LogSink, get_logger
from ramdisk_linker.stores.ramdisk import RAMDISK_IDENTITY

_ERROR_INFO = (
    "The ramdisk option creates a symlink from the output path to the ramdisk build "
    "output path, and must remove any existing output path to do so."
)

@dataclass(frozen=True)
class RedirectPlan:
    original_path: Path
    redirect_target: PurePath  # relative: <project identity>/<last segment of original_path>

def _resolve(p: Path, cwd: Path) -> Path:
    return (cwd / p).resolve()

def _absolute(p: Path, cwd: Path) -> Path:
    # lexical only: a symlink left by an earlier run must not be followed
    return Path(os.path.normpath(cwd / p))

def _is_namespace_safe(name: str) -> bool:
    # must stay a relative path below the store namespace
    p = PurePath(name)
    if p.is_absolute() or p.anchor:
        return False
    parts = [part for part in name.replace("\\", "/").split("/") if part]
    return bool(parts) and all(part not in {".", ".."} for part in parts)

def resolve_project_identity(
    output_path: Path,
    start: Path,
    manifests: Optional[ManifestLookup] = None,
) -> str:
    """
    Manifest name when one is found above `start`, else md5 hex of the output path.
    Names that are absolute or climb out with ".." fall back to the hash too.
    """
    lookup = manifests if manifests is not None else AncestorManifestLookup()
    manifest = lookup.find_manifest(start)
    if manifest is not None:
        name = read_manifest_name(manifest)
        if name and _is_namespace_safe(name):
            return name
    return md5_text(str(output_path))

def plan_redirect(
    config: BuildConfig,
    *,
    cwd: Path,
    project_root: Optional[Path] = None,
    manifests: Optional[ManifestLookup] = None,
    store_identity: str = RAMDISK_IDENTITY,
    log: Optional[LogSink] = None,
) -> RedirectPlan:
    """
    Validate `config` for a ramdisk redirect and compute where the output goes.

    No filesystem writes happen here. Raises ExtensionAlreadyInstalledError when
    the backing store is already among config.extensions, and
    UnsafeRedirectPathError when the output path is the working directory or the
    build context, since applying would delete it.
    """
    log = log if log is not None else get_logger(__name__)
    cwd = Path(cwd).resolve()

    if store_identity in config.extensions:
        log.error(
            "ramdisk-linker adds the %s extension automatically. Please remove it from your config.",
            store_identity,
        )
        raise ExtensionAlreadyInstalledError(
            f"Extension {store_identity!r} exists in the specified configuration."
        )

    output_path = _absolute(Path(config.output_path), cwd)
    resolved_output = _resolve(output_path, cwd)

    if cwd.is_relative_to(resolved_output):
        raise UnsafeRedirectPathError(
            f"Cannot remove {resolved_output}: it is or contains the current working directory {cwd}. {_ERROR_INFO} "
            "Please run from another path, or choose a different output path."
        )

    if _resolve(Path(config.context_path), cwd) == resolved_output:
        raise UnsafeRedirectPathError(
            f"Cannot remove {output_path}: it is also the build context. {_ERROR_INFO} "
            "Please set the context to another path, or choose a different output path."
        )

    start = Path(project_root) if project_root is not None else cwd
    identity = resolve_project_identity(output_path, start, manifests)

    return RedirectPlan(
        original_path=output_path,
        redirect_target=PurePath(identity, output_path.name),
    )
