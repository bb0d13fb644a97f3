from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from ramdisk_linker.config import BuildConfig, merge_store_options
from ramdisk_linker.io.fs import create_symlink, remove_path
from ramdisk_linker.logging import LogSink, get_logger
from ramdisk_linker.stages.plan import RedirectPlan
from ramdisk_linker.stores.ramdisk import BackingStore, RamdiskStore

StoreFactory = Callable[[Dict[str, Any]], BackingStore]

@dataclass(frozen=True)
class RedirectResult:
    plan: RedirectPlan
    config: BuildConfig  # output_path is where the build really writes

def apply_redirect(
    plan: RedirectPlan,
    config: BuildConfig,
    *,
    options: Optional[Dict[str, Any]] = None,
    store_factory: StoreFactory = RamdiskStore,
    log: Optional[LogSink] = None,
) -> RedirectResult:
    """
    Hand the output over to the backing store, then replace whatever is at
    plan.original_path with a symlink to the store's directory.

    Destructive: the original path is removed. Only call with a plan from
    plan_redirect. OSErrors propagate; if the symlink cannot be created after
    removal, nothing is left at the original path.
    """
    log = log if log is not None else get_logger(__name__)

    staged = replace(config, output_path=Path(plan.redirect_target))
    log.info("Ramdisk enabled")

    store = store_factory(merge_store_options(options))
    final = store.apply(staged)

    if remove_path(plan.original_path):
        log.info("removed existing output path: %s", plan.original_path)

    create_symlink(plan.original_path, Path(final.output_path))
    log.info("linked %s -> %s", plan.original_path, final.output_path)

    return RedirectResult(plan=plan, config=final)
