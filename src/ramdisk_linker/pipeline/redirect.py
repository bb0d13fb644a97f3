from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from ramdisk_linker.config import BuildConfig
from ramdisk_linker.core.manifest import ManifestLookup
from ramdisk_linker.logging import LogSink, get_logger
from ramdisk_linker.stages.apply import RedirectResult, StoreFactory, apply_redirect
from ramdisk_linker.stages.plan import plan_redirect
from ramdisk_linker.stores.ramdisk import RAMDISK_IDENTITY, RamdiskStore

log = get_logger(__name__)

def redirect(
    cfg: BuildConfig,
    *,
    cwd: Path,
    options: Optional[Dict[str, Any]] = None,
    project_root: Optional[Path] = None,
    manifests: Optional[ManifestLookup] = None,
    store_factory: StoreFactory = RamdiskStore,
    sink: Optional[LogSink] = None,
    dry_run: bool = False,
) -> RedirectResult:
    """
    Plan, then apply, a ramdisk redirect for `cfg`.

    With dry_run the plan is validated and reported but nothing on disk changes;
    the returned config is the input config unchanged.
    """
    sink = sink if sink is not None else log
    plan = plan_redirect(
        cfg,
        cwd=cwd,
        project_root=project_root,
        manifests=manifests,
        store_identity=getattr(store_factory, "identity", RAMDISK_IDENTITY),
        log=sink,
    )

    log.debug("plan: %s -> %s (cwd=%s)", plan.original_path, plan.redirect_target, cwd)

    if dry_run:
        sink.info(f"[dry-run] would link {plan.original_path} -> {plan.redirect_target}")
        return RedirectResult(plan=plan, config=cfg)

    return apply_redirect(plan, cfg, options=options, store_factory=store_factory, log=sink)
