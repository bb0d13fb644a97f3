from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from ramdisk_linker.config import BuildConfig, load_options
from ramdisk_linker.errors import RamdiskLinkerError
from ramdisk_linker.logging import get_logger
from ramdisk_linker.pipeline.redirect import redirect

log = get_logger(__name__)

def _status(output: Path) -> int:
    if output.is_symlink():
        log.info("%s -> %s (resolves to %s)", output, os.readlink(output), output.resolve())
    elif output.exists():
        log.info("%s is a regular path, not redirected", output)
    else:
        log.info("%s does not exist", output)
    return 0

def main(argv=None) -> int:
    p = argparse.ArgumentParser(prog="ramdisk-linker")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    r = sub.add_parser("redirect", help="Move a build output dir onto a ramdisk behind a symlink")
    r.add_argument("--output", required=True, help="Build output path (replaced by a symlink)")
    r.add_argument("--context", default=None, help="Build context / source root (default: cwd)")
    r.add_argument("--project-root", default=None, help="Where to start looking for package.json (default: cwd)")
    r.add_argument("--options", default=None, help="YAML file with backing store options")
    r.add_argument("--root", default=None, help="Backing storage root (default: /dev/shm or the temp dir)")
    r.add_argument("--dry-run", action="store_true", help="Validate and report; no writes")

    s = sub.add_parser("status", help="Show where an output path currently points")
    s.add_argument("--output", required=True, help="Build output path")

    args = p.parse_args(argv)
    if args.verbose:
        get_logger(level=logging.DEBUG)
    cwd = Path.cwd()

    if args.cmd == "status":
        return _status(cwd / Path(args.output).expanduser())

    try:
        options = load_options(Path(args.options).expanduser()) if args.options else {}
    except RamdiskLinkerError as e:
        log.error(str(e))
        return 2
    if args.root:
        options["root"] = args.root

    cfg = BuildConfig.from_paths(
        output=args.output,
        context=args.context if args.context is not None else cwd,
        cwd=cwd,
    )
    project_root = Path(args.project_root).expanduser().resolve() if args.project_root else None

    try:
        result = redirect(
            cfg,
            cwd=cwd,
            options=options,
            project_root=project_root,
            dry_run=bool(args.dry_run),
        )
    except RamdiskLinkerError as e:
        log.error(str(e))
        return 2
    except OSError as e:
        log.error(f"filesystem error: {e}")
        return 1

    log.info(
        "done: original=%s target=%s output=%s dry_run=%s",
        result.plan.original_path, result.plan.redirect_target,
        result.config.output_path, bool(args.dry_run),
    )
    return 0
