from __future__ import annotations

import os
import shutil
from pathlib import Path

def ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)

def remove_path(p: Path) -> bool:
    """
    Remove whatever sits at `p`: symlink, file or directory tree.
    Returns False when nothing was there. Other OSErrors propagate.
    """
    try:
        if p.is_symlink() or not p.is_dir():
            p.unlink()
        else:
            shutil.rmtree(p)
    except FileNotFoundError:
        return False
    return True

def create_symlink(link: Path, target: Path) -> None:
    # target is written verbatim; relative targets resolve against link.parent
    os.symlink(str(target), str(link), target_is_directory=True)
