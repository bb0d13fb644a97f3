from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from ramdisk_linker.errors import OptionsError

# Namespace tag the backing store files our redirects under. A caller-supplied
# "name" option is always replaced by this.
NAMESPACE_TAG = "wps"

@dataclass(frozen=True)
class BuildConfig:
    output_path: Path
    context_path: Path
    extensions: Tuple[str, ...] = ()  # identities of extensions already installed

    @classmethod
    def from_paths(cls, output: str | Path, context: str | Path, cwd: Path, extensions=()) -> "BuildConfig":
        cwd = Path(cwd)
        return cls(
            output_path=cwd / Path(output).expanduser(),
            context_path=cwd / Path(context).expanduser(),
            extensions=tuple(extensions),
        )

def merge_store_options(options: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Pass every caller key through, except "name" which is forced to NAMESPACE_TAG.
    Anything that is not a mapping is treated as no options at all.
    """
    base = dict(options) if isinstance(options, dict) else {}
    base["name"] = NAMESPACE_TAG
    return base

def load_options(p: Path) -> Dict[str, Any]:
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise OptionsError(f"Cannot read options file {p}: {e}") from e
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise OptionsError(f"Malformed options file {p}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise OptionsError(f"Malformed options file {p}: top-level must be a mapping")
    return {str(k): v for k, v in data.items()}
