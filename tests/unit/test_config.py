from pathlib import Path

import pytest

from ramdisk_linker.config import NAMESPACE_TAG, BuildConfig, load_options, merge_store_options
from ramdisk_linker.errors import OptionsError

def test_merge_store_options_forces_name_and_keeps_other_keys() -> None:
    opts = {"name": "mine", "bytes": 1024, "blockSize": 512}
    merged = merge_store_options(opts)
    assert merged == {"name": NAMESPACE_TAG, "bytes": 1024, "blockSize": 512}
    assert opts["name"] == "mine"

def test_merge_store_options_without_options() -> None:
    assert merge_store_options(None) == {"name": "wps"}
    assert merge_store_options("not a mapping") == {"name": "wps"}

def test_build_config_from_paths_anchors_relative_paths(tmp_path: Path) -> None:
    cfg = BuildConfig.from_paths("dist", "src", cwd=tmp_path, extensions=["x"])
    assert cfg.output_path == tmp_path / "dist"
    assert cfg.context_path == tmp_path / "src"
    assert cfg.extensions == ("x",)

def test_load_options_reads_yaml_mapping(tmp_path: Path) -> None:
    p = tmp_path / "ramdisk.yaml"
    p.write_text("root: /mnt/fast\nbytes: 2048\n", encoding="utf-8")
    assert load_options(p) == {"root": "/mnt/fast", "bytes": 2048}

def test_load_options_empty_file(tmp_path: Path) -> None:
    p = tmp_path / "ramdisk.yaml"
    p.write_text("", encoding="utf-8")
    assert load_options(p) == {}

@pytest.mark.parametrize("text", ["- a\n- b\n", "root: [unclosed\n"])
def test_load_options_rejects_malformed(tmp_path: Path, text: str) -> None:
    p = tmp_path / "ramdisk.yaml"
    p.write_text(text, encoding="utf-8")
    with pytest.raises(OptionsError):
        load_options(p)

def test_load_options_missing_file(tmp_path: Path) -> None:
    with pytest.raises(OptionsError):
        load_options(tmp_path / "nope.yaml")
