from __future__ import annotations

import hashlib

def md5_text(s: str) -> str:
    # 128-bit digest, stable between runs so a warmed ramdisk dir is reused
    h = hashlib.md5()
    h.update(s.encode("utf-8"))
    return h.hexdigest()
