from ramdisk_linker.core.hashing import md5_text

def test_md5_text_is_stable_128_bit_hex() -> None:
    a = md5_text("/proj/dist")
    assert a == md5_text("/proj/dist")
    assert len(a) == 32
    int(a, 16)

def test_md5_text_differs_per_path() -> None:
    assert md5_text("/proj/dist") != md5_text("/proj/build")
    assert md5_text("/a/dist") != md5_text("/b/dist")

def test_md5_text_known_value() -> None:
    assert md5_text("") == "d41d8cd98f00b204e9800998ecf8427e"
