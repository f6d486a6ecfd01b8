from vecindex.binaryset import BinarySet


def test_append_and_get_round_trip():
    bs = BinarySet()
    bs.append("index", b"\x01\x02\x03")
    assert bs.get("index") == b"\x01\x02\x03"
    assert "index" in bs
    assert len(bs) == 1


def test_missing_name_gives_none():
    bs = BinarySet()
    assert bs.get("absent") is None
    assert "absent" not in bs


def test_append_replaces_existing():
    bs = BinarySet()
    bs.append("a", b"old")
    bs.append("a", b"new")
    assert bs.get("a") == b"new"
    assert len(bs) == 1


def test_append_copies_data():
    buf = bytearray(b"abc")
    bs = BinarySet()
    bs.append("x", buf)
    buf[0] = ord("z")
    assert bs.get("x") == b"abc"


def test_get_any_returns_first_match_in_order():
    bs = BinarySet()
    bs.append("second", b"2")
    bs.append("third", b"3")
    assert bs.get_any(["first", "third", "second"]) == b"3"
    assert bs.get_any(["none", "missing"]) is None


def test_erase_returns_removed():
    bs = BinarySet()
    bs.append("a", b"data")
    assert bs.erase("a") == b"data"
    assert "a" not in bs
    assert bs.erase("a") is None


def test_names_sorted_and_clear():
    bs = BinarySet()
    for name in ["b", "c", "a"]:
        bs.append(name, name.encode())
    assert bs.names() == ["a", "b", "c"]
    bs.clear()
    assert len(bs) == 0
    assert bs.names() == []