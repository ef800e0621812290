from lsdmeta.options import Elem, Flags, PlainColors
from lsdmeta.owner import Owner, OwnerCache, truncate

UNKNOWN_ID = 3999999999


def test_truncate_none():
    assert truncate("a", None, None) == "a"


def test_truncate_unchanged_without_marker():
    assert truncate("a", 1, None) == "a"


def test_truncate_unchanged_with_marker():
    assert truncate("a", 1, "…") == "a"


def test_truncated_without_marker():
    assert truncate("ab", 1, None) == "a"


def test_truncated_with_marker():
    assert truncate("ab", 1, "…") == "a…"


def test_from_stat(tmp_path):
    path = tmp_path / "f"
    path.touch()
    st = path.stat()
    owner = Owner.from_stat(st)
    assert (owner.user, owner.group) == (st.st_uid, st.st_gid)


def test_unknown_ids_render_as_numbers():
    owner = Owner(UNKNOWN_ID, UNKNOWN_ID)
    cache = OwnerCache()
    colors = PlainColors()
    assert owner.render_user(colors, cache, Flags()) == str(UNKNOWN_ID)
    assert owner.render_group(colors, cache, Flags()) == str(UNKNOWN_ID)


def test_cache_is_stable():
    cache = OwnerCache()
    first = cache.user_name(UNKNOWN_ID)
    assert cache.user_name(UNKNOWN_ID) == first == str(UNKNOWN_ID)


def test_named_owner_truncated_and_coloured():
    owner = Owner("someone", "staffers")
    flags = Flags(truncate_owner_after=3, truncate_owner_marker="…")
    colors = PlainColors({Elem.USER: 230, Elem.GROUP: 187})
    cache = OwnerCache()
    assert owner.render_user(colors, cache, flags) == "\x1b[38;5;230msom…\x1b[39m"
    assert owner.render_group(colors, cache, flags) == "\x1b[38;5;187msta…\x1b[39m"